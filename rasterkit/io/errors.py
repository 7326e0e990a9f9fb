class ImageIOError(Exception):
    """Base class for every error raised while loading or saving images."""


class CantOpenFileError(ImageIOError):
    def __init__(self, file_name) -> None:
        self.file_name = file_name
        super().__init__(f"Can't open file: {file_name}")


class NotAContainerFileError(ImageIOError):
    def __init__(self, message: str = "Data is not a PNG file") -> None:
        super().__init__(message)


class LibraryError(ImageIOError):
    """The codec rejected the data; ``message`` is the codec's own description."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
