import io

import numpy as np
import pytest
from PIL import Image as PILImage

from rasterkit import (
    FileFormat, GrayPixel16, Image, Pixel8, Pixel16, PixelFormat, ReadConvert, WriteConvert,
)
from rasterkit.io import (
    CantOpenFileError, ChannelLayout, ImageIOError, LibraryError, NotAContainerFileError,
    decode_png, encode_png, image_from_rows, image_to_rows,
    load_image, load_image_from_bytes, save_image, save_image_to_bytes, save_image_to_stream,
)
from rasterkit.io.rows import RowData


class TestRows:
    def test_image_from_rgb_rows(self):
        rows = [[1, 2, 3, 4, 5, 6], [7, 8, 9, 10, 11, 12]]
        img = image_from_rows(2, 2, 8, ChannelLayout.RGB, rows)
        assert img.current_pixel_format == PixelFormat.RGBA8
        assert img.file_format == FileFormat.RGBA8
        assert img.get8(1, 0) == Pixel8(4, 5, 6, 255)
        assert img.get8(0, 1) == Pixel8(7, 8, 9, 255)

    def test_image_from_gray_alpha_rows(self):
        rows = [[100, 50, 200, 255]]
        img = image_from_rows(2, 1, 8, ChannelLayout.GRAY_ALPHA, rows)
        assert img.current_pixel_format == PixelFormat.GA8
        assert img.file_format == FileFormat.GA8
        assert img.get8(0, 0) == Pixel8(100, 100, 100, 50)
        assert img.get8(1, 0) == Pixel8(200, 200, 200, 255)

    def test_gray_16_rows_with_conversion(self):
        rows = [[0x1234, 0xffff]]
        img = image_from_rows(2, 1, 16, ChannelLayout.GRAY, rows, ReadConvert.FLOAT)
        assert img.current_pixel_format == PixelFormat.GAF
        assert img.file_format == FileFormat.GA16
        assert img.get_gray16(0, 0).value == (0x1234, 0xffff)
        assert img.get_gray16(1, 0).value == (0xffff, 0xffff)

    def test_explicit_pixel_format_wins(self):
        img = image_from_rows(1, 1, 8, ChannelLayout.RGBA, [[1, 2, 3, 4]], pixel_format=PixelFormat.RGBA16)
        assert img.current_pixel_format == PixelFormat.RGBA16
        assert img.get16(0, 0) == Pixel16(0x0101, 0x0202, 0x0303, 0x0404)

    def test_bad_bit_depth(self):
        with pytest.raises(ValueError):
            image_from_rows(1, 1, 4, ChannelLayout.GRAY, [[1]])

    def test_opaque_image_drops_alpha(self, checkerboard):
        data = image_to_rows(checkerboard())
        assert data.layout == ChannelLayout.RGB
        assert data.bit_depth == 8
        rows = [list(row) for row in data.rows]
        assert len(rows) == 4
        assert rows[0][:6] == [10, 20, 30, 200, 150, 100]

    def test_translucent_gray_keeps_alpha(self):
        img = Image(2, 1, Pixel8(255, 255, 255, 128), PixelFormat.GA16)
        data = image_to_rows(img)
        assert data.layout == ChannelLayout.GRAY_ALPHA
        assert data.bit_depth == 16
        assert [list(row) for row in data.rows] == [[65535, 0x8080, 65535, 0x8080]]

    def test_original_conversion_uses_file_format(self):
        img = image_from_rows(1, 1, 8, ChannelLayout.GRAY, [[77]])
        img.convert_to_pixel_format(PixelFormat.RGBAF)
        assert image_to_rows(img, conversion=WriteConvert.ORIGINAL).layout == ChannelLayout.GRAY
        assert image_to_rows(img).bit_depth == 16

    def test_original_conversion_without_file_format(self):
        img = Image(1, 1, Pixel8(1, 2, 3), PixelFormat.GA8)
        data = image_to_rows(img, conversion=WriteConvert.ORIGINAL)
        assert data.layout == ChannelLayout.GRAY


class TestCodec:
    def test_encode_empty(self):
        with pytest.raises(ValueError):
            encode_png(RowData(0, 0, 8, ChannelLayout.RGB, []))

    def test_decode_rejects_other_data(self):
        with pytest.raises(NotAContainerFileError):
            decode_png(b"GIF89a\x01\x00\x01\x00")
        with pytest.raises(NotAContainerFileError):
            decode_png(b"")

    def test_decode_truncated_data(self):
        rng = np.random.default_rng(0)
        noise = rng.integers(0, 256, size=(64, 64, 4), dtype=np.uint8)
        out = io.BytesIO()
        PILImage.fromarray(noise).save(out, format="PNG")
        data = out.getvalue()
        with pytest.raises(LibraryError):
            decode_png(data[:len(data) // 2])

    def test_decode_palette_image(self):
        palette = PILImage.new("P", (2, 1))
        palette.putpalette([255, 0, 0, 0, 0, 255] + [0] * 762)
        palette.putpixel((1, 0), 1)
        out = io.BytesIO()
        palette.save(out, format="PNG")
        width, height, bit_depth, layout, rows = decode_png(out.getvalue())
        assert (width, height, bit_depth, layout) == (2, 1, 8, ChannelLayout.RGB)
        assert list(rows[0]) == [255, 0, 0, 0, 0, 255]

    def test_errors_share_a_base(self):
        assert issubclass(CantOpenFileError, ImageIOError)
        assert issubclass(NotAContainerFileError, ImageIOError)
        assert issubclass(LibraryError, ImageIOError)


class TestRoundTrip:
    def test_rgba8_with_alpha(self, checkerboard):
        img = checkerboard()
        img.set(0, 0, Pixel8(1, 2, 3, 4))
        loaded = load_image_from_bytes(save_image_to_bytes(img))
        assert loaded.current_pixel_format == PixelFormat.RGBA8
        assert loaded.file_format == FileFormat.RGBA8
        assert np.array_equal(loaded.pixel_array(), img.pixel_array())

    def test_gray_alpha(self):
        img = Image(3, 2, Pixel8(200, 100, 50, 128), PixelFormat.GA8)
        loaded = load_image_from_bytes(save_image_to_bytes(img))
        assert loaded.current_pixel_format == PixelFormat.GA8
        assert np.array_equal(loaded.pixel_array(), img.pixel_array())

    def test_gray_16(self):
        img = Image(2, 1, Pixel8(0, 0, 0), PixelFormat.GA16)
        img.set(0, 0, GrayPixel16(1000))
        img.set(1, 0, GrayPixel16(40000))
        loaded = load_image_from_bytes(save_image_to_bytes(img))
        assert loaded.current_pixel_format == PixelFormat.GA16
        assert loaded.get_gray16(0, 0) == GrayPixel16(1000)
        assert loaded.get_gray16(1, 0) == GrayPixel16(40000)

    def test_16_bit_color_is_downgraded(self):
        img = Image(2, 2, Pixel16(1000, 40000, 65535, 30000), PixelFormat.RGBA16)
        with pytest.warns(UserWarning, match="16-bit"):
            data = save_image_to_bytes(img)
        loaded = load_image_from_bytes(data)
        assert loaded.file_format == FileFormat.RGBA8
        assert loaded.get8(1, 1) == Pixel8(3, 156, 255, 117)

    def test_read_conversion(self, checkerboard):
        data = save_image_to_bytes(checkerboard())
        gray = load_image_from_bytes(data, ReadConvert.GRAYSCALE)
        assert gray.current_pixel_format == PixelFormat.GA8
        assert gray.file_format == FileFormat.RGBA8
        floats = load_image_from_bytes(data, ReadConvert.FLOAT)
        assert floats.current_pixel_format == PixelFormat.RGBAF
        assert floats.get8(1, 0) == Pixel8(200, 150, 100, 255)

    def test_stream(self, checkerboard):
        stream = io.BytesIO()
        save_image_to_stream(checkerboard(), stream)
        assert stream.getvalue().startswith(b"\x89PNG")
        loaded = load_image_from_bytes(stream.getvalue())
        assert (loaded.width, loaded.height) == (5, 4)

    def test_file(self, tmp_path, checkerboard):
        path = tmp_path / "board.png"
        img = checkerboard()
        save_image(img, path)
        loaded = load_image(path)
        assert np.array_equal(loaded.pixel_array(), img.pixel_array())
        loaded = load_image(str(path), pixel_format=PixelFormat.GA16)
        assert loaded.current_pixel_format == PixelFormat.GA16


class TestFileErrors:
    def test_missing_file(self, tmp_path):
        path = tmp_path / "missing.png"
        with pytest.raises(CantOpenFileError) as info:
            load_image(path)
        assert info.value.file_name == str(path)

    def test_unwritable_path(self, tmp_path, checkerboard):
        path = tmp_path / "no_such_dir" / "out.png"
        with pytest.raises(CantOpenFileError):
            save_image(checkerboard(), path)

    def test_not_a_png_file(self, tmp_path):
        path = tmp_path / "text.png"
        path.write_bytes(b"hello, world")
        with pytest.raises(NotAContainerFileError):
            load_image(path)

    def test_empty_image_is_not_saved(self, tmp_path):
        path = tmp_path / "empty.png"
        with pytest.raises(ValueError):
            save_image(Image(), path)
        assert not path.exists()
