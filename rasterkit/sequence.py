"""
Color Sequence Module
=====================

A :class:`ColorSequence` is an ordered list of colors, each followed by a
segment of a given length, that can be sampled at any position to get an
interpolated color. It is the building block for gradients drawn with the
:class:`~rasterkit.image.Image` line and rectangle API.

Mapping types
-------------
- ``CLAMP``: positions before the start or past the end give the first or
  last color.
- ``CYCLIC``: the positions wrap; the last color is where the cycle closes.
- ``REPEATING``: the positions wrap and the last color fades back into the
  first one.
- ``MIRRORING``: the sequence is played forwards and then backwards.
"""

from __future__ import annotations
import warnings
from enum import Enum
from typing import Any, Iterable, List, NamedTuple, Optional

import numpy as np
from boundednumbers.functions import cyclic_wrap_float

from .pixels.pixel_base import PixelBase
from .pixels.pixel import Pixel8

MIN_TOTAL_LENGTH = 1.0e-6


class MappingType(str, Enum):
    CLAMP = "clamp"
    CYCLIC = "cyclic"
    REPEATING = "repeating"
    MIRRORING = "mirroring"


class SequenceEntry(NamedTuple):
    color: PixelBase
    length: float = 1.0


class ColorSequence:
    """
    Sample an interpolated color at any position along a list of entries.

    Args:
        entries: pixels, or ``(pixel, length)`` pairs. Every color is converted
            to the precision of ``pixel_class`` (the class of the first color
            when not given).
        mapping_type: how positions outside the sequence are mapped.
        normalized_mapping: when True, position 1.0 means the end of the
            sequence; otherwise positions are in length units.
        alpha_aware_interpolation: interpolate with alpha weighting.
        pixel_class: the pixel class returned by :meth:`sample`.

    Examples:
        >>> seq = ColorSequence([Pixel8(0, 0, 0), Pixel8(255, 255, 255)],
        ...                     mapping_type=MappingType.CLAMP)
        >>> seq.sample(0.5)
        Pixel8(127, 127, 127, 255)
    """

    def __init__(
        self,
        entries: Iterable[Any] = (),
        mapping_type: MappingType = MappingType.REPEATING,
        normalized_mapping: bool = True,
        alpha_aware_interpolation: bool = True,
        pixel_class: Optional[type[PixelBase]] = None,
    ) -> None:
        entries = [self._as_entry(entry) for entry in entries]
        if pixel_class is None:
            pixel_class = entries[0].color.__class__ if entries else Pixel8
        self.pixel_class = pixel_class
        self.entries = [
            SequenceEntry(pixel_class(entry.color), float(entry.length))
            for entry in entries
        ]
        self.mapping_type = MappingType(mapping_type)
        self.normalized_mapping = normalized_mapping
        self.alpha_aware_interpolation = alpha_aware_interpolation
        self.total_length = self._sum_of_lengths()

    @staticmethod
    def _as_entry(entry: Any) -> SequenceEntry:
        if isinstance(entry, SequenceEntry):
            return entry
        if isinstance(entry, PixelBase):
            return SequenceEntry(entry)
        color, length = entry
        return SequenceEntry(color, length)

    def _sum_of_lengths(self) -> float:
        if not self.entries:
            return MIN_TOTAL_LENGTH
        if self.mapping_type == MappingType.REPEATING:
            lengths = [entry.length for entry in self.entries]
        else:
            lengths = [entry.length for entry in self.entries[:-1]]
        total = sum(lengths)
        if total < MIN_TOTAL_LENGTH:
            if len(self.entries) > 1:
                warnings.warn(
                    f"ColorSequence total length {total!r} is below {MIN_TOTAL_LENGTH}; "
                    "using the minimum instead",
                    stacklevel=3,
                )
            total = MIN_TOTAL_LENGTH
        return total

    def set_settings(
        self,
        mapping_type: Optional[MappingType] = None,
        normalized_mapping: Optional[bool] = None,
        alpha_aware_interpolation: Optional[bool] = None,
    ) -> None:
        if mapping_type is not None:
            self.mapping_type = MappingType(mapping_type)
        if normalized_mapping is not None:
            self.normalized_mapping = normalized_mapping
        if alpha_aware_interpolation is not None:
            self.alpha_aware_interpolation = alpha_aware_interpolation
        self.total_length = self._sum_of_lengths()

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return (
            f"ColorSequence(entries={len(self.entries)}, "
            f"mapping_type={self.mapping_type.name})"
        )

    def _map_position(self, position: float) -> float:
        total = self.total_length
        if self.mapping_type == MappingType.MIRRORING:
            period = 2.0 * total
            position = position % period
            if position >= total:
                position = period - position
            return position
        return cyclic_wrap_float(position, 0.0, total)

    def _factor(self, factor: float):
        if self.pixel_class._type is float:
            return factor
        return int(factor * self.pixel_class.maximum)

    def sample(self, position: float) -> PixelBase:
        """Interpolated color at ``position``."""
        entries = self.entries
        if not entries:
            return self.pixel_class()
        if len(entries) == 1:
            return entries[0].color

        total = self.total_length
        if self.normalized_mapping:
            position *= total

        last = len(entries) - 1
        if self.mapping_type == MappingType.CLAMP:
            if position <= 0.0:
                return entries[0].color
            if position >= total:
                return entries[last].color

        max_index = last - 1 if self.mapping_type == MappingType.CYCLIC else last
        position = self._map_position(position)

        index = 0
        start, end = 0.0, entries[0].length
        while index < max_index and end < position:
            start = end
            index += 1
            end += entries[index].length

        color = entries[index].color
        segment = end - start
        if segment < MIN_TOTAL_LENGTH:
            return color
        next_color = entries[0].color if index == last else entries[index + 1].color
        factor = self._factor((position - start) / segment)

        if self.alpha_aware_interpolation:
            return color.interpolated(next_color, factor)
        return color.raw_interpolated(next_color, factor)

    def samples(self, count: int) -> List[PixelBase]:
        """``count`` evenly spaced samples from the start to the end of the sequence."""
        if count <= 0:
            return []
        positions = np.linspace(0.0, 1.0, count)
        if not self.normalized_mapping:
            positions = positions * self.total_length
        return [self.sample(float(p)) for p in positions]
