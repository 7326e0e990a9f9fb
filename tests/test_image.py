import copy

import numpy as np
import pytest

from rasterkit import (
    Image, Pixel8, Pixel16, PixelF, GrayPixel8, GrayPixel16, PixelFormat, FileFormat, Precision, HSV, HSL, ColorSpace,
)


def coordinate_image(width, height, pixel_format=PixelFormat.RGBA8):
    """Image whose pixel (x, y) is (x, y, 0, 250)."""
    img = Image(width, height, Pixel8(), pixel_format)
    for y in range(height):
        for x in range(width):
            img.set(x, y, Pixel8(x, y, 0, 250))
    return img


class TestLifecycle:
    def test_empty_image(self):
        img = Image()
        assert img.is_empty
        assert (img.width, img.height) == (0, 0)
        assert img.current_pixel_format == PixelFormat.RGBA8
        assert img.get8(0, 0) == Pixel8(0, 0, 0, 0)
        assert img.get_gray8(0, 0) == GrayPixel8(0, 0)
        img.set(0, 0, Pixel8(1, 2, 3))
        img.draw_hor_line(0, 0, 5, Pixel8(1, 2, 3))
        img.fill(Pixel8(1, 2, 3))
        img.resize_canvas(1, 1, 4, 4)
        assert img.is_empty

    def test_zero_dimension_owns_nothing(self):
        assert Image(0, 5).is_empty
        assert Image(5, -1).is_empty

    def test_default_format_follows_pixel_precision(self):
        assert Image(2, 2).current_pixel_format == PixelFormat.RGBA8
        assert Image(2, 2, Pixel16()).current_pixel_format == PixelFormat.RGBA16
        assert Image(2, 2, PixelF()).current_pixel_format == PixelFormat.RGBAF
        assert Image(2, 2).get8(1, 1) == Pixel8(0, 0, 0, 255)

    def test_default_format_of_gray_pixel_is_gray(self):
        assert Image(2, 2, GrayPixel8(100)).current_pixel_format == PixelFormat.GA8
        img = Image(2, 2, GrayPixel16(1000, 2000))
        assert img.current_pixel_format == PixelFormat.GA16
        assert img.get_gray16(1, 1) == GrayPixel16(1000, 2000)

    def test_new_image_replaces_contents(self):
        img = Image(3, 3, Pixel8(1, 1, 1))
        img.file_format = FileFormat.GA8
        img.new_image(5, 4, Pixel8(9, 9, 9), PixelFormat.GA16)
        assert (img.width, img.height) == (5, 4)
        assert img.current_pixel_format == PixelFormat.GA16
        assert img.file_format == FileFormat.NONE
        assert img.get8(4, 3) == Pixel8(9, 9, 9)

    def test_clone_is_deep(self):
        img = Image(2, 2, Pixel8(1, 1, 1))
        img.file_format = FileFormat.RGBA16
        for other in (img.clone(), copy.copy(img), copy.deepcopy(img)):
            other.set(0, 0, Pixel8(2, 2, 2))
            assert img.get8(0, 0) == Pixel8(1, 1, 1)
            assert other.file_format == FileFormat.RGBA16

    def test_move_leaves_source_empty(self):
        src = Image(3, 2, Pixel8(7, 7, 7))
        dest = Image(1, 1)
        dest.move_from(src)
        assert src.is_empty and (src.width, src.height) == (0, 0)
        assert (dest.width, dest.height) == (3, 2)
        assert dest.get8(2, 1) == Pixel8(7, 7, 7)

    def test_swap(self):
        a = Image(1, 1, Pixel8(1, 1, 1))
        b = Image(2, 2, Pixel16(2, 2, 2))
        a.swap(b)
        assert a.current_pixel_format == PixelFormat.RGBA16 and a.width == 2
        assert b.get8(0, 0) == Pixel8(1, 1, 1)

    def test_clear(self):
        img = Image(2, 2)
        img.clear()
        assert img.is_empty


class TestFormats:
    @pytest.mark.parametrize("pixel_format,gray,precision", [
        (PixelFormat.GA8, True, Precision.BIT8),
        (PixelFormat.GA16, True, Precision.BIT16),
        (PixelFormat.GAF, True, Precision.FLOAT),
        (PixelFormat.RGBA8, False, Precision.BIT8),
        (PixelFormat.RGBA16, False, Precision.BIT16),
        (PixelFormat.RGBAF, False, Precision.FLOAT),
    ])
    def test_predicates(self, pixel_format, gray, precision):
        img = Image(1, 1, Pixel8(), pixel_format)
        assert img.is_grayscale == gray
        assert img.is_rgba == (not gray)
        assert img.precision == precision
        assert img.is_8bit == (precision == Precision.BIT8)
        assert img.is_16bit == (precision == Precision.BIT16)
        assert img.is_float == (precision == Precision.FLOAT)

    def test_convert_keeps_pixels_and_file_format(self):
        img = coordinate_image(4, 3)
        img.file_format = FileFormat.RGBA8
        img.convert_to_pixel_format(PixelFormat.RGBA16)
        assert img.current_pixel_format == PixelFormat.RGBA16
        assert img.file_format == FileFormat.RGBA8
        img.convert_to_pixel_format(PixelFormat.RGBAF)
        img.convert_to_pixel_format(PixelFormat.RGBA8)
        assert img.get8(3, 2) == Pixel8(3, 2, 0, 250)

    def test_convert_to_gray(self):
        img = Image(2, 2, Pixel8(120, 230, 210, 215))
        img.convert_to_pixel_format(PixelFormat.GA8)
        assert img.get8(1, 1) == Pixel8(211, 211, 211, 215)

    def test_file_format_setter_ignored_when_empty(self):
        img = Image()
        img.file_format = FileFormat.GA16
        assert img.file_format == FileFormat.NONE


class TestPixelAccess:
    def test_out_of_bounds(self):
        img = Image(3, 3, Pixel8(1, 2, 3))
        for x, y in ((-1, 0), (0, -1), (3, 0), (0, 3)):
            assert img.get8(x, y) == Pixel8(0, 0, 0, 0)
            assert img.get16(x, y) == Pixel16(0, 0, 0, 0)
            assert img.get_f(x, y) == PixelF(0.0, 0.0, 0.0, 0.0)
            img.set(x, y, Pixel8(9, 9, 9))
        assert all(img.get8(x, y) == Pixel8(1, 2, 3) for x in range(3) for y in range(3))

    def test_get_in_every_precision(self):
        img = Image(1, 1, Pixel8(1, 2, 3, 4))
        assert img.get16(0, 0) == Pixel16(257, 514, 771, 1028)
        assert img.get_gray16(0, 0).a == 1028
        assert img.get_gray_f(0, 0).a == pytest.approx(4 / 255)

    @pytest.mark.parametrize("pixel_format", [PixelFormat.GA8, PixelFormat.GA16, PixelFormat.GAF])
    @pytest.mark.parametrize("value", [
        HSV(0.6, 0.5, 0.8),
        HSL(0.1, 0.7, 0.4, alpha=0.6),
        PixelF(0.2, 0.4, 0.6, 0.9).to_xyz(),
    ])
    def test_gray_image_accepts_color_space_values(self, pixel_format, value):
        img = Image(2, 2, Pixel8(), pixel_format)
        img.set(1, 1, value)
        expected = Image(1, 1, value.to_pixel(), pixel_format)
        assert img.get8(1, 1) == expected.get8(0, 0)
        assert img.get8(0, 0) == Pixel8(0, 0, 0, 255)
        img.fill(value)
        assert img.get8(0, 0) == expected.get8(0, 0)
        assert img.is_grayscale

    def test_draw_pixel_blends(self):
        img = Image(2, 2, Pixel8(62, 150, 200, 220))
        img.draw_pixel(1, 0, Pixel8(177, 122, 21, 150))
        assert img.get8(1, 0) == Pixel8(133, 132, 88, 241)
        assert img.get8(0, 0) == Pixel8(62, 150, 200, 220)


class TestPutImage:
    def test_draw_image_scenario(self):
        img = Image(20, 20, Pixel8(62, 150, 200, 220))
        patch = Image(10, 10, Pixel8(177, 122, 21, 150))
        img.draw_image(5, 5, patch)
        for y in range(20):
            for x in range(20):
                expected = (Pixel8(133, 132, 88, 241) if 5 <= x < 15 and 5 <= y < 15
                            else Pixel8(62, 150, 200, 220))
                assert img.get8(x, y) == expected

    @pytest.mark.parametrize("dest_pixel,src_pixel,expected", [
        (Pixel16(2062, 50150, 24200, 18220), Pixel16(42177, 23122, 32321, 21150),
         Pixel16(27395, 33080, 29328, 33490)),
    ])
    def test_draw_image_16bit(self, dest_pixel, src_pixel, expected):
        img = Image(20, 20, dest_pixel)
        img.draw_image(5, 5, Image(10, 10, src_pixel))
        assert img.get16(10, 10) == expected
        assert img.get16(4, 4) == dest_pixel

    def test_draw_image_float(self):
        img = Image(20, 20, PixelF(0.15, 0.6, 1.0, 0.9))
        img.draw_image(5, 5, Image(10, 10, PixelF(0.8, 0.9, 0.25, 0.77)))
        assert img.get_f(14, 14).value == pytest.approx((0.6623, 0.8364, 0.4089, 0.977), abs=1e-3)

    def test_negative_offset_copies_overlap_only(self):
        img = Image(10, 10, Pixel8(1, 1, 1))
        img.put_image(-5, -5, Image(10, 10, Pixel8(2, 2, 2)))
        for y in range(10):
            for x in range(10):
                expected = Pixel8(2, 2, 2) if x < 5 and y < 5 else Pixel8(1, 1, 1)
                assert img.get8(x, y) == expected

    @pytest.mark.parametrize("case", [
        (20, 20, 10, 10, -4, -5, 2, 1, 8, 8),
        (25, 15, 10, 20, 8, -8, -5, -5, 20, 20),
        (20, 25, 5, 5, 5, 5, -6, -6, 20, 20),
        (10, 10, 10, 10, 3, 4, 0, 0, 10, 10),
        (10, 10, 10, 10, 12, 0, 0, 0, 10, 10),
        (10, 10, 10, 10, 0, 0, 10, 0, 5, 5),
        (10, 10, 10, 10, 2, 2, 1, 1, 0, 4),
    ])
    def test_clipping_matches_reference(self, case):
        dest_w, dest_h, src_w, src_h, dest_x, dest_y, src_x, src_y, rect_w, rect_h = case
        src = coordinate_image(src_w, src_h)
        img = Image(dest_w, dest_h, Pixel8(255, 255, 255, 255))
        img.put_image(dest_x, dest_y, src, src_x, src_y, rect_w, rect_h)

        for y in range(dest_h):
            for x in range(dest_w):
                sx = x - dest_x + src_x
                sy = y - dest_y + src_y
                inside = (src_x <= sx < src_x + rect_w and src_y <= sy < src_y + rect_h
                          and 0 <= sx < src_w and 0 <= sy < src_h)
                expected = Pixel8(sx, sy, 0, 250) if inside else Pixel8(255, 255, 255, 255)
                assert img.get8(x, y) == expected, (x, y)

    def test_copy_between_formats(self):
        img = Image(4, 4, Pixel8(0, 0, 0, 0), PixelFormat.GA8)
        img.put_image(1, 1, Image(2, 2, Pixel8(120, 230, 210, 215), PixelFormat.RGBAF))
        assert img.get8(1, 1) == Pixel8(211, 211, 211, 215)
        assert img.get8(0, 0) == Pixel8(0, 0, 0, 0)

    def test_put_image_onto_itself(self):
        img = coordinate_image(4, 1)
        img.put_image(1, 0, img)
        assert [img.get8(x, 0).r for x in range(4)] == [0, 0, 1, 2]


class TestResizeCanvas:
    def test_grow(self):
        img = coordinate_image(10, 10)
        img.resize_canvas(-5, -5, 20, 20)
        assert (img.width, img.height) == (20, 20)
        for y in range(20):
            for x in range(20):
                expected = (Pixel8(x - 5, y - 5, 0, 250) if 5 <= x < 15 and 5 <= y < 15
                            else Pixel8(0, 0, 0, 0))
                assert img.get8(x, y) == expected

        img.resize_canvas(7, 7, 6, 6)
        assert (img.width, img.height) == (6, 6)
        for y in range(6):
            for x in range(6):
                assert img.get8(x, y) == Pixel8(x + 2, y + 2, 0, 250)

    def test_fill_pixel_and_format(self):
        img = Image(2, 2, Pixel8(1, 1, 1), PixelFormat.RGBA16)
        img.file_format = FileFormat.RGBA16
        img.resize_canvas(0, 0, 3, 2, Pixel16(0, 0, 65535))
        assert img.current_pixel_format == PixelFormat.RGBA16
        assert img.file_format == FileFormat.RGBA16
        assert img.get16(2, 1) == Pixel16(0, 0, 65535)
        assert img.get8(1, 1) == Pixel8(1, 1, 1)

    def test_no_change_is_no_op(self):
        img = Image(2, 2, Pixel8(1, 1, 1))
        buffer = img.buffer
        img.resize_canvas(0, 0, 2, 2)
        assert img.buffer is buffer


class TestWholeImage:
    def test_fill(self):
        img = Image(3, 2)
        img.fill(Pixel8(4, 5, 6, 7))
        assert img.get8(2, 1) == Pixel8(4, 5, 6, 7)

    def test_transform_in_place(self):
        img = coordinate_image(3, 3)
        img.transform(lambda p: p.with_alpha(255))
        assert img.get8(2, 1) == Pixel8(2, 1, 0, 255)
        assert img.all_pixels_opaque()

    def test_transform_into_destination(self):
        img = coordinate_image(3, 2, PixelFormat.RGBA16)
        dest = Image()
        img.transform(lambda p: p + 257, dest)
        assert dest.current_pixel_format == PixelFormat.RGBA16
        assert dest.get8(2, 1) == Pixel8(3, 2, 1, 250)
        assert img.get8(2, 1) == Pixel8(2, 1, 0, 250)

    def test_transform_with_precision(self):
        img = Image(1, 1, Pixel8(10, 20, 30))
        img.transform(lambda p: p * 2, precision=Precision.BIT8)
        assert img.get8(0, 0) == Pixel8(20, 40, 60)

    def test_premultiply_alpha(self):
        img = Image(2, 1, Pixel8(200, 100, 50, 128))
        img.premultiply_alpha()
        assert img.get8(1, 0) == Pixel8(100, 50, 25, 128)

    def test_pixel_array(self):
        img = coordinate_image(3, 2)
        arr = img.pixel_array()
        assert arr.shape == (2, 3, 4)
        assert arr.dtype == np.uint8
        assert arr[1, 2].tolist() == [2, 1, 0, 250]
        assert img.pixel_array(Precision.FLOAT)[1, 2, 3] == pytest.approx(250 / 255)
        assert Image().pixel_array().shape == (0, 0, 4)


class TestColorSpaceArrays:
    @pytest.mark.parametrize("space", list(ColorSpace))
    def test_matches_per_pixel_conversion(self, space):
        img = coordinate_image(4, 3)
        img.set(1, 1, Pixel8(200, 30, 90, 0))
        values = img.color_space_array(space)
        assert values.shape == (3, 4, 5 if space == ColorSpace.CMYK else 4)
        for y in range(3):
            for x in range(4):
                expected = img.get_f(x, y).to_color_space(space).value
                assert tuple(values[y, x]) == pytest.approx(expected, abs=1e-9)
        assert not values[1, 1].any()

    def test_round_trip_through_hsv(self):
        img = coordinate_image(4, 3)
        copy_ = Image(4, 3, Pixel8(), PixelFormat.RGBA8)
        copy_.set_color_space_array(ColorSpace.HSV, img.color_space_array(ColorSpace.HSV))
        assert np.array_equal(copy_.pixel_array(), img.pixel_array())

    def test_gray_image(self):
        img = Image(2, 2, Pixel8(), PixelFormat.GA16)
        values = np.zeros((2, 2, 4))
        values[..., 2] = 0.5
        values[..., 3] = 1.0
        img.set_color_space_array("hsv", values)
        assert img.get_gray_f(1, 0).g == pytest.approx(0.5, abs=1e-4)
        assert img.get_gray16(1, 0).a == 65535

    def test_wrong_shape(self):
        with pytest.raises(ValueError):
            Image(2, 2).set_color_space_array(ColorSpace.CMYK, np.zeros((2, 2, 4)))

    def test_empty_image(self):
        assert Image().color_space_array(ColorSpace.CMYK).shape == (0, 0, 5)
        Image().set_color_space_array(ColorSpace.HSV, np.zeros((3, 4)))
