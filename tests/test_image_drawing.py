import pytest

from rasterkit import Image, Pixel8, PixelFormat


WIDTH, HEIGHT = 8, 9

LINE_CASES = [
    # format, image pixel, line pixel, blended, assigned
    (PixelFormat.RGBA8, Pixel8(123, 234, 21, 190), Pixel8(55, 66, 77, 255),
     Pixel8(55, 66, 77, 255), Pixel8(55, 66, 77, 255)),
    (PixelFormat.RGBA8, Pixel8(123, 234, 21, 190), Pixel8(55, 66, 77, 110),
     Pixel8(88, 149, 49, 218), Pixel8(55, 66, 77, 110)),
    (PixelFormat.RGBA16, Pixel8(120, 230, 210, 255), Pixel8(155, 166, 177, 100),
     Pixel8(134, 205, 197, 255), Pixel8(155, 166, 177, 100)),
    (PixelFormat.RGBAF, Pixel8(120, 230, 210, 255), Pixel8(155, 166, 177, 100),
     Pixel8(134, 205, 197, 255), Pixel8(155, 166, 177, 100)),
    (PixelFormat.GA8, Pixel8(120, 230, 210, 215), Pixel8(155, 166, 177, 60),
     Pixel8(199, 199, 199, 224), Pixel8(165, 165, 165, 60)),
    (PixelFormat.GA16, Pixel8(120, 230, 210, 215), Pixel8(155, 166, 177, 60),
     Pixel8(199, 199, 199, 225), Pixel8(165, 165, 165, 60)),
    (PixelFormat.GAF, Pixel8(120, 230, 210, 215), Pixel8(155, 166, 177, 60),
     Pixel8(199, 199, 199, 224), Pixel8(165, 165, 165, 60)),
]


def snapshot(img):
    return {(x, y): img.get8(x, y) for y in range(img.height) for x in range(img.width)}


def assert_only_changed(img, background, changed):
    for (x, y), before in background.items():
        if (x, y) in changed:
            assert img.get8(x, y) == changed[(x, y)], (x, y)
        else:
            assert img.get8(x, y) == before, (x, y)


@pytest.mark.parametrize("pixel_format,image_pixel,line_pixel,blended,assigned", LINE_CASES)
class TestLines:
    def test_draw_hor_line(self, pixel_format, image_pixel, line_pixel, blended, assigned):
        img = Image(WIDTH, HEIGHT, image_pixel, pixel_format)
        background = snapshot(img)
        img.draw_hor_line(2, 3, 4, line_pixel)
        assert_only_changed(img, background, {(x, 3): blended for x in range(2, 6)})

    def test_put_hor_line_backwards(self, pixel_format, image_pixel, line_pixel, blended, assigned):
        img = Image(WIDTH, HEIGHT, image_pixel, pixel_format)
        background = snapshot(img)
        img.put_hor_line(5, 0, -4, line_pixel)
        assert_only_changed(img, background, {(x, 0): assigned for x in range(2, 6)})

    def test_draw_vert_line(self, pixel_format, image_pixel, line_pixel, blended, assigned):
        img = Image(WIDTH, HEIGHT, image_pixel, pixel_format)
        background = snapshot(img)
        img.draw_vert_line(7, 1, 6, line_pixel)
        assert_only_changed(img, background, {(7, y): blended for y in range(1, 7)})

    def test_put_vert_line_clipped(self, pixel_format, image_pixel, line_pixel, blended, assigned):
        img = Image(WIDTH, HEIGHT, image_pixel, pixel_format)
        background = snapshot(img)
        img.put_vert_line(0, 6, 100, line_pixel)
        img.put_vert_line(1, 1, -5, line_pixel)
        changed = {(0, y): assigned for y in range(6, HEIGHT)}
        changed.update({(1, y): assigned for y in range(0, 2)})
        assert_only_changed(img, background, changed)


class TestLineClipping:
    @pytest.mark.parametrize("args", [
        (0, -1, 5), (0, HEIGHT, 5), (WIDTH, 0, 3), (-5, 0, 3), (0, 0, 0), (-1, 0, -3),
    ])
    def test_hor_lines_outside_draw_nothing(self, args):
        img = Image(WIDTH, HEIGHT, Pixel8(1, 1, 1))
        background = snapshot(img)
        img.put_hor_line(*args, Pixel8(9, 9, 9))
        assert_only_changed(img, background, {})

    def test_hor_line_clipped_on_both_sides(self):
        img = Image(WIDTH, HEIGHT, Pixel8(1, 1, 1))
        background = snapshot(img)
        img.put_hor_line(-3, 4, 20, Pixel8(9, 9, 9))
        assert_only_changed(img, background, {(x, 4): Pixel8(9, 9, 9) for x in range(WIDTH)})

    def test_vert_lines_outside_draw_nothing(self):
        img = Image(WIDTH, HEIGHT, Pixel8(1, 1, 1))
        background = snapshot(img)
        img.put_vert_line(-1, 0, 5, Pixel8(9, 9, 9))
        img.put_vert_line(WIDTH, 0, 5, Pixel8(9, 9, 9))
        img.put_vert_line(0, HEIGHT, 5, Pixel8(9, 9, 9))
        img.put_vert_line(0, -6, 5, Pixel8(9, 9, 9))
        assert_only_changed(img, background, {})


class TestRects:
    def test_filled(self):
        img = Image(10, 10, Pixel8(0, 0, 0, 0))
        background = snapshot(img)
        img.put_rect(2, 3, 4, 3, Pixel8(9, 9, 9))
        changed = {(x, y): Pixel8(9, 9, 9) for x in range(2, 6) for y in range(3, 6)}
        assert_only_changed(img, background, changed)

    def test_outline(self):
        img = Image(10, 10, Pixel8(0, 0, 0, 0))
        background = snapshot(img)
        img.put_rect(2, 3, 4, 3, Pixel8(9, 9, 9), filled=False)
        changed = {(x, y): Pixel8(9, 9, 9) for x in range(2, 6) for y in (3, 5)}
        changed.update({(2, 4): Pixel8(9, 9, 9), (5, 4): Pixel8(9, 9, 9)})
        assert_only_changed(img, background, changed)

    def test_outline_blends_each_pixel_once(self):
        base = Pixel8(62, 150, 200, 220)
        pen = Pixel8(177, 122, 21, 150)
        img = Image(6, 6, base)
        img.draw_rect(1, 1, 4, 4, pen, filled=False)
        blended = base.blended(pen)
        for (x, y) in ((1, 1), (4, 1), (1, 4), (4, 4), (2, 1), (1, 2)):
            assert img.get8(x, y) == blended
        assert img.get8(2, 2) == base

    def test_negative_size_anchors_far_corner(self):
        img = Image(10, 10, Pixel8(0, 0, 0, 0))
        background = snapshot(img)
        img.put_rect(5, 5, -3, -2, Pixel8(9, 9, 9))
        changed = {(x, y): Pixel8(9, 9, 9) for x in range(3, 6) for y in range(4, 6)}
        assert_only_changed(img, background, changed)

    def test_thin_rects(self):
        img = Image(10, 10, Pixel8(0, 0, 0, 0))
        background = snapshot(img)
        img.put_rect(1, 1, 0, 5, Pixel8(9, 9, 9), filled=False)
        img.put_rect(1, 1, 5, 0, Pixel8(9, 9, 9))
        assert_only_changed(img, background, {})

        img.put_rect(1, 1, 1, 3, Pixel8(9, 9, 9), filled=False)
        assert_only_changed(img, background, {(1, y): Pixel8(9, 9, 9) for y in range(1, 4)})

    def test_filled_draw_rect_clipped(self):
        img = Image(4, 4, Pixel8(0, 0, 0, 255))
        img.draw_rect(-2, -2, 4, 4, Pixel8(255, 255, 255, 255))
        assert img.get8(1, 1) == Pixel8(255, 255, 255, 255)
        assert img.get8(2, 2) == Pixel8(0, 0, 0, 255)
