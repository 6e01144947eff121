from lifeclock.icons import GREY, draw_moon, draw_sun


def test_sun_is_transparent_rgba_with_rays():
    img = draw_sun(32)
    assert img.mode == "RGBA"
    assert img.size == (32, 32)
    # corners stay transparent, the ray along the x axis is painted
    assert img.getpixel((0, 0))[3] == 0
    assert any(img.getpixel((28, y)) == GREY for y in range(14, 19))


def test_moon_is_a_crescent():
    img = draw_moon(32)
    assert img.size == (32, 32)
    assert img.getpixel((6, 16)) == GREY
    # the centre is cut out by the offset disc
    assert img.getpixel((20, 16))[3] == 0
