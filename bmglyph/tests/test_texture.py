import numpy as np

from bmglyph.texture import (AtlasDimensions, Corner, empty_coordinates,
                             texture_coordinates)


ATLAS = AtlasDimensions(512, 512)


def test_corner_order():
    assert list(Corner) == [Corner.TOP_LEFT, Corner.TOP_RIGHT,
                            Corner.BOTTOM_LEFT, Corner.BOTTOM_RIGHT]
    assert [int(c) for c in Corner] == [0, 1, 2, 3]


def test_empty_coordinates():
    coords = empty_coordinates()
    assert coords.shape == (4, 2)
    assert coords.dtype == np.float32
    assert not coords.any()


def test_coordinates():
    coords = texture_coordinates(ATLAS, 0, 0, 22, 72)

    assert tuple(coords[Corner.TOP_LEFT]) == (0, 1)
    assert tuple(coords[Corner.TOP_RIGHT]) == (22 / 512, 1)
    assert tuple(coords[Corner.BOTTOM_LEFT]) == (0, 1 - 72 / 512)
    assert tuple(coords[Corner.BOTTOM_RIGHT]) == (22 / 512, 1 - 72 / 512)


def test_coordinates_single_precision():
    coords = texture_coordinates(AtlasDimensions(3, 7), 1, 2, 1, 3)
    assert coords.dtype == np.float32

    u = np.float32(1) / np.float32(3)
    v = np.float32(1) - np.float32(2) / np.float32(7)
    assert coords[Corner.TOP_LEFT][0] == u
    assert coords[Corner.TOP_LEFT][1] == v
    assert coords[Corner.BOTTOM_RIGHT][1] == v - np.float32(3) / np.float32(7)


def test_zero_area():
    coords = texture_coordinates(ATLAS, 0, 0, 0, 0)
    for corner in Corner:
        assert tuple(coords[corner]) == (0, 1)


def test_rectangular_atlas_is_not_clamped():
    coords = texture_coordinates(AtlasDimensions(256, 128), 30, 80, 40, 50)

    assert tuple(coords[Corner.TOP_LEFT]) == (0.1171875, 0.375)
    assert tuple(coords[Corner.TOP_RIGHT]) == (0.2734375, 0.375)
    assert tuple(coords[Corner.BOTTOM_LEFT]) == (0.1171875, -0.015625)
    assert tuple(coords[Corner.BOTTOM_RIGHT]) == (0.2734375, -0.015625)


def test_atlas_from_tuple():
    coords = texture_coordinates((512, 512), 0, 0, 22, 72)
    assert np.array_equal(coords, texture_coordinates(ATLAS, 0, 0, 22, 72))
