'''Texture coordinate module

A glyph is located in the atlas with pixel coordinates. The coordinate
system of the descriptor has its origin in the upper left corner with the
y axis pointing downwards. Texture coordinates produced here are relative
to the atlas size and have their origin in the lower left corner.
'''
from collections import namedtuple
from enum import IntEnum

import numpy as np


class AtlasDimensions(namedtuple('AtlasDimensions', ['width', 'height'])):
    '''Pixel size of the texture atlas backing a font

    **Note: width and height must be strictly positive, they are not
            checked. A zero dimension gives meaningless coordinates.**
    '''
    __slots__ = ()


class Corner(IntEnum):
    TOP_LEFT = 0
    TOP_RIGHT = 1
    BOTTOM_LEFT = 2
    BOTTOM_RIGHT = 3


def empty_coordinates():
    '''Return four (0, 0) pairs indexed by `Corner`'''
    return np.zeros((len(Corner), 2), dtype=np.float32)


def texture_coordinates(atlas, x, y, width, height):
    """Compute the corners of a pixel region relatively to the atlas size

    Computation is done in single precision, without clamping.

    Args:
        atlas (AtlasDimensions): Pixel size of the atlas
        x (int): X offset (left to right)
        y (int): Y offset (top to bottom)
        width (int): Region width
        height (int): Region height

    Returns:
        numpy array of shape (4, 2) indexed by `Corner`, each row is an
        (u, v) pair
    """
    atlas_width = np.float32(atlas[0])
    atlas_height = np.float32(atlas[1])

    u = np.float32(x) / atlas_width
    v = np.float32(1) - np.float32(y) / atlas_height
    du = np.float32(width) / atlas_width
    dv = np.float32(height) / atlas_height

    res = empty_coordinates()
    res[Corner.TOP_LEFT] = u, v
    res[Corner.TOP_RIGHT] = u + du, v
    res[Corner.BOTTOM_LEFT] = u, v - dv
    res[Corner.BOTTOM_RIGHT] = u + du, v - dv

    return res
