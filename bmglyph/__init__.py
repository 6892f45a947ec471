"""bmglyph

Glyph placement and texture coordinates from BMFont text descriptors
"""
# flake8: noqa

from os import path as p

from bmglyph.exception import BmGlyphError, FileOpenError, LineReadError
from bmglyph.fontdata import FontData, GlyphRecord, parse_glyphs
from bmglyph.texture import AtlasDimensions, Corner


__version__ = "0.1.0"

PATH_BMGLYPH = p.dirname(p.abspath(__file__))
PATH_BMGLYPH_TEST_FILES = p.join(PATH_BMGLYPH, 'tests', 'files')
