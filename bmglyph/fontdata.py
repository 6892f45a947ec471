'''BMFont module

Extract the glyphs of a BMFont text descriptor. Only the `char` lines are
read, the other sections (info, common, page, kerning) are skipped.
See http://www.angelcode.com/products/bmfont/doc/file_format.html
'''
import logging
import re

import numpy as np
from path import Path

from bmglyph.exception import FileOpenError, LineReadError
from bmglyph.texture import (AtlasDimensions, empty_coordinates,
                             texture_coordinates)


logger = logging.getLogger()

GLYPH_PREFIX = "char id"
INTEGER = re.compile(r'[+-]?[0-9]+')
# Unicode whitespace, the \x1c-\x1f separators are not token delimiters
WHITESPACE = re.compile(r'[^\S\x1c-\x1f]+')
INT32 = np.iinfo(np.int32)

# Descriptor key -> GlyphRecord attribute
KEY_FIELDS = {
    'id': 'id',
    'x': 'x',
    'y': 'y',
    'width': 'width',
    'height': 'height',
    'xoffset': 'x_offset',
    'yoffset': 'y_offset',
    'xadvance': 'x_advance',
    'page': 'page',
    'chnl': 'chnl'
}


class GlyphRecord():
    '''Placement of one glyph in the atlas

    Each field is an `int`, or `None` when the descriptor line doesn't
    provide it or provides a malformed value. `texture_coordinates` is a
    numpy array of four (u, v) pairs indexed by `Corner`, zero filled until
    `compute_texture_coordinates` succeeds.
    '''
    FIELDS = tuple(KEY_FIELDS.values())

    def __init__(self, **fields):
        '''
        *Parameters:*

        - `fields`: Initial value of fields, missing ones are `None`
        '''
        unknown = set(fields) - set(self.FIELDS)
        if unknown:
            raise TypeError("Unknown glyph fields: %s" %
                            ', '.join(sorted(unknown)))

        for name in self.FIELDS:
            setattr(self, name, fields.get(name))
        self.texture_coordinates = empty_coordinates()

    def __eq__(self, other):
        if not isinstance(other, GlyphRecord):
            return NotImplemented
        return (self.values() == other.values() and
                np.array_equal(self.texture_coordinates,
                               other.texture_coordinates))

    def __repr__(self):
        fields = ', '.join('%s=%r' % f for f in self.values().items())
        return 'GlyphRecord(%s)' % fields

    def values(self):
        '''Return fields as a `dict` ordered like `FIELDS`'''
        return {name: getattr(self, name) for name in self.FIELDS}

    def set_value(self, key, value):
        '''Set the field matching a descriptor key

        *Parameters:*

        - `key`: Descriptor key (`xoffset`, `chnl`...)
        - `value`: `int` value

        *Returns:*

        `False` if the key is unknown, nothing is set in this case
        '''
        name = KEY_FIELDS.get(key)
        if name is None:
            return False

        setattr(self, name, value)
        return True

    def compute_texture_coordinates(self, atlas):
        '''Compute texture coordinates from the pixel region

        Coordinates are left untouched if one of `x`, `y`, `width`,
        `height` is missing.

        *Parameters:*

        - `atlas`: `AtlasDimensions`

        *Returns:*

        `True` if coordinates were computed
        '''
        region = (self.x, self.y, self.width, self.height)
        if any(v is None for v in region):
            return False

        self.texture_coordinates = texture_coordinates(atlas, *region)
        return True


def read_lines(filepath):
    """Yield lines of a text file without their line ending

    The file is opened on first iteration and closed when the generator
    ends, fails or is closed.

    Args:
        filepath (str): Path of the file

    Raises:
        FileOpenError: The file can't be opened
        LineReadError: A line can't be read or isn't valid UTF-8
    """
    try:
        f = open(filepath, 'rb')
    except OSError as e:
        err = FileOpenError(filepath, e)
        logger.error(str(err))
        raise err from e

    logger.debug("Reading %s", filepath)

    with f:
        index = 0
        while True:
            try:
                line = f.readline().decode('utf-8')
            except (OSError, UnicodeDecodeError) as e:
                err = LineReadError(index, e)
                logger.error(str(err))
                raise err from e

            if not line:
                return

            if line.endswith('\n'):
                line = line[:-1]
                if line.endswith('\r'):
                    line = line[:-1]

            yield line
            index += 1


def is_glyph_line(line):
    '''Return `True` if `line` describes a glyph'''
    return line.startswith(GLYPH_PREFIX)


def extract_numeric_value(token):
    '''Convert a `key=value` token into a (key, int) tuple

    The token is rejected if it doesn't contain exactly one `=` or if the
    value isn't a base-10 integer fitting in 32 bits.

    *Parameters:*

    - `token`: `str` without whitespace

    *Returns:*

    `tuple(key, value)` or `None` if the token is rejected
    '''
    parts = token.split('=')
    if len(parts) != 2:
        return None

    key, raw_value = parts
    if not INTEGER.fullmatch(raw_value):
        return None

    value = int(raw_value)
    if not INT32.min <= value <= INT32.max:
        return None

    return key, value


def tokenize(line):
    '''Yield the (key, int) pairs of a line, from left to right

    Only whitespace separated tokens containing `=` are considered,
    rejected tokens are skipped.
    '''
    for token in WHITESPACE.split(line):
        if '=' not in token:
            continue

        pair = extract_numeric_value(token)
        if pair is None:
            logger.debug("Ignoring token %r", token)
            continue

        yield pair


def build_glyph(line, atlas):
    """Create the GlyphRecord of a glyph line

    A key present several times keeps its last value. Unknown keys are
    ignored.

    Args:
        line (str): Glyph line of the descriptor
        atlas (AtlasDimensions): Pixel size of the atlas

    Returns:
        Finalized GlyphRecord, its coordinates are read-only
    """
    glyph = GlyphRecord()
    for key, value in tokenize(line):
        glyph.set_value(key, value)

    glyph.compute_texture_coordinates(atlas)
    glyph.texture_coordinates.flags.writeable = False

    return glyph


def parse_glyphs(filepath, atlas):
    """Extract all glyphs of a BMFont text file

    Glyphs are returned in file order. If an I/O error happens, no glyph
    is returned.

    Args:
        filepath (str): BMFont text file
        atlas (tuple): (width, height) of the atlas in pixels

    Returns:
        `list` of GlyphRecord

    Raises:
        FileOpenError: The file can't be opened
        LineReadError: A line of the file can't be read
    """
    atlas = AtlasDimensions(*atlas)

    glyphs = []
    for line in read_lines(filepath):
        if is_glyph_line(line):
            glyphs.append(build_glyph(line, atlas))

    logger.debug("%d glyphs extracted from %s", len(glyphs), filepath)
    return glyphs


class FontData():
    """Glyphs of a BMFont text file

    All glyphs are parsed at creation, nothing is shared between two
    FontData.
    """
    def __init__(self, filepath, atlas):
        """
        Args:
            filepath (str): BMFont text file
            atlas (tuple): (width, height) of the atlas in pixels
        """
        self.filepath = Path(filepath)
        self.atlas = AtlasDimensions(*atlas)
        self.glyphs = parse_glyphs(self.filepath, self.atlas)
        self.index = self._init_index()

    def __len__(self):
        return len(self.glyphs)

    def __iter__(self):
        return iter(self.glyphs)

    def _init_index(self):
        """Index glyphs by id

        Glyphs without id are not indexed, the last glyph wins when an id
        is repeated.

        Returns:
            Id indexed dict
        """
        res = {}
        for g in self.glyphs:
            if g.id is not None:
                res[g.id] = g

        return res

    def get_glyph(self, char):
        """Get glyph of char in this FontData

        Args:
            char (str|int): One character or its id

        Raises:
            KeyError: No glyph for this char
        """
        if isinstance(char, str):
            char = ord(char)
        return self.index[char]
