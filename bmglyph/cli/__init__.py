"""bmglyph CLI

Usage:
    bmglyph dump <fontfile> <width> <height> [--debug]
    bmglyph -h | --help
    bmglyph --version

Options:
    -h --help   Show this screen
    --version   Show version
    --debug     Log parsing details
"""

import json
import logging
import sys

import docopt

import bmglyph
from bmglyph.exception import BmGlyphError
from bmglyph.fontdata import parse_glyphs
from bmglyph.texture import AtlasDimensions


logger = logging.getLogger()
_stream_handler = None


def init_logger(debug):
    global _stream_handler

    if debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.WARNING)

    if _stream_handler:
        logger.removeHandler(_stream_handler)

    formatter = logging.Formatter('%(asctime)s :: %(levelname)s '
                                  ':: %(message)s')
    _stream_handler = logging.StreamHandler()
    _stream_handler.setFormatter(formatter)
    _stream_handler.setLevel(logging.DEBUG)
    logger.addHandler(_stream_handler)


def glyph_to_dict(glyph):
    res = glyph.values()
    res['texture_coordinates'] = glyph.texture_coordinates.tolist()
    return res


def dump(fontfile, atlas, out=None):
    '''Write each glyph of `fontfile` as a JSON line in `out`'''
    out = out or sys.stdout
    for glyph in parse_glyphs(fontfile, atlas):
        out.write(json.dumps(glyph_to_dict(glyph)) + '\n')


def main(argv=None):
    args = docopt.docopt(__doc__, argv=argv, version=bmglyph.__version__)
    init_logger(args['--debug'])

    try:
        atlas = AtlasDimensions(int(args['<width>']), int(args['<height>']))
    except ValueError:
        logger.error("Atlas width and height must be integers")
        return 2

    if args['dump']:
        try:
            dump(args['<fontfile>'], atlas)
        except BmGlyphError:
            # Already logged by the parser
            return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
