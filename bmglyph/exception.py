'''Exception module

Only structural I/O failures are raised while reading a descriptor.
Malformed content never raises, it ends up as missing fields in the
GlyphRecord.
'''


class BmGlyphError(Exception):
    '''Base class of all bmglyph errors'''


class FileOpenError(BmGlyphError):
    '''The descriptor file could not be opened'''

    def __init__(self, path, cause):
        '''
        *Parameters:*

        - `path`: Path of the descriptor file
        - `cause`: Exception raised by the open call
        '''
        self.path = path
        self.cause = cause
        super().__init__("Unable to open file %s: %s" % (path, cause))


class LineReadError(BmGlyphError):
    '''A line of the descriptor file could not be read'''

    def __init__(self, line_index, cause):
        '''
        *Parameters:*

        - `line_index`: Zero-based index of the failing line
        - `cause`: Exception raised while reading the line
        '''
        self.line_index = line_index
        self.cause = cause
        super().__init__("Unable to read line number %d: %s" %
                         (line_index, cause))
