class M3UShuffleError(RuntimeError):
    """Base error for m3u_shuffle."""


class ParseError(M3UShuffleError):
    """Input could not be turned into a playlist."""


class EmptyInputError(ParseError):
    """Input held no lines at all."""


class MissingHeaderError(ParseError):
    """First significant line was not the #EXTM3U header."""


class InputReadError(M3UShuffleError):
    pass


class OutputWriteError(M3UShuffleError):
    pass
