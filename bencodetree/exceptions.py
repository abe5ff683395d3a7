class BTFailure(ValueError):
    """
    Base class for everything that can go wrong while decoding bencoded data.
    """

class DecodeError(BTFailure):
    """
    The input is not valid bencode, e.g. an unknown type tag, a malformed
    integer or an impossible string length.
    """

class ShortReadError(BTFailure, EOFError):
    """
    The input ended before a complete value was read.
    """
