import logging
import re
import sys

from .exceptions import DecodeError
from .streams import as_source
from .values import BBinary, BDictionary, BInteger, BList, escape_byte, escape_bytes, parse_decimal

__all__ = [
    'Decoder',
    'decode',
    'DEFAULT_MAX_DEPTH',
    'max_supported_depth',
]

DEFAULT_MAX_DEPTH = 200 # lists and dictionaries nested deeper than this are refused

# Every level of nesting costs two interpreter frames, keep some room for the caller.
FRAMES_PER_LEVEL = 2
FRAME_HEADROOM = 200

INTEGER_PATTERN = re.compile(br'^-?(0|[1-9][0-9]*)$')

logger = logging.getLogger(__name__)

def max_supported_depth():
    """
    The deepest nesting the current recursion limit can decode.
    """
    return max(0, (sys.getrecursionlimit() - FRAME_HEADROOM) // FRAMES_PER_LEVEL)

class Decoder(object):
    """
    Recursive descent parser reading a single value from a ByteSource.

    Only the bytes belonging to that value are consumed, anything after it
    is left in the source for the caller to deal with.

    In strict mode dictionary keys must appear in canonical order without
    duplicates. Otherwise they are accepted in any order and the last
    value of a duplicated key wins.
    """

    def __init__(self, source, max_depth=DEFAULT_MAX_DEPTH, strict=False):
        if not 0 <= max_depth <= max_supported_depth():
            raise ValueError("max_depth must be between 0 and %i, not %r" % (max_supported_depth(), max_depth))
        self.source = as_source(source)
        self.max_depth = max_depth
        self.strict = strict

    def decode(self):
        return self.decode_value(self.source.next_byte(), 0)

    def decode_value(self, b, depth):
        try:
            func = self.decode_func[b]
        except KeyError:
            raise DecodeError("invalid type '%s'" % escape_byte(b))
        return func(self, b, depth)

    def enter(self, depth):
        depth += 1
        if depth > self.max_depth:
            raise DecodeError('values nested more than %i levels deep' % self.max_depth)
        return depth

    def read_integer(self, b, sentinel):
        """
        Reads digits up to sentinel, starting with the already read byte b.
        """
        digits = bytearray()
        while b != sentinel:
            if not (48 <= b <= 57 or (b == 45 and not digits)):
                raise DecodeError("invalid character '%s' in integer" % escape_byte(b))
            digits.append(b)
            b = self.source.next_byte()

        digits = bytes(digits)
        if not INTEGER_PATTERN.match(digits) or digits == b'-0':
            raise DecodeError('invalid integer %s' % escape_bytes(digits))
        return parse_decimal(digits)

    def decode_integer(self, b, depth):
        return BInteger(self.read_integer(self.source.next_byte(), 101))

    def decode_string(self, b, depth):
        length = self.read_integer(b, 58)
        if not 0 <= length <= sys.maxsize:
            raise DecodeError('string length is not a valid size')
        return BBinary(self.source.next_bytes(length))

    def decode_list(self, b, depth):
        depth = self.enter(depth)
        values = []
        b = self.source.next_byte()
        while b != 101:
            values.append(self.decode_value(b, depth))
            b = self.source.next_byte()
        return BList(values)

    def decode_dictionary(self, b, depth):
        depth = self.enter(depth)
        items = {}
        last_key = None
        b = self.source.next_byte()
        while b != 101:
            if not 48 <= b <= 57:
                raise DecodeError("dictionary key must be a string, found '%s'" % escape_byte(b))
            key = self.decode_string(b, depth)

            if last_key is not None and key <= last_key:
                if self.strict:
                    raise DecodeError('dictionary key %s follows %s' % (key.short_repr(), last_key.short_repr()))
                if key not in items:
                    logger.debug('Dictionary key %s is out of order after %s' % (key.short_repr(), last_key.short_repr()))

            if key in items:
                logger.debug('Duplicate dictionary key %s, using the last value' % key.short_repr())

            items[key] = self.decode_value(self.source.next_byte(), depth)
            last_key = key
            b = self.source.next_byte()
        return BDictionary(items)

    decode_func = {}
    decode_func[100] = decode_dictionary
    decode_func[105] = decode_integer
    decode_func[108] = decode_list

    for i in range(48, 58):
        decode_func[i] = decode_string
    del i

def decode(source, max_depth=DEFAULT_MAX_DEPTH, strict=False):
    """
    Reads one value from source, which can be a ByteSource, a bytes-like
    object, a binary stream or an iterable of byte values.
    """
    return Decoder(source, max_depth=max_depth, strict=strict).decode()
