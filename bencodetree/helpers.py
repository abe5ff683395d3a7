"""
Explicit conversions between plain Python values and the bencode value tree.

The constructors (bvalue, bkey, bstring, bint, ...) always produce a value.
The extractors (as_int, as_long, as_string, as_any_string) return None when
the value does not fit, so callers can try another representation.
"""

from .text import decode_loose, decode_utf8, encode_text
from .values import BBinary, BDictionary, BInteger, BList, BValue

__all__ = [
    'bvalue',
    'bkey',
    'bstring',
    'bany_string',
    'bint',
    'blong',
    'blist',
    'bdict',
    'as_int',
    'as_long',
    'as_string',
    'as_any_string',
    'to_python',
]

INT32_MIN, INT32_MAX = -2 ** 31, 2 ** 31 - 1
INT64_MIN, INT64_MAX = -2 ** 63, 2 ** 63 - 1

def bstring(text):
    """
    UTF-8 encoded byte string.
    """
    return BBinary(encode_text(text))

# Reading is lenient, writing is always UTF-8.
bany_string = bstring

def _fixed_width(n, low, high):
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError('Expected an int, not %r' % (n, ))
    if not low <= n <= high:
        raise OverflowError('%i does not fit in %i..%i' % (n, low, high))
    return BInteger(n)

def bint(n):
    """
    Integer from a signed 32-bit value.
    """
    return _fixed_width(n, INT32_MIN, INT32_MAX)

def blong(n):
    """
    Integer from a signed 64-bit value.
    """
    return _fixed_width(n, INT64_MIN, INT64_MAX)

def bkey(obj):
    """
    Dictionary key from text or bytes.
    """
    if isinstance(obj, BBinary):
        return obj
    if isinstance(obj, str):
        return bstring(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BBinary(obj)
    raise TypeError('Cannot use %r as a dictionary key' % (obj, ))

def bvalue(obj):
    """
    Converts obj and everything inside it to bencode values.

    int and bool become integers, str becomes UTF-8 encoded bytes,
    lists and tuples become lists and dicts become dictionaries.
    """
    if isinstance(obj, BValue):
        return obj
    if isinstance(obj, bool):
        return BInteger(int(obj))
    if isinstance(obj, int):
        return BInteger(obj)
    if isinstance(obj, str):
        return bstring(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BBinary(obj)
    if isinstance(obj, (list, tuple)):
        return BList(bvalue(x) for x in obj)
    if isinstance(obj, dict):
        return BDictionary((bkey(k), bvalue(v)) for k, v in obj.items())
    raise TypeError('Cannot convert %r to a bencode value' % (obj, ))

def blist(*values):
    return BList(bvalue(value) for value in values)

def bdict(*pairs, **kwargs):
    """
    Dictionary from (key, value) pairs and keyword arguments,
    e.g. bdict(('piece length', 65536), name='example').
    """
    items = [(bkey(k), bvalue(v)) for k, v in pairs]
    items.extend((bkey(k), bvalue(v)) for k, v in kwargs.items())
    return BDictionary(items)

def _as_fixed_width(value, low, high):
    if not isinstance(value, BInteger):
        return None
    if low <= value.value <= high:
        return value.value
    return None

def as_int(value):
    """
    The integer if it fits in signed 32 bits, otherwise None.
    """
    return _as_fixed_width(value, INT32_MIN, INT32_MAX)

def as_long(value):
    """
    The integer if it fits in signed 64 bits, otherwise None.
    """
    return _as_fixed_width(value, INT64_MIN, INT64_MAX)

def as_string(value):
    """
    The byte string decoded as UTF-8, None if it is not valid UTF-8.
    """
    if not isinstance(value, BBinary):
        return None
    try:
        return decode_utf8(value.value)
    except UnicodeDecodeError:
        return None

def as_any_string(value):
    """
    The byte string decoded as UTF-8 or Windows-1252, None if neither works.
    """
    if not isinstance(value, BBinary):
        return None
    try:
        return decode_loose(value.value)
    except UnicodeDecodeError:
        return None

def _python_integer(value):
    return value.value

def _python_binary(value):
    return value.value

def _python_list(value):
    return [to_python(x) for x in value]

def _python_dictionary(value):
    return dict((k.value, to_python(v)) for k, v in value.sorted_items())

python_func = {}
python_func[BInteger] = _python_integer
python_func[BBinary] = _python_binary
python_func[BList] = _python_list
python_func[BDictionary] = _python_dictionary

def to_python(value):
    """
    Converts a value tree to plain ints, bytes, lists and dicts.
    """
    try:
        func = python_func[type(value)]
    except KeyError:
        raise TypeError('Not a bencode value: %r' % (value, ))
    return func(value)
