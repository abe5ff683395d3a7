"""
The bencode value tree.

There are exactly four kinds of values and every tree is built from them:

 * BInteger - an integer of any size
 * BBinary - a string of raw bytes, not necessarily text
 * BList - an ordered sequence of values
 * BDictionary - a mapping from BBinary keys to values

Values are immutable once created. Dictionary keys are kept in insertion
order internally but are always presented, compared and serialized in
canonical order, i.e. sorted by their unsigned bytes.
"""

import functools

__all__ = [
    'BValue',
    'BInteger',
    'BBinary',
    'BList',
    'BDictionary',
    'parse_decimal',
    'format_decimal',
    'escape_byte',
    'escape_bytes',
]

REPR_LIMIT = 256 # byte strings longer than this are truncated in repr
REPR_TRUNCATE = 250

# The interpreter refuses to convert very long digit strings in one go,
# so big numbers are converted a chunk of digits at a time.
DIGIT_CHUNK = 1000
CHUNK_BASE = 10 ** DIGIT_CHUNK

def parse_decimal(digits):
    """
    Turns ASCII decimal digits, optionally starting with a minus,
    into an int. The digits are expected to be validated already.
    """
    negative = digits[:1] == b'-'
    if negative:
        digits = digits[1:]

    n = 0
    for i in range(0, len(digits), DIGIT_CHUNK):
        chunk = digits[i:i+DIGIT_CHUNK]
        n = n * 10 ** len(chunk) + int(chunk)

    return -n if negative else n

def format_decimal(n):
    """
    Returns the decimal representation of n as a str.
    """
    if n < 0:
        return '-' + format_decimal(-n)

    if n < CHUNK_BASE:
        return str(n)

    chunks = []
    while n:
        n, chunk = divmod(n, CHUNK_BASE)
        chunks.append(chunk)
    chunks.reverse()

    return str(chunks[0]) + ''.join(str(chunk).zfill(DIGIT_CHUNK) for chunk in chunks[1:])

def escape_byte(b):
    if b == 10:
        return '\\n'
    if b == 34:
        return '\\"'
    if 32 <= b <= 126:
        return chr(b)
    return '\\%03o' % b

def escape_bytes(data):
    """
    Quotes data for display, e.g. "Hello \\342\\202\\254uro".
    """
    if len(data) > REPR_LIMIT:
        return '"%s"...(%i more octets)' % (''.join(escape_byte(b) for b in data[:REPR_TRUNCATE]),
                                           len(data) - REPR_TRUNCATE)
    return '"%s"' % ''.join(escape_byte(b) for b in data)

class BValue(object):
    """
    Base class of the four bencode value kinds.
    """
    __slots__ = ()
    kind = None

    def short_repr(self):
        """
        Representation used when the value is nested inside a list or dictionary.
        """
        return repr(self)

class BInteger(BValue):
    __slots__ = ('_value', )
    kind = 'integer'

    def __init__(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError('BInteger needs an int, not %r' % (value, ))
        self._value = int(value)

    @property
    def value(self):
        return self._value

    def __int__(self):
        return self._value

    def __eq__(self, other):
        if not isinstance(other, BInteger):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(self._value)

    def short_repr(self):
        return format_decimal(self._value)

    def __repr__(self):
        return 'BInteger(%s)' % self.short_repr()

@functools.total_ordering
class BBinary(BValue):
    __slots__ = ('_value', )
    kind = 'binary'

    def __init__(self, value):
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError('BBinary needs bytes, not %r' % (value, ))
        self._value = bytes(value)

    @property
    def value(self):
        return self._value

    def compare(self, other):
        """
        Compares the raw bytes of two byte strings, each byte taken as unsigned.
        A string that is a prefix of the other sorts first.

        Returns a negative number, zero or a positive number.
        """
        a, b = self._value, other._value
        return (a > b) - (a < b) # bytes already compare as unsigned octets

    def __eq__(self, other):
        if not isinstance(other, BBinary):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, BBinary):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self):
        return hash(self._value)

    def __len__(self):
        return len(self._value)

    def __bytes__(self):
        return self._value

    def short_repr(self):
        return escape_bytes(self._value)

    def __repr__(self):
        return 'BBinary(%s)' % self.short_repr()

class BList(BValue):
    __slots__ = ('_values', )
    kind = 'list'

    def __init__(self, values=()):
        values = tuple(values)
        for value in values:
            if not isinstance(value, BValue):
                raise TypeError('BList can only hold bencode values, not %r' % (value, ))
        self._values = values

    @property
    def values(self):
        return self._values

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __eq__(self, other):
        if not isinstance(other, BList):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    def __repr__(self):
        return 'BList(%s)' % ', '.join(value.short_repr() for value in self._values)

class BDictionary(BValue):
    """
    Mapping from BBinary keys to values.

    Can be created from a mapping or from (key, value) pairs. When a key is
    given more than once the last value wins.
    """
    __slots__ = ('_items', )
    kind = 'dictionary'

    def __init__(self, items=()):
        if hasattr(items, 'items'):
            items = items.items()

        d = {}
        for key, value in items:
            if not isinstance(key, BBinary):
                raise TypeError('BDictionary keys must be BBinary, not %r' % (key, ))
            if not isinstance(value, BValue):
                raise TypeError('BDictionary can only hold bencode values, not %r' % (value, ))
            d[key] = value
        self._items = d

    def sorted_items(self):
        """
        Returns the (key, value) pairs in canonical order.
        """
        return sorted(self._items.items(), key=lambda item: item[0])

    def keys(self):
        return sorted(self._items)

    def values(self):
        return [value for key, value in self.sorted_items()]

    def items(self):
        return self.sorted_items()

    def get(self, key, default=None):
        return self._items.get(key, default)

    def __getitem__(self, key):
        return self._items[key]

    def __contains__(self, key):
        return key in self._items

    def __iter__(self):
        return iter(self.keys())

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, BDictionary):
            return NotImplemented
        return self._items == other._items

    def __hash__(self):
        return hash(frozenset(self._items.items()))

    def __repr__(self):
        return 'BDictionary(%s)' % ', '.join('%s -> %s' % (key.short_repr(), value.short_repr())
                                             for key, value in self.sorted_items())
