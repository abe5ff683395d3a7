from .decoder import DEFAULT_MAX_DEPTH, Decoder
from .encoder import encode
from .exceptions import DecodeError
from .streams import BufferSink, BytesSource

__all__ = [
    'bdecode',
    'bencode',
]

def bdecode(x, strict=False, max_depth=DEFAULT_MAX_DEPTH):
    """
    Decodes a complete bencoded buffer into a value tree.
    The buffer must hold exactly one value.
    """
    source = BytesSource(x)
    r = Decoder(source, max_depth=max_depth, strict=strict).decode()
    if not source.exhausted:
        raise DecodeError('invalid bencoded value (data after valid prefix)')
    return r

def bencode(x):
    """
    Returns the canonical encoding of a value tree as bytes.
    """
    return encode(x, BufferSink()).getvalue()
