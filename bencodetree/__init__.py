from .bencode import bdecode, bencode
from .decoder import DEFAULT_MAX_DEPTH, Decoder, decode
from .encoder import encode
from .exceptions import BTFailure, DecodeError, ShortReadError
from .helpers import (as_any_string, as_int, as_long, as_string, bany_string, bdict,
                      bint, bkey, blist, blong, bstring, bvalue, to_python)
from .streams import (BufferSink, ByteSink, ByteSource, BytesSource, IteratorSource,
                      StreamSink, StreamSource, as_sink, as_source)
from .text import decode_loose, decode_utf8, encode_text
from .values import BBinary, BDictionary, BInteger, BList, BValue
