from .streams import as_sink
from .values import BBinary, BDictionary, BInteger, BList, format_decimal

__all__ = [
    'encode',
]

def encode_integer(x, sink):
    sink.put_byte(105)
    sink.put_bytes(format_decimal(x.value).encode('ascii'))
    sink.put_byte(101)

def encode_binary(x, sink):
    sink.put_bytes(str(len(x)).encode('ascii'))
    sink.put_byte(58)
    sink.put_bytes(x.value)

def encode_list(x, sink):
    sink.put_byte(108)
    for i in x:
        encode_func[type(i)](i, sink)
    sink.put_byte(101)

def encode_dictionary(x, sink):
    sink.put_byte(100)
    for k, v in x.sorted_items():
        encode_binary(k, sink)
        encode_func[type(v)](v, sink)
    sink.put_byte(101)

encode_func = {}
encode_func[BInteger] = encode_integer
encode_func[BBinary] = encode_binary
encode_func[BList] = encode_list
encode_func[BDictionary] = encode_dictionary

def encode(value, sink=None):
    """
    Writes the canonical encoding of value to sink and returns the sink.
    Without a sink the bytes are collected in a new BufferSink.
    """
    sink = as_sink(sink)
    try:
        func = encode_func[type(value)]
    except KeyError:
        raise TypeError('Cannot bencode %r, convert it with bvalue() first' % (value, ))
    func(value, sink)
    return sink
