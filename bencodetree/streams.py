from .exceptions import ShortReadError

__all__ = [
    'ByteSource',
    'ByteSink',
    'BytesSource',
    'StreamSource',
    'IteratorSource',
    'BufferSink',
    'StreamSink',
    'as_source',
    'as_sink',
]

READ_CHUNK_SIZE = 65536 # a length prefix can claim far more than the stream holds

class ByteSource(object):
    """
    Where the decoder reads its bytes from.

    Subclasses must implement next_byte. next_bytes has a working default
    but adapters over something that can read a whole run at once should
    override it.
    """

    def next_byte(self):
        """
        Returns the next byte as an int in the range 0-255.
        Raises ShortReadError when there is nothing left.
        """
        raise NotImplementedError

    def next_bytes(self, length):
        """
        Returns the next length bytes.
        """
        return bytes(self.next_byte() for _ in range(length))

class ByteSink(object):
    """
    Where the encoder writes its bytes to.

    Subclasses must implement put_byte, put_bytes defaults to calling it
    for every byte.
    """

    def put_byte(self, b):
        raise NotImplementedError

    def put_bytes(self, data):
        for b in bytes(data):
            self.put_byte(b)

class BytesSource(ByteSource):
    """
    Reads from an in-memory buffer and keeps track of how far it got,
    so callers can check for trailing data afterwards.
    """

    def __init__(self, data):
        self.data = bytes(data)
        self.offset = 0

    @property
    def remaining(self):
        return len(self.data) - self.offset

    @property
    def exhausted(self):
        return self.offset >= len(self.data)

    def next_byte(self):
        if self.offset >= len(self.data):
            raise ShortReadError('short read: wanted a byte at offset %i' % self.offset)
        b = self.data[self.offset]
        self.offset += 1
        return b

    def next_bytes(self, length):
        end = self.offset + length
        if end > len(self.data):
            raise ShortReadError('short read: wanted %i bytes at offset %i but only %i left' % (
                length, self.offset, self.remaining))
        data = self.data[self.offset:end]
        self.offset = end
        return data

class StreamSource(ByteSource):
    """
    Reads from a binary file-like object.
    """

    def __init__(self, stream):
        self.stream = stream

    def next_byte(self):
        b = self.stream.read(1)
        if not b:
            raise ShortReadError('short read: wanted a byte')
        return b[0]

    def next_bytes(self, length):
        chunks = []
        wanted = length
        while wanted > 0: # streams may return less than asked for
            chunk = self.stream.read(min(wanted, READ_CHUNK_SIZE))
            if not chunk:
                raise ShortReadError('short read: wanted %i but got %i' % (length, length - wanted))
            chunks.append(chunk)
            wanted -= len(chunk)
        return b''.join(chunks)

class IteratorSource(ByteSource):
    """
    Reads from any iterable of ints, e.g. a bytes object or a generator.
    """

    def __init__(self, iterable):
        self.iterator = iter(iterable)

    def next_byte(self):
        try:
            return next(self.iterator)
        except StopIteration:
            raise ShortReadError('short read: wanted a byte')

class BufferSink(ByteSink):
    """
    Collects everything written to it in a growable buffer.
    """

    def __init__(self):
        self.buffer = bytearray()

    def put_byte(self, b):
        self.buffer.append(b)

    def put_bytes(self, data):
        self.buffer.extend(data)

    def getvalue(self):
        return bytes(self.buffer)

class StreamSink(ByteSink):
    """
    Writes to a binary file-like object.
    """

    def __init__(self, stream):
        self.stream = stream

    def put_byte(self, b):
        self.stream.write(bytes((b, )))

    def put_bytes(self, data):
        self.stream.write(data)

def as_source(obj):
    """
    Picks a ByteSource adapter for obj.
    """
    if isinstance(obj, ByteSource):
        return obj
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesSource(obj)
    if hasattr(obj, 'read'):
        return StreamSource(obj)
    if hasattr(obj, '__iter__'):
        return IteratorSource(obj)
    raise TypeError('Cannot read bencoded data from %r' % (obj, ))

def as_sink(obj=None):
    """
    Picks a ByteSink adapter for obj, a fresh BufferSink when obj is None.
    """
    if obj is None:
        return BufferSink()
    if isinstance(obj, ByteSink):
        return obj
    if isinstance(obj, bytearray):
        sink = BufferSink()
        sink.buffer = obj
        return sink
    if hasattr(obj, 'write'):
        return StreamSink(obj)
    raise TypeError('Cannot write bencoded data to %r' % (obj, ))
