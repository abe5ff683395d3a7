import logging

__all__ = [
    'decode_utf8',
    'decode_loose',
    'encode_text',
]

# Windows often emits CP1252 and calls it Latin-1. It is a superset,
# so Latin-1 text decodes correctly with it too.
FALLBACK_ENCODING = 'cp1252'

logger = logging.getLogger(__name__)

def decode_utf8(data):
    """
    Decodes data as UTF-8, raising UnicodeDecodeError on any invalid sequence.
    """
    return bytes(data).decode('utf-8')

def decode_loose(data):
    """
    Decodes data as UTF-8 and falls back to Windows-1252 if that fails.
    Filenames in torrents are often just a bag of bytes in whatever
    encoding the creator happened to use.

    Raises UnicodeDecodeError only if neither encoding works.
    """
    data = bytes(data)
    try:
        return decode_utf8(data)
    except UnicodeDecodeError:
        logger.debug('Failed to decode %r using UTF-8, trying %s' % (data, FALLBACK_ENCODING))

    return data.decode(FALLBACK_ENCODING)

def encode_text(text):
    """
    Encodes text as UTF-8, which is always used when writing.
    """
    return text.encode('utf-8')
