'''
Text to bytes conversion under a named charset.
This is a thin layer over the codec registry of the standard library.
The only thing it adds is a uniform error for unknown charsets.
'''

import codecs
import logging

from formcode.errors import UnsupportedCharset

logger: logging.Logger = logging.getLogger(__name__)

# Unmappable characters become '?' and malformed input becomes U+FFFD.
default_errors = 'replace'

def resolve(charset: str) -> str:
    """
    Return the canonical name of the given charset.
    Raises UnsupportedCharset if the codec registry does not know it as a text encoding.
    """
    try:
        info = codecs.lookup(charset)
    except (LookupError, TypeError) as e:
        raise UnsupportedCharset(charset) from e
    if not getattr(info, '_is_text_encoding', True):
        raise UnsupportedCharset(charset)
    logger.debug(f'Resolved charset {charset!r} to {info.name!r}.')
    return info.name

def text_to_bytes(text: str, charset: str, errors: str = default_errors) -> bytes:
    return text.encode(resolve(charset), errors)

def bytes_to_text(data: bytes, charset: str, errors: str = default_errors) -> str:
    return bytes(data).decode(resolve(charset), errors)

def check_errors(errors: str) -> str:
    """Raise LookupError if no error handler of the given name is registered."""
    codecs.lookup_error(errors)
    return errors
