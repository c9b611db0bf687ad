'''
Form encoding (application/x-www-form-urlencoded) operating on bytes.

Letters, digits and the characters '-_.*' are left unescaped.
Space is encoded as '+'.
All other bytes are encoded as "%XX", where XX is the uppercase hexadecimal byte value.
Decoding accepts hexadecimal digits of either case.
'''

from collections.abc import Iterable
from typing import Optional, Union

from formcode import charset as charsets
from formcode.errors import EncodingFailure, InvalidEncoding, UnsupportedCharset, UnsupportedInputType
from formcode.general import maybe

special: int = ord('%')
plus: int = ord('+')
space: int = ord(' ')

def _safe_bytes() -> Iterable[int]:
    for (first, last) in ['az', 'AZ', '09']:
        yield from range(ord(first), ord(last) + 1)
    yield from b'-_.*'
    # Emitted as '+'.
    yield space

www_form_safe: frozenset[int] = frozenset(_safe_bytes())

_hex_upper = b'0123456789ABCDEF'
_hex_values: dict[int, int] = {
    **{c: i for (i, c) in enumerate(_hex_upper)},
    **{c: i for (i, c) in enumerate(b'abcdef', 10)},
}

def encode_iterable(it: Iterable[int], safe: Optional[frozenset[int]] = None) -> Iterable[int]:
    if safe is None:
        safe = www_form_safe
    for x in it:
        # Only 7-bit bytes can be safe, whatever the given set says.
        if x < 0x80 and x in safe:
            yield plus if x == space else x
        else:
            (c1, c0) = divmod(x, 16)
            yield special
            yield _hex_upper[c1]
            yield _hex_upper[c0]

def _hex_digit(jt) -> int:
    try:
        return _hex_values[next(jt)]
    except StopIteration:
        raise InvalidEncoding('truncated escape sequence') from None
    except KeyError as e:
        raise InvalidEncoding(f'invalid hex digit in escape sequence: {bytes([e.args[0]])!r}') from None

def decode_iterable(jt: Iterable[int]) -> Iterable[int]:
    jt = iter(jt)
    for b in jt:
        if b == plus:
            yield space
        elif b == special:
            c1 = _hex_digit(jt)
            c0 = _hex_digit(jt)
            yield 0x10 * c1 + c0
        else:
            yield b

@maybe
def encode(xs: Iterable[int], safe: Optional[frozenset[int]] = None) -> bytes:
    '''Encode bytes, using the given safe set or the form safe set if none is given.'''
    return bytes(encode_iterable(xs, safe))

@maybe
def decode(xs: Iterable[int]) -> bytes:
    '''Decode bytes. Raises InvalidEncoding on a malformed escape sequence.'''
    return bytes(decode_iterable(xs))


class FormCode:
    '''
    Form coding with a charset for the text operations.
    The byte operations do not depend on the charset.
    '''

    def __init__(self, charset: str = 'utf-8', *, safe: Optional[Iterable[int]] = None, errors: str = charsets.default_errors):
        self.charset = charset
        self.safe = www_form_safe if safe is None else frozenset(safe)
        self.errors = errors

    def __repr__(self) -> str:
        return f'{type(self).__name__}(charset = {self.charset!r})'

    @maybe
    def encode(self, xs: Iterable[int]) -> bytes:
        return encode(xs, self.safe)

    @maybe
    def decode(self, xs: Iterable[int]) -> bytes:
        return decode(xs)

    @maybe
    def encode_text(self, text: str, charset: Optional[str] = None) -> str:
        """
        Encode text, converting it to bytes under the given charset.
        Raises UnsupportedCharset if an explicitly given charset is unknown.
        Without a charset, the configured one is used and an unknown configured charset raises EncodingFailure.
        """
        if charset is None:
            try:
                return self._encode_text(text, self.charset)
            except UnsupportedCharset as e:
                raise EncodingFailure(str(e)) from e

        return self._encode_text(text, charset)

    def _encode_text(self, text: str, charset: str) -> str:
        # Output bytes are always ASCII.
        return self.encode(charsets.text_to_bytes(text, charset, self.errors)).decode('ascii')

    @maybe
    def decode_text(self, text: str, charset: Optional[str] = None) -> str:
        """
        Decode text, converting the decoded bytes to text under the given charset.
        Raises InvalidEncoding for malformed input, including non-ASCII characters.
        Raises UnsupportedCharset if an explicitly given charset is unknown.
        Without a charset, the configured one is used and an unknown configured charset raises InvalidEncoding.
        """
        if charset is None:
            try:
                return self._decode_text(text, self.charset)
            except UnsupportedCharset as e:
                raise InvalidEncoding(str(e)) from e

        return self._decode_text(text, charset)

    def _decode_text(self, text: str, charset: str) -> str:
        try:
            data = text.encode('ascii')
        except UnicodeEncodeError as e:
            raise InvalidEncoding(f'non-ASCII character in encoded text: {e.object[e.start:e.end]!r}') from e
        return charsets.bytes_to_text(self.decode(data), charset, self.errors)

    @maybe
    def encode_value(self, value: Union[bytes, bytearray, str]) -> Union[bytes, str]:
        '''Encode bytes to bytes or text to text.'''
        if isinstance(value, (bytes, bytearray)):
            return self.encode(value)
        if isinstance(value, str):
            return self.encode_text(value)
        raise UnsupportedInputType(value, 'form encoded')

    @maybe
    def decode_value(self, value: Union[bytes, bytearray, str]) -> Union[bytes, str]:
        '''Decode bytes to bytes or text to text.'''
        if isinstance(value, (bytes, bytearray)):
            return self.decode(value)
        if isinstance(value, str):
            return self.decode_text(value)
        raise UnsupportedInputType(value, 'form decoded')

# The standard form coding, with UTF-8 for text.
www_form = FormCode()
