from formcode.errors import (
    CodecError,
    ConfigError,
    EncodingFailure,
    InvalidEncoding,
    UnsupportedCharset,
    UnsupportedInputType,
)
from formcode.form_code import FormCode, decode, encode, www_form, www_form_safe
