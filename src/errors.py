class CodecError(Exception):
    '''Base class of all errors raised by formcode.'''

class InvalidEncoding(CodecError, ValueError):
    '''The input does not follow the form encoding grammar.'''

class EncodingFailure(CodecError):
    '''Encoding failed for a reason other than the input, e.g. a bad configured charset.'''

class UnsupportedCharset(CodecError, LookupError):
    def __init__(self, charset: str):
        super().__init__(f'unsupported charset: {charset!r}')
        self.charset = charset

class UnsupportedInputType(CodecError, TypeError):
    def __init__(self, value: object, action: str):
        super().__init__(f'objects of type {type(value).__name__} cannot be {action}')
        self.value = value

class ConfigError(CodecError):
    pass
