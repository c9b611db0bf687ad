import configparser
import logging
import os
from pathlib import Path
from typing import Any, Union

from formcode import charset as charsets
from formcode.errors import ConfigError, UnsupportedCharset
from formcode.form_code import FormCode, www_form_safe

logger: logging.Logger = logging.getLogger(__name__)

default_config_file: str = os.path.expanduser('~/.formcode')

section = 'codec'

defaults: dict[str, str] = {
    'charset': 'utf-8',
    'errors': charsets.default_errors,
    'safe': '',
}

def read_config(config_file: Union[str, Path, None] = None) -> dict[str, Any]:
    """
    Read codec settings from the [codec] section of an INI file.
    A missing file or key falls back to the defaults.
    Raises ConfigError for an unknown charset or error handler.
    """
    config_parser = configparser.RawConfigParser()
    if config_file is not None:
        read = config_parser.read(config_file, encoding = 'utf-8')
        logger.debug(f'Configuration files read: {read}')

    def get(key: str) -> str:
        return config_parser.get(section, key, fallback = defaults[key])

    try:
        charset = charsets.resolve(get('charset'))
    except UnsupportedCharset as e:
        raise ConfigError(f'{section}.charset: {e}') from e

    try:
        errors = charsets.check_errors(get('errors'))
    except LookupError as e:
        raise ConfigError(f'{section}.errors: unknown error handler {get("errors")!r}') from e

    extra = get('safe')
    if not extra.isascii():
        raise ConfigError(f'{section}.safe: only ASCII characters can be safe')
    if '%' in extra or '+' in extra:
        raise ConfigError(f'{section}.safe: "%" and "+" cannot be safe')

    return {
        'charset': charset,
        'errors': errors,
        'safe': www_form_safe | frozenset(extra.encode('ascii')),
    }

def codec_from_config(config: dict[str, Any]) -> FormCode:
    return FormCode(config['charset'], safe = config['safe'], errors = config['errors'])
