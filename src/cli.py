import argparse
import click
import logging
from pathlib import Path
import sys
from typing import IO, NoReturn

from formcode import charset as charsets
from formcode.config import codec_from_config, default_config_file, read_config
from formcode.errors import CodecError
from formcode.form_code import FormCode

logger: logging.Logger = logging.getLogger(__name__)

def run_bytes(code: FormCode, decode: bool, input: IO[bytes], output: IO[bytes]) -> None:
    """Transform the whole input as a single byte sequence."""
    data = input.read()
    logger.debug(f'Read {len(data)} bytes.')
    output.write(code.decode(data) if decode else code.encode(data))

def run_text(code: FormCode, decode: bool, input: IO[str], output: IO[str]) -> None:
    """
    Transform the input line by line.
    Only newlines separate lines; other line breaking characters are transformed like any text.
    Each output line is terminated by a newline.
    """
    f = code.decode_text if decode else code.encode_text
    for (i, line) in enumerate(input, 1):
        line = line.rstrip('\n')
        logger.debug(f'Line {i}: {line!r}')
        output.write(f(line))
        output.write('\n')

# Command-line interface.
def cli() -> NoReturn:
    parser = argparse.ArgumentParser(
        description = 'Encode or decode application/x-www-form-urlencoded data.',
        add_help = False,
    )
    parser.add_argument('mode', choices = ['encode', 'decode'], help = 'Direction of the transform.')
    parser.add_argument('--input', type = str, metavar = 'PATH', default = '-', help = 'Input file (default: stdin).')
    parser.add_argument('--output', type = str, metavar = 'PATH', default = '-', help = 'Output file (default: stdout).')
    parser.add_argument('--bytes', action = 'store_true', help = '''
Transform the whole input as one byte sequence.
By default, the input is read as text and transformed line by line.
''')

    g = parser.add_argument_group(title = 'configuration')
    g.add_argument('--config-file', type = Path, metavar = 'PATH', default = Path(default_config_file), help = '''
INI file with a [codec] section (keys: charset, errors, safe).
Used only if it exists.
Defaults to ~/.formcode.
''')
    g.add_argument('--charset', type = str, metavar = 'NAME', help = '''
Charset for converting between text and bytes.
Overrides the configuration file.
Text mode only.
''')

    g = parser.add_argument_group(title = 'help and debugging')
    g.add_argument('-h', '--help', action = 'help', help = 'Show this help message and exit.')
    g.add_argument('-v', '--verbose', action = 'count', default = 0, help = '''
Print informational (specify once) or debug (specify twice) messages on stderr.
''')

    # Parse arguments.
    args = parser.parse_args()

    # Configure logging.
    logging.basicConfig()
    logging.getLogger('formcode').setLevel({
        0: logging.WARNING,
        1: logging.INFO,
    }.get(args.verbose, logging.DEBUG))

    try:
        logger.info('Reading configuration.')
        logger.debug(f'Configuration file: {args.config_file}')
        code = codec_from_config(read_config(args.config_file))
        if args.charset is not None:
            code.charset = args.charset
        logger.debug(f'Codec: {code}')
        charset = charsets.resolve(code.charset)

        decode = args.mode == 'decode'
        logger.info(f'Running {args.mode} in {"bytes" if args.bytes else "text"} mode.')
        if args.bytes:
            with click.open_file(args.input, 'rb') as input, click.open_file(args.output, 'wb', atomic = True) as output:
                run_bytes(code, decode, input, output)
        else:
            # The encoded side is ASCII. Non-ASCII input to decode is rejected by decode_text.
            (input_encoding, output_encoding) = ('ascii', charset) if decode else (charset, 'ascii')
            input_errors = 'surrogateescape' if decode else code.errors
            with click.open_file(args.input, 'r', encoding = input_encoding, errors = input_errors) as input, \
                    click.open_file(args.output, 'w', encoding = output_encoding, errors = code.errors, atomic = True) as output:
                run_text(code, decode, input, output)
    except CodecError as e:
        logger.error(e)
        sys.exit(1)

    sys.exit(0)
