"""Tests for the command-line interface."""
import sys

import pytest

from formcode.cli import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    """Runs the CLI on the given input file contents and returns (exit code, output bytes)."""
    def run(args, data, config = '', previous = None):
        input = tmp_path / 'input'
        output = tmp_path / 'output'
        config_file = tmp_path / 'config.ini'
        input.write_bytes(data)
        if previous is not None:
            output.write_bytes(previous)
        config_file.write_text('[codec]\n' + config)
        monkeypatch.setattr(sys, 'argv', [
            'formcode', *args,
            '--input', str(input),
            '--output', str(output),
            '--config-file', str(config_file),
        ])
        with pytest.raises(SystemExit) as info:
            cli()
        return (info.value.code, output.read_bytes() if output.exists() else None)
    return run


class TestCli:

    def test_encode_lines(self, run):
        assert run(['encode'], 'a b\nJörg=1\n'.encode('utf8')) == (0, b'a+b\nJ%C3%B6rg%3D1\n')

    def test_decode_lines(self, run):
        assert run(['decode'], b'a+b\r\nJ%C3%B6rg%3D1') == (0, 'a b\nJörg=1\n'.encode('utf8'))

    def test_encode_bytes(self, run):
        assert run(['encode', '--bytes'], b'a b\n\xff') == (0, b'a+b%0A%FF')

    def test_decode_bytes(self, run):
        assert run(['decode', '--bytes'], b'a+b%0A%FF') == (0, b'a b\n\xff')

    def test_charset_option(self, run):
        assert run(['encode', '--charset', 'latin-1'], 'ö\n'.encode('latin-1')) == (0, b'%F6\n')

    def test_charset_from_config(self, run):
        assert run(['decode'], b'%F6\n', config = 'charset = latin-1\n') == (0, 'ö\n'.encode('latin-1'))

    def test_invalid_encoding(self, run, caplog):
        (status, _) = run(['decode'], b'100%\n')
        assert status == 1
        assert 'truncated escape sequence' in caplog.text

    def test_unknown_charset(self, run, caplog):
        (status, _) = run(['encode', '--charset', 'no-such-charset'], b'x')
        assert status == 1
        assert 'no-such-charset' in caplog.text

    def test_bad_config(self, run):
        (status, _) = run(['encode'], b'x', config = 'errors = sloppy\n')
        assert status == 1

    def test_only_newlines_split_lines(self, run):
        assert run(['encode'], b'a\x0cb\x1cc\x0bd\n') == (0, b'a%0Cb%1Cc%0Bd\n')
        assert run(['encode'], 'a\x85b\u2028c\n'.encode('utf8')) == (0, b'a%C2%85b%E2%80%A8c\n')

    def test_decode_keeps_form_feed(self, run):
        assert run(['decode'], b'a%0Cb\n') == (0, b'a\x0cb\n')

    def test_failed_decode_keeps_previous_output(self, run):
        previous = b'PREVIOUS CONTENT\n'
        assert run(['decode'], b'ok+line\nbad%\n', previous = previous) == (1, previous)

    def test_failed_bytes_decode_keeps_previous_output(self, run):
        previous = b'PREVIOUS CONTENT\n'
        assert run(['decode', '--bytes'], b'bad%', previous = previous) == (1, previous)

    def test_failed_decode_creates_no_output(self, run):
        assert run(['decode'], b'bad%\n') == (1, None)

    def test_encoded_side_is_ascii(self, run):
        assert run(['encode', '--charset', 'utf-16'], 'a b\n'.encode('utf-16')) == (0, b'%FF%FEa%00+%00b%00\n')
        assert run(['decode', '--charset', 'utf-16'], b'%FF%FEa%00+%00b%00\n') == (0, 'a b\n'.encode('utf-16'))

    def test_decode_non_ascii_input(self, run, caplog):
        (status, _) = run(['decode'], 'é\n'.encode('utf8'))
        assert status == 1
        assert 'non-ASCII' in caplog.text
