"""Pytest fixtures for formcode tests."""
import pytest

from formcode.form_code import FormCode


@pytest.fixture
def code():
    """The default form coding (UTF-8)."""
    return FormCode()


@pytest.fixture
def latin1_code():
    return FormCode('latin-1')


@pytest.fixture
def bogus_code():
    """A codec configured with a charset nobody knows."""
    return FormCode('no-such-charset')


@pytest.fixture
def config_file(tmp_path):
    """Writes an INI file with the given [codec] body and returns its path."""
    def write(body):
        path = tmp_path / 'formcode.ini'
        path.write_text('[codec]\n' + body, encoding = 'utf-8')
        return path
    return write
