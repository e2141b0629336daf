import pytest


@pytest.fixture
def write_csv(tmp_path):
    """Write `text` to a file under tmp_path and return its path."""
    def _write(text, name='data.csv', encoding='utf-8'):
        path = tmp_path / name
        path.write_text(text, encoding=encoding)
        return path
    return _write


@pytest.fixture
def weather_csv(write_csv):
    return write_csv("temp,humidity\n10.5,60\n20.0,55\n")
