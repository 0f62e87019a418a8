"""
Shared fixtures for ansicolour tests.
"""
import pytest

import ansicolour.utils.settings as settings

ESC = "\u001b"


@pytest.fixture(autouse=True)
def clean_settings_cache():
    settings._cached.clear()
    yield
    settings._cached.clear()


@pytest.fixture()
def red_text():
    """The canonical ``red`` wrapped string."""
    return f"{ESC}[31mred{ESC}[39m"


@pytest.fixture()
def sample_file(tmp_path):
    """A small escape-coded log file on disk."""
    p = tmp_path / "sample.log"
    p.write_text(
        f"{ESC}[1mbold{ESC}[22m and {ESC}[32m<green>{ESC}[39m\n",
        encoding="utf-8",
    )
    return str(p)
