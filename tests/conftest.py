"""Pytest configuration and fixtures for pathologize tests."""

import pytest

from pathologize.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def forbidden_characters():
    """Every character the filter must remove."""
    return [chr(code) for code in range(0x20)] + list('\\/:*?"<>|@!')


@pytest.fixture
def messy_names():
    """A grab bag of hostile and ordinary names for property checks."""
    return [
        "",
        " ",
        "...",
        ". . .",
        "CON",
        "con",
        "Con.",
        "CON... . ",
        " AUX.",
        ".NUL ",
        "$Mft",
        "$mft.txt",
        "$Mft.txt.",
        "lpt1.tar.gz",
        "COM0.log",
        "clock$",
        "foo/bar:baz*qux",
        "\x00\x01\x1f",
        ":*?<>|",
        "  foo  bar  ",
        "report (final).pdf",
        "résumé 👍.docx",
        "a\u00a0.",
        "tab\there",
        "new\nline",
        "[draft] notes",
        "@home!",
    ]
