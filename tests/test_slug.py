import pytest

from blogcraft.core.slug import derive_slug


def test_punctuation_collapses_to_single_dash():
    assert derive_slug("Hello, World!") == "hello-world"


def test_whitespace_only_title_gives_empty_slug():
    assert derive_slug("   ") == ""
    assert derive_slug("") == ""


def test_leading_and_trailing_separators_are_dropped():
    assert derive_slug("--a--") == "a"
    assert derive_slug("C++ & Python 3") == "c-python-3"


def test_non_ascii_letters_become_separators():
    assert derive_slug("Ünïcode Title") == "n-code-title"


@pytest.mark.parametrize("title", [
    "Hello, World!", "  spaced   out  ", "already-a-slug", "Top 10 Tips (2024)", "",
])
def test_idempotent(title):
    once = derive_slug(title)
    assert derive_slug(once) == once
