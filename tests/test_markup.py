import pytest

from blogcraft.core.markup import (
    EMOJI_PALETTE, apply_format, insert_at_cursor, insert_image_reference,
    insert_video_reference, prefix_selection, wrap_as_link, wrap_selection,
)
from blogcraft.core.models import Selection


def test_wrap_bold():
    assert wrap_selection("hello world", Selection(6, 11), "bold") == "hello **world**"


def test_wrap_italic_on_collapsed_selection_leaves_empty_pair():
    assert wrap_selection("ab", Selection.caret(1), "italic") == "a**b"


def test_prefix_h1_on_empty_body():
    assert prefix_selection("", Selection(0, 0), "h1") == "# "


def test_prefix_h2_keeps_selected_text():
    assert prefix_selection("Intro", Selection(0, 5), "h2") == "## Intro"


def test_list_and_quote_prefixes_start_a_new_line():
    assert prefix_selection("one two", Selection(4, 7), "list") == "one \n- two"
    assert prefix_selection("one two", Selection(4, 7), "quote") == "one \n> two"


def test_link_uses_placeholder_destination():
    assert wrap_as_link("go here", Selection(3, 7)) == "go [here](url)"


def test_insert_at_cursor_adds_no_whitespace():
    assert insert_at_cursor("ab", 1, "😊") == "a😊b"


def test_image_reference_on_its_own_line():
    assert insert_image_reference("x", 1, "a.png", "data:image/png;base64,AA") == \
        "x\n![a.png](data:image/png;base64,AA)\n"


def test_video_reference_keeps_malformed_uri():
    assert insert_video_reference("", 0, "not a url") == "\n[video](not a url)\n"


def test_selection_past_end_is_clamped():
    assert wrap_selection("abc", Selection(1, 10), "bold") == "a**bc**"


def test_text_outside_selection_is_untouched():
    body = "left MID right"
    result = wrap_selection(body, Selection(5, 8), "italic")
    assert result.startswith("left ")
    assert result.endswith(" right")


@pytest.mark.parametrize("fmt,expected", [
    ("bold", "x **sel** y"),
    ("italic", "x *sel* y"),
    ("h1", "x # sel y"),
    ("h2", "x ## sel y"),
    ("list", "x \n- sel y"),
    ("quote", "x \n> sel y"),
    ("link", "x [sel](url) y"),
    ("strikethrough", "x sel y"),
])
def test_apply_format_dispatch(fmt, expected):
    assert apply_format("x sel y", Selection(2, 5), fmt) == expected


def test_invalid_selection_is_rejected():
    with pytest.raises(ValueError):
        Selection(3, 1)
    with pytest.raises(ValueError):
        Selection(-1, 2)


def test_unknown_marker_is_rejected():
    with pytest.raises(ValueError):
        wrap_selection("abc", Selection(0, 1), "underline")


def test_emoji_palette():
    assert len(EMOJI_PALETTE) == 15
    assert "🚀" in EMOJI_PALETTE
