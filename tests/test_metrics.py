from blogcraft.core.metrics import DocumentMetrics, compute_metrics, reading_time


def test_empty_body():
    assert compute_metrics("") == DocumentMetrics(word_count=0, char_count=0, reading_time_minutes=0)


def test_three_words():
    assert compute_metrics("a b c") == DocumentMetrics(word_count=3, char_count=5, reading_time_minutes=1)


def test_whitespace_only_body_counts_characters_but_no_words():
    metrics = compute_metrics("  \n\t ")
    assert metrics.word_count == 0
    assert metrics.char_count == 5
    assert metrics.reading_time_minutes == 0


def test_markup_is_counted_as_part_of_words():
    metrics = compute_metrics("**bold**  and\n*italic*")
    assert metrics.word_count == 3
    assert metrics.char_count == len("**bold**  and\n*italic*")


def test_reading_time_rounds_up():
    assert reading_time(200) == 1
    assert reading_time(201) == 2
    assert compute_metrics(" ".join(["word"] * 401)).reading_time_minutes == 3


def test_summary_line():
    assert compute_metrics("a b c").summary() == "3 words • 5 characters • 1 min read"
