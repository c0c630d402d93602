from writing_intelligence.comparison import compare_texts
from writing_intelligence.readability import score_text

BEFORE = (
    "Institutional administrators systematically reevaluated organizational "
    "responsibilities."
)
AFTER = "We fixed it fast."


def test_compare_texts_reports_deltas():
    improvement = compare_texts(BEFORE, AFTER, "shorten")

    assert improvement.readability_delta == 100
    assert improvement.word_count_delta == -2
    assert improvement.technique == "shorten"


def test_compare_texts_uses_standalone_scores():
    improvement = compare_texts(AFTER, BEFORE, "rewrite")

    expected = score_text(BEFORE).score - score_text(AFTER).score
    assert improvement.readability_delta == expected


def test_identical_texts_have_zero_delta():
    improvement = compare_texts(AFTER, AFTER, "grammar")

    assert improvement.readability_delta == 0
    assert improvement.word_count_delta == 0
