from writing_intelligence.issues import (
    DEFAULT_RULES,
    IssueContext,
    IssueRule,
    count_filler_words,
    count_long_sentences,
    count_passive_constructions,
    detect,
    has_weak_opener,
)
from writing_intelligence.models import Issue, Severity


def _kinds(issues: list[Issue]) -> list[str]:
    return [issue.kind for issue in issues]


def test_many_fillers_are_high_severity():
    text = "I just really think that this is basically very good, honestly."
    issues = detect(text)

    assert _kinds(issues) == ["filler"]
    filler = issues[0]
    assert filler.severity is Severity.HIGH
    assert filler.label == "5 filler words"
    assert filler.recommended_action == "shorten"


def test_two_fillers_are_medium_severity():
    issues = detect("This is just really nice work.")

    assert _kinds(issues) == ["filler"]
    assert issues[0].severity is Severity.MEDIUM
    assert issues[0].label == "2 filler words"


def test_single_filler_is_ignored():
    assert detect("This is just nice work overall.") == []


def test_multi_word_fillers_are_counted():
    ctx = IssueContext("You know, it is kind of sort of fine at the end of the day.")
    assert count_filler_words(ctx.tokens) == 4


def test_passive_constructions_fire_at_two():
    text = "The cake was baked and the letters were written by hand."

    assert count_passive_constructions(text) == 2
    issues = detect(text)
    assert _kinds(issues) == ["passive"]
    assert issues[0].label == "2 passive constructions"
    assert issues[0].recommended_action == "punch"
    assert issues[0].severity is Severity.MEDIUM


def test_single_passive_construction_is_ignored():
    assert detect("The cake was baked yesterday afternoon.") == []


def test_weak_openers_only_match_the_start():
    assert has_weak_opener("Honestly, this product changed how I work every day.")
    assert has_weak_opener("So, I just wanted to say thanks for everything.")
    assert has_weak_opener("let me start by saying hello to all of you")
    assert not has_weak_opener("Great news. Honestly, we shipped.")

    issues = detect("Honestly, this product changed how I work every day.")
    assert _kinds(issues) == ["opener"]
    assert issues[0].severity is Severity.HIGH
    assert issues[0].recommended_action == "hook"


def test_overlong_sentences_are_counted():
    long_sentence = " ".join(["word"] * 31) + "."
    assert count_long_sentences(long_sentence) == 1
    assert count_long_sentences(long_sentence + " " + long_sentence) == 2
    assert count_long_sentences(" ".join(["word"] * 30) + ".") == 0

    issues = detect(long_sentence + " " + long_sentence + " Tell me why?")
    assert _kinds(issues) == ["length"]
    assert issues[0].label == "2 very long sentences"


def test_missing_engagement_hook_on_longer_posts():
    text = " ".join(["alpha"] * 31)
    issues = detect(text)

    assert _kinds(issues) == ["length", "cta"]
    assert issues[0].label == "1 very long sentence"
    cta = issues[1]
    assert cta.severity is Severity.LOW
    assert cta.recommended_action == "engage"


def test_engagement_markers_suppress_cta_issue():
    base = " ".join(["alpha"] * 31)

    assert "cta" not in _kinds(detect(base + " Let me know"))
    assert "cta" not in _kinds(detect(base + "?"))
    assert "cta" not in _kinds(detect(" ".join(["alpha"] * 30)))


def test_issues_keep_rule_order():
    text = (
        "Honestly, it was basically just really very done and the work was finished "
        "and everything was handled and " + " ".join(["alpha"] * 30) + "."
    )
    assert _kinds(detect(text)) == ["filler", "passive", "opener", "length", "cta"]


def test_custom_rules_can_be_appended():
    shouting = IssueRule(
        "caps",
        lambda ctx: ctx.text.isupper(),
        lambda ctx: Issue("caps", "All caps", "Lower the volume", "rewrite", Severity.LOW),
    )

    issues = detect("STOP SHOUTING AT ME PLEASE", rules=DEFAULT_RULES + (shouting,))
    assert _kinds(issues) == ["caps"]
