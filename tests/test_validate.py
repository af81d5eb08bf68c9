import pytest

from patterndb.errors import (
    ApostropheViolation,
    CategoryCountViolation,
    DuplicatePhraseViolation,
    HyphenViolation,
)
from patterndb.models import RawEntry
from patterndb.normalize import assemble_entry, normalize_entry
from patterndb.validate import find_duplicates, find_violation, validate


def entry(**fields):
    fields.setdefault("considerate", "alternative")
    return assemble_entry(normalize_entry(RawEntry(**fields)))


def test_valid_corpus_passes():
    entries = [
        entry(type="simple", inconsiderate=["crazy", "insane"]),
        entry(inconsiderate={"he": "male", "she": "female"}),
    ]
    assert find_violation(entries) is None
    validate(entries)


def test_single_category_requires_simple_type():
    entries = [
        entry(type="simple", inconsiderate="fine"),
        entry(inconsiderate={"x": "a"}),
    ]
    with pytest.raises(CategoryCountViolation) as exc:
        validate(entries)

    assert exc.value.rule == "category-count"
    assert exc.value.phrases == ["x"]
    assert "x" in str(exc.value)


def test_other_types_are_held_to_category_count():
    with pytest.raises(CategoryCountViolation):
        validate([entry(type="or", inconsiderate=["one", "two"])])


def test_hyphenated_phrase_fails():
    with pytest.raises(HyphenViolation) as exc:
        validate([entry(type="simple", inconsiderate=["fine", "some-word"])])

    assert "fine, some-word" in exc.value.message
    assert exc.value.phrases == ["fine", "some-word"]


@pytest.mark.parametrize("phrase", ["don't", "don’t"])
def test_apostrophe_needs_flag(phrase):
    with pytest.raises(ApostropheViolation) as exc:
        validate([entry(type="simple", inconsiderate=phrase)])

    assert phrase in exc.value.message
    validate([entry(type="simple", apostrophe=True, inconsiderate=phrase)])


def test_hyphen_is_checked_before_apostrophe_in_same_phrase():
    violation = find_violation([entry(type="simple", inconsiderate="it's-over")])
    assert isinstance(violation, HyphenViolation)


def test_duplicates_across_entries_fail():
    entries = [
        entry(type="simple", inconsiderate=["crazy", "nuts"]),
        entry(type="simple", inconsiderate=["bonkers"]),
        entry(inconsiderate={"crazy": "a", "lunatic": "b"}),
    ]
    with pytest.raises(DuplicatePhraseViolation) as exc:
        validate(entries)

    assert exc.value.phrases == ["crazy"]
    assert "crazy" in exc.value.message


def test_find_duplicates_reports_each_phrase_once_in_order():
    entries = [
        entry(type="simple", inconsiderate=["b", "a"]),
        entry(type="simple", inconsiderate=["a", "b"]),
        entry(type="simple", inconsiderate=["a", "c"]),
    ]
    assert find_duplicates(entries) == ["b", "a"]


def test_entry_rules_fail_before_duplicates():
    entries = [
        entry(type="simple", inconsiderate="crazy"),
        entry(type="simple", inconsiderate="fine"),
        entry(inconsiderate={"x": "a"}),
        entry(type="simple", inconsiderate="crazy"),
    ]
    violation = find_violation(entries)
    assert isinstance(violation, CategoryCountViolation)
    assert violation.phrases == ["x"]
