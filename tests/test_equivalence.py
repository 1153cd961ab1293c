import pytest

from advising import EquivalenceNormalizer, normalize_code


@pytest.mark.parametrize("raw,expected", [
    ("CMPT 225", "CMPT 225"),
    ("cmpt225", "CMPT 225"),
    ("  math   151 ", "MATH 151"),
    ("CMPT 105w", "CMPT 105W"),
    ("Special Topics", "SPECIAL TOPICS"),
    ("", ""),
    (None, ""),
])
def test_normalize_code(raw, expected):
    assert normalize_code(raw) == expected


def test_completing_one_group_member_takes_the_whole_group():
    normalizer = EquivalenceNormalizer()
    taken = normalizer.taken_from(["MATH 150"])
    assert {"MATH 150", "MATH 151", "MATH 154", "MATH 157"} <= taken
    assert "MATH 152" not in taken


def test_taken_set_filters_alternatives_from_desired_list():
    normalizer = EquivalenceNormalizer()
    taken = normalizer.taken_from(["MATH 150"])
    assert normalizer.filter_untaken(["MATH 151", "CMPT 225"], taken) == ["CMPT 225"]


def test_expand_taken_keeps_codes_outside_any_group():
    normalizer = EquivalenceNormalizer()
    assert normalizer.expand_taken({"CMPT 120"}) == {"CMPT 120"}


def test_overlapping_groups_expand_as_a_union():
    normalizer = EquivalenceNormalizer(groups=[("A 1", "A 2"), ("A 2", "A 3")])
    assert normalizer.taken_from(["A 2"]) == {"A 1", "A 2", "A 3"}
    assert normalizer.taken_from(["A 1"]) == {"A 1", "A 2"}


def test_filter_untaken_keeps_first_spelling_and_order():
    normalizer = EquivalenceNormalizer()
    desired = ["cmpt 295", "CMPT 225", "CMPT295", "", "MATH 240"]
    assert normalizer.filter_untaken(desired, set()) == ["cmpt 295", "CMPT 225", "MATH 240"]
