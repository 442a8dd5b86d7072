import pytest

from shopping_classifier.examples import EXAMPLES, find_example
from shopping_classifier.presentation import KNOWN_LABELS


def test_one_example_per_known_label():
    assert [e.kind.lower() for e in EXAMPLES] == list(KNOWN_LABELS)


def test_examples_have_non_blank_inputs():
    for example in EXAMPLES:
        assert example.query.strip()
        assert example.description.strip()


@pytest.mark.parametrize("kind", ["exact", "EXACT", " Exact "])
def test_find_example_case_insensitive(kind):
    assert find_example(kind).query == "iPhone 15 Pro"


def test_find_example_unknown():
    with pytest.raises(KeyError):
        find_example("bundle")
