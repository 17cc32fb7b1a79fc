import pytest

from mnemonicode.codec.template import DEFAULT_FORMAT, DEFAULT_TEMPLATE, Run, Template, as_template
from mnemonicode.exceptions import ConfigurationError

WORDS = ["w1", "w2", "w3", "w4", "w5", "w6"]


def test_default_layout():
    assert DEFAULT_FORMAT == "x-x-x--"
    assert DEFAULT_TEMPLATE.render(WORDS) == "w1-w2-w3--w4-w5-w6"


def test_parsed_runs():
    assert Template("ab, cd").runs == (
        Run("ab", True),
        Run(", ", False),
        Run("cd", True),
    )


def test_placeholder_content_is_irrelevant():
    assert Template("word.Word").render(WORDS[:4]) == Template("x.x").render(WORDS[:4])


def test_render_wraps_and_stops_after_last_word():
    template = Template("x x x\n")
    assert template.render(WORDS) == "w1 w2 w3\nw4 w5 w6"
    assert template.render(WORDS[:4]) == "w1 w2 w3\nw4"


def test_leading_literal_is_repeated():
    assert Template("<x>").render(["a", "b"]) == "<a><b"


def test_empty_word_sequence_renders_nothing():
    assert Template("[x]").render([]) == ""


def test_iter_pieces_is_lazy():
    pieces = Template("x-").iter_pieces(iter(["a", "b"]))
    assert next(pieces) == "a"
    assert list(pieces) == ["-", "b"]


@pytest.mark.parametrize("pattern", ["", "---", "1 2 3", "é-ü"])
def test_rejects_letter_free_templates(pattern):
    with pytest.raises(ConfigurationError):
        Template(pattern)


def test_rejects_non_string_pattern():
    with pytest.raises(TypeError):
        Template(42)  # type: ignore[arg-type]


def test_as_template():
    template = Template("x x")
    assert as_template(template) is template
    assert as_template("x x") == template
