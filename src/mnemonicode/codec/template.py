"""Format templates controlling how encoded words are laid out."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Tuple, Union

from ..exceptions import ConfigurationError

DEFAULT_FORMAT = "x-x-x--"

_RUN_RE = re.compile(r"(?P<word>[A-Za-z]+)|(?P<literal>[^A-Za-z]+)")


@dataclass(frozen=True)
class Run:
    """A maximal stretch of the pattern: letters are a placeholder, anything else a literal."""

    text: str
    placeholder: bool


def _parse_runs(pattern: str) -> Tuple[Run, ...]:
    return tuple(
        Run(text=match.group(0), placeholder=match.lastgroup == "word")
        for match in _RUN_RE.finditer(pattern)
    )


@dataclass(frozen=True)
class Template:
    """Parsed format template.

    Every maximal run of ASCII letters in *pattern* stands for one word, the
    rest is copied verbatim. The pattern repeats until all words are placed.
    """

    pattern: str = DEFAULT_FORMAT
    runs: Tuple[Run, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            raise TypeError("template pattern must be a string")
        runs = _parse_runs(self.pattern)
        if not any(run.placeholder for run in runs):
            raise ConfigurationError(
                f"template {self.pattern!r} has no word placeholder (needs at least one ASCII letter)"
            )
        object.__setattr__(self, "runs", runs)

    def iter_pieces(self, words: Iterable[str]) -> Iterator[str]:
        """Yield literal separators and *words* in output order.

        Literal runs are only produced in front of a word, so the output ends
        with the last word and an empty word sequence renders nothing.
        """

        position = 0
        total = len(self.runs)
        for word in words:
            while not self.runs[position].placeholder:
                yield self.runs[position].text
                position = (position + 1) % total
            yield word
            position = (position + 1) % total

    def render(self, words: Iterable[str]) -> str:
        return "".join(self.iter_pieces(words))


def as_template(template: Union[str, Template]) -> Template:
    """Coerce a pattern string into a :class:`Template`."""

    if isinstance(template, Template):
        return template
    return Template(template)


DEFAULT_TEMPLATE = Template(DEFAULT_FORMAT)


__all__ = ["DEFAULT_FORMAT", "DEFAULT_TEMPLATE", "Run", "Template", "as_template"]
