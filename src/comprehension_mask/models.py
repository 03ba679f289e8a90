from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpanKind(str, Enum):
    """Classification of a tokenizer span."""

    WORD = "word"
    SEPARATOR = "separator"


class WordDecision(str, Enum):
    """Whether the listener understands a word."""

    UNDERSTOOD = "understood"
    UNINTELLIGIBLE = "unintelligible"


@dataclass(frozen=True, slots=True)
class Span:
    """A contiguous slice of the input text starting at ``start_char``."""

    kind: SpanKind
    text: str
    start_char: int

    @property
    def end_char(self) -> int:
        return self.start_char + len(self.text)

    @property
    def is_word(self) -> bool:
        return self.kind is SpanKind.WORD


@dataclass(frozen=True, slots=True)
class MarkedSpan:
    """A span together with the decision made for it.

    Separator spans carry ``decision=None`` and ``word_index=-1``.
    """

    span: Span
    decision: WordDecision | None
    word_index: int
    rendered: str

    @property
    def is_unintelligible(self) -> bool:
        return self.decision is WordDecision.UNINTELLIGIBLE


@dataclass(slots=True)
class MarkingStats:
    """Word counts for a single marking run."""

    word_count: int
    unintelligible_count: int

    @property
    def understood_count(self) -> int:
        return self.word_count - self.unintelligible_count

    @property
    def unintelligible_ratio(self) -> float:
        if not self.word_count:
            return 0.0
        return self.unintelligible_count / self.word_count

    def to_dict(self) -> dict[str, float | int]:
        return {
            "word_count": self.word_count,
            "understood_count": self.understood_count,
            "unintelligible_count": self.unintelligible_count,
            "unintelligible_ratio": self.unintelligible_ratio,
        }
