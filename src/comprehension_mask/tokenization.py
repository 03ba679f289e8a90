from __future__ import annotations

from typing import Iterator, List

from .models import Span, SpanKind

APOSTROPHE = "'"


def _is_word_char(text: str, idx: int) -> bool:
    """Letters, plus apostrophes flanked by letters on both sides."""
    char = text[idx]
    if char.isalpha():
        return True
    if char != APOSTROPHE or idx == 0 or idx == len(text) - 1:
        return False
    return text[idx - 1].isalpha() and text[idx + 1].isalpha()


def tokenize_spans(text: str) -> List[Span]:
    """
    Split text into alternating word and separator spans.

    Joining the ``text`` of every returned span reproduces the input exactly.
    """
    spans: List[Span] = []
    if not text:
        return spans

    start = 0
    in_word = _is_word_char(text, 0)
    for idx in range(1, len(text)):
        is_word = _is_word_char(text, idx)
        if is_word == in_word:
            continue
        spans.append(_make_span(text, start, idx, in_word))
        start = idx
        in_word = is_word
    spans.append(_make_span(text, start, len(text), in_word))
    return spans


def iter_words(text: str) -> Iterator[Span]:
    """Yield only the word spans of ``text`` in order."""
    for span in tokenize_spans(text):
        if span.is_word:
            yield span


def _make_span(text: str, start: int, end: int, is_word: bool) -> Span:
    kind = SpanKind.WORD if is_word else SpanKind.SEPARATOR
    return Span(kind=kind, text=text[start:end], start_char=start)
