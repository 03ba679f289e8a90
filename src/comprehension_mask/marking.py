from __future__ import annotations

import logging
from typing import List

from .config import MarkerConfig
from .models import MarkedSpan, MarkingStats, WordDecision
from .scoring import decide
from .tokenization import tokenize_spans

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = MarkerConfig()


def mark_spans(
    text: str, comprehension: float, config: MarkerConfig | None = None
) -> List[MarkedSpan]:
    """Tokenize ``text`` and attach a decision and rendering to every span."""
    cfg = config or DEFAULT_CONFIG
    marked: List[MarkedSpan] = []
    word_index = 0

    for span in tokenize_spans(text):
        if not span.is_word:
            marked.append(
                MarkedSpan(span=span, decision=None, word_index=-1, rendered=span.text)
            )
            continue
        decision = decide(span, word_index, comprehension, seed=cfg.seed)
        rendered = span.text
        if decision is WordDecision.UNINTELLIGIBLE:
            rendered = f"{cfg.open_marker}{span.text}{cfg.close_marker}"
        marked.append(
            MarkedSpan(
                span=span, decision=decision, word_index=word_index, rendered=rendered
            )
        )
        word_index += 1

    return marked


def mark_untranslated_words(
    text: str, comprehension: float, config: MarkerConfig | None = None
) -> str:
    """
    Return ``text`` with the words a listener cannot follow wrapped in markers.

    ``comprehension`` is the probability a word is understood. Values at or
    above 1 leave the text untouched; values at or below 0 mark every word.
    """
    marked = mark_spans(text, comprehension, config)
    if logger.isEnabledFor(logging.DEBUG):
        stats = _stats_from_marked(marked)
        logger.debug(
            "Marked %d of %d words at comprehension %.3f",
            stats.unintelligible_count,
            stats.word_count,
            comprehension,
        )
    return "".join(item.rendered for item in marked)


def compute_marking_stats(
    text: str, comprehension: float, config: MarkerConfig | None = None
) -> MarkingStats:
    """Count how many words of ``text`` would be marked unintelligible."""
    return _stats_from_marked(mark_spans(text, comprehension, config))


def _stats_from_marked(marked: List[MarkedSpan]) -> MarkingStats:
    words = [item for item in marked if item.decision is not None]
    return MarkingStats(
        word_count=len(words),
        unintelligible_count=sum(1 for item in words if item.is_unintelligible),
    )
