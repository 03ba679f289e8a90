"""
comprehension_mask package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import MarkerConfig, config_from_dict, config_from_yaml, load_config
from .marking import compute_marking_stats, mark_spans, mark_untranslated_words
from .models import MarkedSpan, MarkingStats, Span, SpanKind, WordDecision
from .scoring import decide, word_score
from .tokenization import iter_words, tokenize_spans

__all__ = [
    "MarkerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "MarkedSpan",
    "MarkingStats",
    "Span",
    "SpanKind",
    "WordDecision",
    "decide",
    "word_score",
    "iter_words",
    "tokenize_spans",
    "compute_marking_stats",
    "mark_spans",
    "mark_untranslated_words",
]

__version__ = "0.1.0"
