from __future__ import annotations

import hashlib

from .models import Span, WordDecision

# 53 bits fit exactly in a float mantissa, so the largest score stays below 1.0.
_SCORE_BITS = 53
_SCORE_SCALE = float(1 << _SCORE_BITS)


def word_score(text: str, index: int, *, seed: str = "") -> float:
    """
    Return a reproducible pseudo-random score in ``[0, 1)`` for a word.

    The score depends only on the word text, its ordinal among the words of
    the message and the optional seed, so identical calls always agree.
    """
    digest = hashlib.blake2b(
        f"{index}\x1f{text}".encode("utf-8"),
        digest_size=8,
        key=seed.encode("utf-8"),
    ).digest()
    value = int.from_bytes(digest, "big") >> (64 - _SCORE_BITS)
    return value / _SCORE_SCALE


def decide(
    word: Span, index: int, comprehension: float, *, seed: str = ""
) -> WordDecision:
    """Decide whether ``word`` is understood at the given comprehension level."""
    if word_score(word.text, index, seed=seed) >= comprehension:
        return WordDecision.UNINTELLIGIBLE
    return WordDecision.UNDERSTOOD
