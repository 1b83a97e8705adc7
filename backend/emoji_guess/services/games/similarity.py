from collections import Counter
from typing import List, Tuple


def normalize(text: str) -> str:
    return (text or '').strip().casefold()


def _bigrams(text: str) -> Counter:
    return Counter(text[i:i + 2] for i in range(len(text) - 1))


def similarity(a: str, b: str) -> float:
    """Dice coefficient over character bigrams, whitespace ignored.

    Equal strings score 1.0. Anything shorter than two characters that is
    not equal to the other side scores 0.0.
    """
    a = ''.join(a.split())
    b = ''.join(b.split())
    if a == b:
        return 1.0
    if len(a) < 2 or len(b) < 2:
        return 0.0
    first, second = _bigrams(a), _bigrams(b)
    shared = sum((first & second).values())
    return 2.0 * shared / (len(a) + len(b) - 2)


# Evaluated top-down, first lower bound the score exceeds wins.
FEEDBACK_TIERS: List[Tuple[float, str]] = [
    (0.75, '🔥 Very close!'),
    (0.6, '👍 Getting warmer!'),
    (0.4, '🤔 On the right track...'),
    (0.2, '❄️ Cold...'),
]
FALLBACK_FEEDBACK = '🌨️ Very cold!'


def feedback_for(score: float) -> str:
    for lower_bound, message in FEEDBACK_TIERS:
        if score > lower_bound:
            return message
    return FALLBACK_FEEDBACK
