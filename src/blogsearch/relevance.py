"""Relevance scoring of a blog document against a free-text search.

The score is an additive point system over three fields:

- title: exact match (100) or phrase containment (50 plus a bonus for an
  early position), then 30 per search word found in it;
- summary: 20 for the phrase, then 10 per search word found in it;
- body: 10 per phrase occurrence (max 50), then 2 per word occurrence
  summed over all search words (max 30).

All comparisons are made on text lower-cased one character for one
character (``utils.text_utils.lower_text``). The result is rounded to two
decimals with the built-in ``round``.
"""

from __future__ import annotations

from models.blog_models import BlogDocument
from utils.text_utils import lower_text

EXACT_TITLE_POINTS = 100
TITLE_PHRASE_POINTS = 50
TITLE_POSITION_BASE = 100
TITLE_POSITION_WEIGHT = 0.5
TITLE_WORD_POINTS = 30
SUMMARY_PHRASE_POINTS = 20
SUMMARY_WORD_POINTS = 10
BODY_PHRASE_POINTS = 10
BODY_PHRASE_CAP = 50
BODY_WORD_POINTS = 2
BODY_WORD_CAP = 30


def tokenize(search: str) -> list[str]:
    """Split a search string into whitespace-separated words."""
    return search.split()


def count_occurrences(text: str, pattern: str) -> int:
    """Count non-overlapping occurrences of ``pattern``, scanning left to right."""
    if not pattern:
        return 0
    return text.count(pattern)


def score(document: BlogDocument, search: str) -> float:
    """Return the relevance of ``document`` for a non-empty ``search`` string."""
    phrase = lower_text(search)
    words = tokenize(phrase)
    title = lower_text(document.title)
    summary = lower_text(document.summary or "")
    body = lower_text(document.body or "")

    points = 0.0

    if title == phrase:
        points += EXACT_TITLE_POINTS
    elif phrase in title:
        position = title.index(phrase)
        points += TITLE_PHRASE_POINTS
        # Not floored: a match past the base position lowers the score.
        points += (TITLE_POSITION_BASE - position) * TITLE_POSITION_WEIGHT

    points += TITLE_WORD_POINTS * sum(1 for word in words if word in title)

    if summary and phrase in summary:
        points += SUMMARY_PHRASE_POINTS
    points += SUMMARY_WORD_POINTS * sum(1 for word in words if word in summary)

    points += min(BODY_PHRASE_POINTS * count_occurrences(body, phrase), BODY_PHRASE_CAP)

    word_hits = sum(count_occurrences(body, word) for word in words)
    points += min(BODY_WORD_POINTS * word_hits, BODY_WORD_CAP)

    return round(points, 2)
