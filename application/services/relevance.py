"""Keyword relevance scoring for FAQ entries."""
from __future__ import annotations

import re
from dataclasses import dataclass

from domain.entities import FaqEntry


@dataclass(frozen=True, slots=True)
class ScoringWeights:
    """Points awarded by each kind of match."""

    phrase_in_question: int = 100
    phrase_in_answer: int = 50
    word_in_question: int = 30
    word_in_answer: int = 15
    substring_in_question: int = 10
    substring_in_answer: int = 5
    all_terms_bonus: int = 50


DEFAULT_WEIGHTS = ScoringWeights()


def tokenize(text: str) -> list[str]:
    """Lower-case ``text`` and split it on whitespace. Duplicates are kept."""

    return [token for token in text.lower().split() if token]


def _word_pattern(token: str) -> re.Pattern[str]:
    # ASCII \b: word characters are [A-Za-z0-9_], as in browser regexes.
    return re.compile(rf"\b{re.escape(token)}\b", re.ASCII)


def score_entry(
    entry: FaqEntry,
    phrase: str,
    tokens: list[str],
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> int:
    """Score a single entry against a lower-cased phrase and its tokens."""

    question = entry.question.lower()
    answer = entry.answer.lower()

    score = 0
    if phrase in question:
        score += weights.phrase_in_question
    if phrase in answer:
        score += weights.phrase_in_answer

    matched_terms: set[str] = set()
    for token in tokens:
        pattern = _word_pattern(token)
        if pattern.search(question):
            score += weights.word_in_question
            matched_terms.add(token)
        if pattern.search(answer):
            score += weights.word_in_answer
            matched_terms.add(token)
        if token in question:
            score += weights.substring_in_question
            matched_terms.add(token)
        if token in answer:
            score += weights.substring_in_answer
            matched_terms.add(token)

    if matched_terms and len(matched_terms) == len(set(tokens)):
        score += weights.all_terms_bonus
    return score


__all__ = ["ScoringWeights", "DEFAULT_WEIGHTS", "tokenize", "score_entry"]
