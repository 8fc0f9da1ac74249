"""Fact extraction - sentence splitting and numeric claim detection."""

from __future__ import annotations

import re
from collections import Counter

# Sentence boundary: terminal punctuation, whitespace, then something that
# can start a sentence. "e.g. the" does not split.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9\"“'(\$])")

# A numeric claim: counts, money, percentages, multipliers, ranges, "450B+".
# Digits glued to letters ("B2B", "G2", "6sense") are names, not claims.
CLAIM_PATTERN = re.compile(
    r"""
    (?<![\w.$])
    \$?\d[\d,]*(?:\.\d+)?
    (?:\s*[-–]\s*\$?\d[\d,]*(?:\.\d+)?)?
    (?:\s*%|x|[KMB]\+?|\+)?
    (?![\w])
    """,
    re.VERBOSE,
)

_WHITESPACE = re.compile(r"\s+")


def normalize_space(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def split_sentences(text: str) -> list[str]:
    """Split prose into sentences, keeping each one verbatim."""
    text = normalize_space(text)
    if not text:
        return []
    return [s for s in _SENTENCE_BOUNDARY.split(text) if s]


def _normalize_claim(raw: str) -> str:
    claim = raw.replace("–", "-")
    claim = re.sub(r"\s+", "", claim)
    return claim.rstrip(",")


def extract_claims(text: str) -> Counter[str]:
    """
    Numeric claims in a text, normalised ("60 – 70 %" -> "60-70%").

    Claims are counted, so a figure stated twice is two claims.
    """
    return Counter(_normalize_claim(m.group(0)) for m in CLAIM_PATTERN.finditer(text))


def leading_sentences(text: str, max_chars: int) -> tuple[list[str], list[str]]:
    """
    Split prose into a leading run of sentences within max_chars and the rest.

    The first sentence is always kept whole, even when it alone exceeds
    max_chars, so the lead is never cut mid-sentence.
    """
    sentences = split_sentences(text)
    lead: list[str] = []
    length = 0
    for sentence in sentences:
        extra = len(sentence) + (1 if lead else 0)
        if lead and length + extra > max_chars:
            break
        lead.append(sentence)
        length += extra
    return lead, sentences[len(lead):]
