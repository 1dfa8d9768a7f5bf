#!/usr/bin/env python3
"""
Ranking factors - per-candidate normalized signals.

Each factor is a pure function of one application field (and the job)
and never raises: malformed free text degrades to a safe default.

- skill:        match_score / 100
- experience:   years / max(min_years, 1), capped at 1.2
- salary:       1 within budget, linear decay to 0 at 100% overage
- availability: notice-period bucket (1.0 / 0.8 / 0.6 / 0.5), matched at word starts
"""

import logging
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_EXPERIENCE_CAP = 1.2

AVAILABILITY_BUCKETS = (
    (("immediate", "0 days", "now"), 1.0),
    (("15 days", "2 weeks"), 0.8),
    (("30 days", "1 month"), 0.6),
)
DEFAULT_AVAILABILITY = 0.5

_NON_NUMERIC = re.compile(r"[^0-9.]")
_LEADING_NUMBER = re.compile(r"\d*(?:\.\d*)?")


def _as_float(value: Any, default: float = 0.0) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return default if result != result else result


def skill_factor(match_score: Any) -> float:
    return _as_float(match_score) / 100.0


def experience_factor(candidate_years: Any, min_years: Any, cap: float = DEFAULT_EXPERIENCE_CAP) -> float:
    # A zero/unset minimum counts as one year
    required = max(_as_float(min_years), 1.0)
    return min(_as_float(candidate_years) / required, cap)


def parse_salary(text: Optional[str]) -> float:
    """
    Numeric amount from a free-text salary string.

    Every character that is not a digit or a dot is stripped, then the
    leading number is read ("3,000 USD" -> 3000.0, "1.5.0" -> 1.5).
    Anything without a digit gives 0.0.
    """
    if text is None:
        return 0.0
    cleaned = _NON_NUMERIC.sub("", str(text))
    token = _LEADING_NUMBER.match(cleaned).group(0)
    if not any(ch.isdigit() for ch in token):
        if str(text).strip():
            logger.debug("Unparseable salary %r; treating as 0", text)
        return 0.0
    return float(token)


def salary_factor(expected: float, budget: float) -> float:
    """1.0 at or below budget, then linear decay to 0.0 at twice the budget."""
    if expected <= budget:
        return 1.0
    if budget <= 0:
        return 0.0
    return max(0.0, 1.0 - ((expected - budget) / budget))


def _bucket_pattern(needles) -> "re.Pattern":
    # Needles must start a word: "30 days" is not "0 days", "unknown" is not "now"
    return re.compile("|".join(r"(?<!\w)" + re.escape(n) for n in needles))


_AVAILABILITY_PATTERNS = tuple((_bucket_pattern(needles), factor) for needles, factor in AVAILABILITY_BUCKETS)


def availability_factor(notice_period: Optional[str]) -> float:
    """Bucket a free-text notice period; buckets are checked in order."""
    np_text = (notice_period or "").lower()
    for pattern, factor in _AVAILABILITY_PATTERNS:
        if pattern.search(np_text):
            return factor
    return DEFAULT_AVAILABILITY
