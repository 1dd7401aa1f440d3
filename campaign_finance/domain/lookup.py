"""Name and location search over a parsed record collection"""

import re
from typing import FrozenSet, List, Optional, Sequence

from campaign_finance.domain.models import FinancialRecord

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

AT_LARGE = "at-large"
_AT_LARGE_ALIASES = {"", "0", "00", "al", "at-large", "at large", "atlarge"}


def name_tokens(name: str) -> FrozenSet[str]:
    """
    Normalize a name to a set of lowercase tokens.

    Punctuation is dropped and order is discarded, so "SMITH, JOHN A" and
    "John A. Smith" normalize to the same set.
    """
    return frozenset(token for token in _NON_ALNUM.split(name.lower()) if token)


def _matches(query: FrozenSet[str], candidate: FrozenSet[str]) -> bool:
    return all(any(q in token for token in candidate) for q in query)


def find_by_candidate_name(records: Sequence[FinancialRecord], query: str) -> List[FinancialRecord]:
    """
    Case-insensitive, order-tolerant candidate name search.

    Every query token must occur inside some token of the stored name.
    Results keep collection order, which groups a candidate's cycles together.
    """
    query_tokens = name_tokens(query or "")
    if not query_tokens:
        return []
    return [r for r in records if _matches(query_tokens, name_tokens(r.candidate_name))]


def normalize_district(district: Optional[str]) -> str:
    """Canonical district key: at-large aliases collapse, "01" == "1" """
    value = (district or "").strip().lower()
    if value in _AT_LARGE_ALIASES:
        return AT_LARGE
    if value.isdigit():
        number = int(value)
        return AT_LARGE if number == 0 else str(number)
    return value


def find_by_location(
    records: Sequence[FinancialRecord],
    state: str,
    district: Optional[str] = None,
) -> List[FinancialRecord]:
    """Exact state match (case-insensitive), plus exact district match when one is given"""
    state_key = (state or "").strip().upper()
    if not state_key:
        return []

    matches = [r for r in records if r.state.upper() == state_key]
    if district is None:
        return matches

    district_key = normalize_district(district)
    return [r for r in matches if normalize_district(r.district) == district_key]


def primary_record(records: Sequence[FinancialRecord]) -> Optional[FinancialRecord]:
    """
    First record in collection order.

    Treating it as the most recent cycle relies on the source file's own
    ordering; nothing here verifies it.
    """
    return records[0] if records else None
