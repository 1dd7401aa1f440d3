"""Collection-level funding summaries and rankings"""

from collections import Counter
from dataclasses import dataclass
from typing import Callable, List, Sequence

from campaign_finance.domain.analytics import adjusted_totals
from campaign_finance.domain.lookup import find_by_candidate_name, primary_record
from campaign_finance.domain.models import (
    BulkLookupResult,
    CollectionOverview,
    DonorRankingEntry,
    DonorRankings,
    FinancialRecord,
)

# Minimum dollar amounts to enter each donor ranking
HIGH_PAC_MINIMUM = 100_000.0
SELF_FUNDED_MINIMUM = 100_000.0
GRASSROOTS_MINIMUM = 50_000.0


@dataclass(frozen=True)
class DonorRankingThresholds:
    """Dollar amounts a source must exceed for a candidate to enter each ranking"""

    high_pac: float = HIGH_PAC_MINIMUM
    self_funded: float = SELF_FUNDED_MINIMUM
    grassroots: float = GRASSROOTS_MINIMUM


DEFAULT_RANKING_THRESHOLDS = DonorRankingThresholds()


def summarize_collection(records: Sequence[FinancialRecord]) -> CollectionOverview:
    """Counts and raw-receipt totals across the whole collection"""
    total = sum(r.total_receipts for r in records)
    return CollectionOverview(
        total_candidates=len(records),
        total_funding=total,
        average_funding=total / len(records) if records else 0.0,
        party_breakdown=dict(Counter(r.party for r in records)),
        state_breakdown=dict(Counter(r.state for r in records)),
    )


def top_funded(records: Sequence[FinancialRecord], limit: int = 10) -> List[FinancialRecord]:
    """Highest raw total receipts first; the input collection is left untouched"""
    return sorted(records, key=lambda r: r.total_receipts, reverse=True)[:limit]


def _rank(
    records: Sequence[FinancialRecord],
    amount_of: Callable[[FinancialRecord], float],
    minimum: float,
    limit: int,
) -> List[DonorRankingEntry]:
    selected = sorted((r for r in records if amount_of(r) > minimum), key=amount_of, reverse=True)[:limit]
    entries = []
    for record in selected:
        adjusted_receipts, _ = adjusted_totals(record)
        amount = amount_of(record)
        entries.append(
            DonorRankingEntry(
                record=record,
                amount=amount,
                percentage=amount * 100 / max(1.0, adjusted_receipts) if adjusted_receipts > 0 else 0.0,
            )
        )
    return entries


def top_donor_profiles(
    records: Sequence[FinancialRecord],
    limit: int = 20,
    thresholds: DonorRankingThresholds = DEFAULT_RANKING_THRESHOLDS,
) -> DonorRankings:
    """
    Rank candidates by reliance on PAC money, self-funding and individual donors.

    Shares are of transfer-adjusted receipts, matching calculate_funding_analytics.
    """
    return DonorRankings(
        high_pac_funding=_rank(records, lambda r: r.pac_contributions, thresholds.high_pac, limit),
        self_funded=_rank(records, lambda r: r.self_funding, thresholds.self_funded, limit),
        grassroots=_rank(records, lambda r: r.individual_contributions, thresholds.grassroots, limit),
    )


def bulk_lookup(records: Sequence[FinancialRecord], names: Sequence[str]) -> List[BulkLookupResult]:
    """Primary record (first match) for each requested name, or a not-found entry"""
    return [BulkLookupResult(candidate_name=name, record=primary_record(find_by_candidate_name(records, name))) for name in names]


def candidate_history(
    records: Sequence[FinancialRecord],
    candidate: FinancialRecord,
    limit: int = 3,
) -> List[FinancialRecord]:
    """
    Other records sharing the candidate's name, in collection order.

    Candidate IDs are unique within a batch, so earlier cycles or other
    offices of the same person only show up as same-name records.
    """
    history = [r for r in find_by_candidate_name(records, candidate.candidate_name) if r.candidate_id != candidate.candidate_id]
    return history[:limit]
