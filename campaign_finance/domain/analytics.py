"""Funding analytics engine - transfer-corrected totals and contributor classification"""

from dataclasses import dataclass
from typing import Dict, Tuple

from campaign_finance.domain.models import (
    ContributorProfile,
    ExpenditureSummary,
    FinancialHealth,
    FinancialRecord,
    FundingAnalytics,
    FundingSource,
    FundingSources,
    TransferActivity,
)

# Tie-break order for the primary funding source
SOURCE_PRECEDENCE: Tuple[str, ...] = ("individual", "pac", "party", "candidate", "other")


@dataclass(frozen=True)
class ClassificationThresholds:
    """Percent-of-adjusted-receipts cut-offs; a flag is set when its share exceeds the value"""

    corporate_influence: float = 40.0
    grassroots_support: float = 60.0
    self_funded: float = 50.0
    party_supported: float = 20.0


@dataclass(frozen=True)
class HealthThresholds:
    high_burn_rate: float = 0.8
    well_funded_cash: float = 100_000.0
    adequate_cash: float = 50_000.0


DEFAULT_THRESHOLDS = ClassificationThresholds()
DEFAULT_HEALTH_THRESHOLDS = HealthThresholds()


def calculate_transfer_activity(record: FinancialRecord) -> TransferActivity:
    transfers_in = record.transfers_from_authorized
    transfers_out = record.transfers_to_authorized
    return TransferActivity(
        transfers_in=transfers_in,
        transfers_out=transfers_out,
        net_transfers=transfers_in - transfers_out,
        has_double_counting_issue=transfers_in > 0 or transfers_out > 0,
    )


def adjusted_totals(record: FinancialRecord) -> Tuple[float, float]:
    """
    Remove inter-committee transfers from raw receipts and disbursements.

    The weball totals already include money moved between a candidate's own
    authorized committees, so transfers are subtracted once (floored at 0),
    never added again. Negative transfer corrections are ignored so an
    adjusted total never exceeds its raw total.

    Returns: (adjusted_total_receipts, adjusted_total_disbursements)
    """
    transfers_in = max(0.0, record.transfers_from_authorized)
    transfers_out = max(0.0, record.transfers_to_authorized)
    receipts = max(0.0, record.total_receipts - transfers_in)
    disbursements = max(0.0, record.total_disbursements - transfers_out)
    return receipts, disbursements


def calculate_funding_sources(record: FinancialRecord, adjusted_receipts: float) -> FundingSources:
    """
    Break adjusted receipts down by source.

    "other" is whatever the named categories leave of the adjusted total.
    Percentages are shares of max(1, adjusted receipts); when the named
    categories overshoot the adjusted total the base widens to their sum so
    the five shares still close at 100. Zero adjusted receipts means every
    share is 0.
    """
    named = {
        "individual": record.individual_contributions,
        "pac": record.pac_contributions,
        "party": record.party_contributions,
        "candidate": record.self_funding,
    }
    named_total = sum(named.values())
    amounts = dict(named, other=max(0.0, adjusted_receipts - named_total))

    if adjusted_receipts > 0:
        # Widened base keeps the five shares summing to 100; do not narrow back to adjusted receipts
        base = max(1.0, adjusted_receipts, named_total)
        percentages = {key: amount * 100 / base for key, amount in amounts.items()}
    else:
        percentages = {key: 0.0 for key in amounts}

    return FundingSources(**{key: FundingSource(amount=amounts[key], percentage=percentages[key]) for key in amounts})


def calculate_funding_analytics(record: FinancialRecord) -> FundingAnalytics:
    """
    Main entry point: derive transfer-corrected analytics for one record.

    Every ratio uses the adjusted totals as its denominator, guarded by
    max(1, ...) so a record with no receipts yields zeros rather than NaN.
    """
    adjusted_receipts, adjusted_disbursements = adjusted_totals(record)
    denominator = max(1.0, adjusted_receipts)

    # One canonical spend ratio; callers label it burn rate or efficiency
    spend_ratio = adjusted_disbursements / denominator

    cash_on_hand = record.ending_cash
    debt = record.total_debt

    return FundingAnalytics(
        total_funding=adjusted_receipts,
        adjusted_total_receipts=adjusted_receipts,
        adjusted_total_disbursements=adjusted_disbursements,
        funding_sources=calculate_funding_sources(record, adjusted_receipts),
        expenditures=ExpenditureSummary(
            total=record.total_disbursements,
            adjusted_total=adjusted_disbursements,
            efficiency=spend_ratio,
        ),
        financial_health=FinancialHealth(
            cash_on_hand=cash_on_hand,
            debt=debt,
            net_position=cash_on_hand - debt,
            burn_rate=spend_ratio,
            debt_ratio=debt / denominator,
        ),
        transfer_activity=calculate_transfer_activity(record),
    )


def primary_funding_source(shares: Dict[str, float]) -> str:
    """Largest share wins; equal shares resolve by SOURCE_PRECEDENCE"""
    best = SOURCE_PRECEDENCE[0]
    for source in SOURCE_PRECEDENCE[1:]:
        if shares.get(source, 0.0) > shares.get(best, 0.0):
            best = source
    return best


def get_contributor_analysis(
    record: FinancialRecord,
    thresholds: ClassificationThresholds = DEFAULT_THRESHOLDS,
) -> ContributorProfile:
    """
    Classify a record's contributor mix.

    Flags are independent, so one record may be both grassroots-supported
    and party-supported.
    """
    sources = calculate_funding_analytics(record).funding_sources.as_dict()
    shares = {key: source.percentage for key, source in sources.items()}

    return ContributorProfile(
        corporate_influence=shares["pac"] > thresholds.corporate_influence,
        grassroots_support=shares["individual"] > thresholds.grassroots_support,
        self_funded=shares["candidate"] > thresholds.self_funded,
        party_supported=shares["party"] > thresholds.party_supported,
        primary_funding_source=primary_funding_source(shares),
    )


def financial_health_status(
    health: FinancialHealth,
    thresholds: HealthThresholds = DEFAULT_HEALTH_THRESHOLDS,
) -> str:
    """
    Map health indicators to a single label, first matching rule wins:
    negative net position, high burn rate, then cash-on-hand bands.
    """
    if health.net_position < 0:
        return "Concerning"
    if health.burn_rate > thresholds.high_burn_rate:
        return "High Burn Rate"
    if health.cash_on_hand > thresholds.well_funded_cash:
        return "Well Funded"
    if health.cash_on_hand > thresholds.adequate_cash:
        return "Adequate"
    return "Limited Resources"
