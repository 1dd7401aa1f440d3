"""Domain models - pure Python dataclasses representing campaign finance entities"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional


@dataclass(frozen=True)
class FinancialRecord:
    """One candidate's FEC summary filing (one line of the weball file)"""

    # Identity
    candidate_id: str
    candidate_name: str  # "LAST, FIRST" convention
    incumbent_challenger_status: str  # I, C or O
    party_code: str  # FEC 1/2/3 code
    party: str  # Affiliation code, e.g. DEM, REP
    state: str
    district: str
    office: str  # H, S or P
    cycle_number: int

    # Receipts
    total_receipts: float = 0.0
    individual_contributions: float = 0.0
    party_contributions: float = 0.0
    pac_contributions: float = 0.0
    candidate_contributions: float = 0.0
    candidate_loans: float = 0.0
    other_loans: float = 0.0
    transfers_from_authorized: float = 0.0

    # Disbursements
    total_disbursements: float = 0.0
    transfers_to_authorized: float = 0.0

    # Repayments and refunds
    candidate_loan_repayments: float = 0.0
    other_loan_repayments: float = 0.0
    individual_refunds: float = 0.0
    committee_refunds: float = 0.0

    # Cash position
    beginning_cash: float = 0.0
    ending_cash: float = 0.0
    total_debt: float = 0.0

    # Election status
    special_election: str = ""
    primary_election: str = ""
    runoff_election: str = ""
    general_election: str = ""
    general_election_percent: float = 0.0

    # Period
    coverage_start_date: Optional[date] = None
    coverage_end_date: Optional[date] = None

    @property
    def total_loans(self) -> float:
        return self.candidate_loans + self.other_loans

    @property
    def self_funding(self) -> float:
        """Candidate personal contributions plus candidate loans"""
        return self.candidate_contributions + self.candidate_loans


@dataclass(frozen=True)
class DecodeFailure:
    """A line the decoder could not turn into a record"""

    line_number: int
    reason: str
    field_count: int = 0


@dataclass
class ParseResult:
    """Batch parse outcome: decoded records plus the failure side-channel"""

    records: List[FinancialRecord] = field(default_factory=list)
    failures: List[DecodeFailure] = field(default_factory=list)

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def failure_reasons(self) -> Dict[str, int]:
        return dict(Counter(f.reason for f in self.failures))


@dataclass
class FundingSource:
    """Amount and share of adjusted receipts for one funding category"""

    amount: float
    percentage: float


@dataclass
class FundingSources:
    individual: FundingSource
    pac: FundingSource
    party: FundingSource
    candidate: FundingSource
    other: FundingSource

    def as_dict(self) -> Dict[str, FundingSource]:
        return {
            "individual": self.individual,
            "pac": self.pac,
            "party": self.party,
            "candidate": self.candidate,
            "other": self.other,
        }


@dataclass
class ExpenditureSummary:
    total: float
    adjusted_total: float
    efficiency: float


@dataclass
class FinancialHealth:
    cash_on_hand: float
    debt: float
    net_position: float
    burn_rate: float
    debt_ratio: float


@dataclass
class TransferActivity:
    """Inter-committee transfers that may be double counted in raw totals"""

    transfers_in: float
    transfers_out: float
    net_transfers: float
    has_double_counting_issue: bool


@dataclass
class FundingAnalytics:
    """Derived, transfer-corrected view of a FinancialRecord"""

    total_funding: float
    adjusted_total_receipts: float
    adjusted_total_disbursements: float
    funding_sources: FundingSources
    expenditures: ExpenditureSummary
    financial_health: FinancialHealth
    transfer_activity: TransferActivity


@dataclass
class ContributorProfile:
    """Contributor-mix classification flags"""

    corporate_influence: bool
    grassroots_support: bool
    self_funded: bool
    party_supported: bool
    primary_funding_source: str


@dataclass
class CollectionOverview:
    """Aggregate view over a parsed record collection"""

    total_candidates: int
    total_funding: float
    average_funding: float
    party_breakdown: Dict[str, int]
    state_breakdown: Dict[str, int]


@dataclass
class DonorRankingEntry:
    record: FinancialRecord
    amount: float
    percentage: float


@dataclass
class DonorRankings:
    high_pac_funding: List[DonorRankingEntry]
    self_funded: List[DonorRankingEntry]
    grassroots: List[DonorRankingEntry]


@dataclass
class BulkLookupResult:
    candidate_name: str
    record: Optional[FinancialRecord]

    @property
    def found(self) -> bool:
        return self.record is not None
