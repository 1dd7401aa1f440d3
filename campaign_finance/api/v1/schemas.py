"""Pydantic schemas for API request/response validation"""

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class AttributeModel(BaseModel):
    """Base for responses built straight from domain dataclasses"""

    model_config = ConfigDict(from_attributes=True)


class FinancialRecordSchema(AttributeModel):
    """One decoded weball line"""

    candidate_id: str
    candidate_name: str
    incumbent_challenger_status: str
    party_code: str
    party: str
    state: str
    district: str
    office: str
    cycle_number: int
    total_receipts: float
    individual_contributions: float
    party_contributions: float
    pac_contributions: float
    candidate_contributions: float
    candidate_loans: float
    other_loans: float
    total_loans: float
    transfers_from_authorized: float
    total_disbursements: float
    transfers_to_authorized: float
    candidate_loan_repayments: float
    other_loan_repayments: float
    individual_refunds: float
    committee_refunds: float
    beginning_cash: float
    ending_cash: float
    total_debt: float
    special_election: str
    primary_election: str
    runoff_election: str
    general_election: str
    general_election_percent: float
    coverage_start_date: Optional[date] = None
    coverage_end_date: Optional[date] = None


class FundingSourceSchema(AttributeModel):
    amount: float
    percentage: float


class FundingSourcesSchema(AttributeModel):
    individual: FundingSourceSchema
    pac: FundingSourceSchema
    party: FundingSourceSchema
    candidate: FundingSourceSchema
    other: FundingSourceSchema


class ExpenditureSchema(AttributeModel):
    total: float
    adjusted_total: float
    efficiency: float


class FinancialHealthSchema(AttributeModel):
    cash_on_hand: float
    debt: float
    net_position: float
    burn_rate: float
    debt_ratio: float


class TransferActivitySchema(AttributeModel):
    transfers_in: float
    transfers_out: float
    net_transfers: float
    has_double_counting_issue: bool


class FundingAnalyticsSchema(AttributeModel):
    total_funding: float
    adjusted_total_receipts: float
    adjusted_total_disbursements: float
    funding_sources: FundingSourcesSchema
    expenditures: ExpenditureSchema
    financial_health: FinancialHealthSchema
    transfer_activity: TransferActivitySchema


class ContributorProfileSchema(AttributeModel):
    corporate_influence: bool
    grassroots_support: bool
    self_funded: bool
    party_supported: bool
    primary_funding_source: str


class EnrichedRecord(BaseModel):
    """Record with its derived analytics and contributor profile"""

    record: FinancialRecordSchema
    analytics: FundingAnalyticsSchema
    contributor_analysis: ContributorProfileSchema


class SearchResponse(BaseModel):
    """Response for GET /v1/funding"""

    query: Dict[str, Optional[str]]
    records: List[EnrichedRecord]
    total: int


class OverviewSchema(BaseModel):
    total_candidates: int
    total_funding: str
    average_funding: str


class TopFundedCandidate(BaseModel):
    candidate_id: str
    name: str
    party: str
    state: str
    district: str
    total_funding: str
    analytics: FundingAnalyticsSchema


class AnalyticsResponse(BaseModel):
    """Response for GET /v1/funding/analytics"""

    overview: OverviewSchema
    party_breakdown: Dict[str, int]
    state_breakdown: Dict[str, int]
    top_funded_candidates: List[TopFundedCandidate]


class DonorRankingItem(BaseModel):
    candidate_id: str
    name: str
    party: str
    state: str
    district: str
    amount: str
    percentage: str


class TopDonorsResponse(BaseModel):
    """Response for GET /v1/funding/top-donors"""

    high_pac_funding: List[DonorRankingItem]
    self_funded: List[DonorRankingItem]
    grassroots: List[DonorRankingItem]


class BulkRequest(BaseModel):
    """Request body for POST /v1/funding/bulk"""

    candidates: List[str] = Field(..., min_length=1, description="Candidate names to look up")


class BulkResultItem(BaseModel):
    candidate_name: str
    found: bool
    record: Optional[EnrichedRecord] = None


class BulkSummary(BaseModel):
    requested: int
    found: int
    missing: int


class BulkResponse(BaseModel):
    """Response for POST /v1/funding/bulk"""

    results: List[BulkResultItem]
    summary: BulkSummary


class HistoryItem(BaseModel):
    """Another filing for the same candidate"""

    candidate_id: str
    cycle: int
    total_raised: float
    total_spent: float
    cash_on_hand: float


class CandidateFundingResponse(BaseModel):
    """Response for GET /v1/funding/candidates/{candidate_id}"""

    record: FinancialRecordSchema
    analytics: FundingAnalyticsSchema
    contributor_analysis: ContributorProfileSchema
    health_status: str
    history: List[HistoryItem]


class LoadStatusResponse(BaseModel):
    """Response for GET /v1/funding/status"""

    schema_version: str
    records: int
    failure_count: int
    failure_reasons: Dict[str, int]
