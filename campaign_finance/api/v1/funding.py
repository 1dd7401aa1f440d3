"""/v1/funding - campaign finance search, analytics and rankings"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from campaign_finance.api.dependencies import (
    get_classification_thresholds,
    get_health_thresholds,
    get_ranking_thresholds,
    get_repository,
    get_request_id,
)
from campaign_finance.api.v1.schemas import (
    AnalyticsResponse,
    BulkRequest,
    BulkResponse,
    BulkResultItem,
    BulkSummary,
    CandidateFundingResponse,
    DonorRankingItem,
    EnrichedRecord,
    FinancialRecordSchema,
    FundingAnalyticsSchema,
    ContributorProfileSchema,
    HistoryItem,
    LoadStatusResponse,
    OverviewSchema,
    SearchResponse,
    TopDonorsResponse,
    TopFundedCandidate,
)
from campaign_finance.domain.aggregates import (
    DonorRankingThresholds,
    bulk_lookup,
    candidate_history,
    summarize_collection,
    top_donor_profiles,
    top_funded,
)
from campaign_finance.domain.analytics import (
    ClassificationThresholds,
    HealthThresholds,
    calculate_funding_analytics,
    financial_health_status,
    get_contributor_analysis,
)
from campaign_finance.domain.exceptions import RecordSourceError
from campaign_finance.domain.formatting import format_currency, format_percentage
from campaign_finance.domain.lookup import find_by_candidate_name, find_by_location
from campaign_finance.domain.models import DonorRankingEntry, FinancialRecord, ParseResult
from campaign_finance.domain.schema import SCHEMA_VERSION
from campaign_finance.infrastructure.repository import FundingDataRepository

router = APIRouter()


async def _load(repository: FundingDataRepository, request_id: str) -> ParseResult:
    try:
        return await repository.get_parse_result()
    except RecordSourceError as e:
        logging.error(f"Campaign finance data unavailable: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Campaign finance data source unavailable")


async def _load_records(repository: FundingDataRepository, request_id: str) -> List[FinancialRecord]:
    """Parsed records, or 404 when the source holds none"""
    result = await _load(repository, request_id)
    if not result.records:
        raise HTTPException(status_code=404, detail="Campaign finance data not available")
    return result.records


def _enrich(record: FinancialRecord, thresholds: ClassificationThresholds) -> EnrichedRecord:
    return EnrichedRecord(
        record=FinancialRecordSchema.model_validate(record),
        analytics=FundingAnalyticsSchema.model_validate(calculate_funding_analytics(record)),
        contributor_analysis=ContributorProfileSchema.model_validate(get_contributor_analysis(record, thresholds)),
    )


def _ranking_item(entry: DonorRankingEntry) -> DonorRankingItem:
    record = entry.record
    return DonorRankingItem(
        candidate_id=record.candidate_id,
        name=record.candidate_name,
        party=record.party,
        state=record.state,
        district=record.district,
        amount=format_currency(entry.amount),
        percentage=format_percentage(entry.percentage),
    )


@router.get("/funding", response_model=SearchResponse)
async def search_funding(
    request: Request,
    candidate: Optional[str] = Query(None, description="Candidate name, either 'Last, First' or 'First Last'"),
    state: Optional[str] = Query(None, min_length=2, max_length=2, description="Two-letter state code"),
    district: Optional[str] = Query(None, description="District number or 'at-large'"),
    repository: FundingDataRepository = Depends(get_repository),
    thresholds: ClassificationThresholds = Depends(get_classification_thresholds),
):
    """
    Search records by candidate name, or by state and optional district.

    Name search takes priority when both are supplied.
    """
    if not candidate and not state:
        raise HTTPException(status_code=400, detail="Please provide candidate name or state parameter")

    records = await _load_records(repository, get_request_id(request))

    if candidate:
        matches = find_by_candidate_name(records, candidate)
        query = {"candidate": candidate}
    else:
        matches = find_by_location(records, state, district or None)
        query = {"state": state, "district": district}

    return SearchResponse(
        query=query,
        records=[_enrich(r, thresholds) for r in matches],
        total=len(matches),
    )


@router.get("/funding/analytics", response_model=AnalyticsResponse)
async def funding_analytics(
    request: Request,
    limit: int = Query(10, ge=1, le=100),
    repository: FundingDataRepository = Depends(get_repository),
):
    """Collection overview plus the best-funded candidates by raw receipts"""
    records = await _load_records(repository, get_request_id(request))
    overview = summarize_collection(records)

    return AnalyticsResponse(
        overview=OverviewSchema(
            total_candidates=overview.total_candidates,
            total_funding=format_currency(overview.total_funding),
            average_funding=format_currency(overview.average_funding),
        ),
        party_breakdown=overview.party_breakdown,
        state_breakdown=overview.state_breakdown,
        top_funded_candidates=[
            TopFundedCandidate(
                candidate_id=r.candidate_id,
                name=r.candidate_name,
                party=r.party,
                state=r.state,
                district=r.district,
                total_funding=format_currency(r.total_receipts),
                analytics=FundingAnalyticsSchema.model_validate(calculate_funding_analytics(r)),
            )
            for r in top_funded(records, limit)
        ],
    )


@router.get("/funding/top-donors", response_model=TopDonorsResponse)
async def funding_top_donors(
    request: Request,
    limit: int = Query(20, ge=1, le=100),
    repository: FundingDataRepository = Depends(get_repository),
    thresholds: DonorRankingThresholds = Depends(get_ranking_thresholds),
):
    """Candidates most reliant on PAC money, self-funding and individual donors"""
    records = await _load_records(repository, get_request_id(request))
    rankings = top_donor_profiles(records, limit, thresholds)

    return TopDonorsResponse(
        high_pac_funding=[_ranking_item(e) for e in rankings.high_pac_funding],
        self_funded=[_ranking_item(e) for e in rankings.self_funded],
        grassroots=[_ranking_item(e) for e in rankings.grassroots],
    )


@router.post("/funding/bulk", response_model=BulkResponse)
async def funding_bulk(
    request_body: BulkRequest,
    request: Request,
    repository: FundingDataRepository = Depends(get_repository),
    thresholds: ClassificationThresholds = Depends(get_classification_thresholds),
):
    """
    Look up several candidates at once.

    Each name resolves to its first match in file order, which the bulk
    file's ordering makes the most recent filing in practice.
    """
    result = await _load(repository, get_request_id(request))
    lookups = bulk_lookup(result.records, request_body.candidates)

    items = [
        BulkResultItem(
            candidate_name=lookup.candidate_name,
            found=lookup.found,
            record=_enrich(lookup.record, thresholds) if lookup.found else None,
        )
        for lookup in lookups
    ]
    found = sum(1 for item in items if item.found)

    return BulkResponse(
        results=items,
        summary=BulkSummary(requested=len(items), found=found, missing=len(items) - found),
    )


@router.get("/funding/candidates/{candidate_id}", response_model=CandidateFundingResponse)
async def candidate_funding(
    candidate_id: str,
    request: Request,
    repository: FundingDataRepository = Depends(get_repository),
    thresholds: ClassificationThresholds = Depends(get_classification_thresholds),
    health_thresholds: HealthThresholds = Depends(get_health_thresholds),
):
    """Detailed funding breakdown for one candidate ID"""
    records = await _load_records(repository, get_request_id(request))

    wanted = candidate_id.strip().upper()
    record = next((r for r in records if r.candidate_id.upper() == wanted), None)
    if record is None:
        raise HTTPException(status_code=404, detail="Candidate not found")

    analytics = calculate_funding_analytics(record)
    history = [
        HistoryItem(
            candidate_id=r.candidate_id,
            cycle=r.cycle_number,
            total_raised=r.total_receipts,
            total_spent=r.total_disbursements,
            cash_on_hand=r.ending_cash,
        )
        for r in candidate_history(records, record)
    ]

    return CandidateFundingResponse(
        record=FinancialRecordSchema.model_validate(record),
        analytics=FundingAnalyticsSchema.model_validate(analytics),
        contributor_analysis=ContributorProfileSchema.model_validate(get_contributor_analysis(record, thresholds)),
        health_status=financial_health_status(analytics.financial_health, health_thresholds),
        history=history,
    )


@router.get("/funding/status", response_model=LoadStatusResponse)
async def funding_status(
    request: Request,
    repository: FundingDataRepository = Depends(get_repository),
):
    """Size of the loaded batch and how many lines the decoder skipped"""
    result = await _load(repository, get_request_id(request))
    return LoadStatusResponse(
        schema_version=SCHEMA_VERSION,
        records=len(result.records),
        failure_count=result.failure_count,
        failure_reasons=result.failure_reasons,
    )
