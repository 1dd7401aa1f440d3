"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from campaign_finance.config import settings
from campaign_finance.domain.aggregates import DonorRankingThresholds
from campaign_finance.domain.analytics import ClassificationThresholds, HealthThresholds
from campaign_finance.infrastructure.repository import FundingDataRepository


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_repository(request: Request) -> FundingDataRepository:
    """Provide the app-scoped funding data repository"""
    return request.app.state.repository


def get_classification_thresholds() -> ClassificationThresholds:
    """Contributor classification cut-offs from settings"""
    return ClassificationThresholds(
        corporate_influence=settings.corporate_influence_threshold,
        grassroots_support=settings.grassroots_support_threshold,
        self_funded=settings.self_funded_threshold,
        party_supported=settings.party_supported_threshold,
    )


def get_health_thresholds() -> HealthThresholds:
    """Financial health status cut-offs from settings"""
    return HealthThresholds(
        high_burn_rate=settings.high_burn_rate_threshold,
        well_funded_cash=settings.well_funded_cash_threshold,
        adequate_cash=settings.adequate_cash_threshold,
    )


def get_ranking_thresholds() -> DonorRankingThresholds:
    """Donor ranking entry minimums from settings"""
    return DonorRankingThresholds(
        high_pac=settings.high_pac_ranking_minimum,
        self_funded=settings.self_funded_ranking_minimum,
        grassroots=settings.grassroots_ranking_minimum,
    )
