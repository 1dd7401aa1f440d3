"""Pytest fixtures for testing"""

import pytest
from typing import Callable, Dict
from fastapi.testclient import TestClient

from campaign_finance.api.main import create_app
from campaign_finance.domain.decoder import decode_line
from campaign_finance.domain.models import FinancialRecord
from campaign_finance.domain.schema import WEBALL_SCHEMA
from campaign_finance.infrastructure.cache import RecordCache

# Raw column values for a plain House challenger with no money
DEFAULT_COLUMNS: Dict[str, str] = {
    "CAND_ID": "H6CA12001",
    "CAND_NAME": "SMITH, JOHN A",
    "CAND_ICI": "C",
    "PTY_CD": "1",
    "CAND_PTY_AFFILIATION": "DEM",
    "CAND_OFFICE_ST": "CA",
    "CAND_OFFICE_DISTRICT": "12",
    "CVG_END_DT": "06/30/2026",
}


def build_line(**columns: str) -> str:
    """Build one weball line; unspecified amounts are 0 and text columns blank"""
    values = dict(DEFAULT_COLUMNS, **{k: str(v) for k, v in columns.items()})
    parts = []
    for spec in WEBALL_SCHEMA:
        default = "" if spec.parser.__name__ in ("parse_text", "parse_fec_date") else "0"
        parts.append(values.get(spec.name, default))
    return "|".join(parts)


def build_record(**columns: str) -> FinancialRecord:
    record = decode_line(build_line(**columns), line_number=1)
    assert isinstance(record, FinancialRecord)
    return record


class InMemoryRecordSource:
    """Record source serving a fixed blob and counting reads"""

    def __init__(self, text: str):
        self.text = text
        self.reads = 0

    @property
    def identity(self) -> str:
        return "memory:test"

    async def read_text(self) -> str:
        self.reads += 1
        return self.text


@pytest.fixture
def make_line() -> Callable[..., str]:
    return build_line


@pytest.fixture
def make_record() -> Callable[..., FinancialRecord]:
    return build_record


@pytest.fixture
def sample_blob() -> str:
    """Small bulk file: three House members, one senator, one truncated line"""
    lines = [
        build_line(
            CAND_ID="H6CA12001",
            CAND_NAME="SMITH, JOHN A",
            TTL_RECEIPTS="100000",
            TRANS_FROM_AUTH="20000",
            TTL_DISB="60000",
            TTL_INDIV_CONTRIB="50000",
            OTHER_POL_CMTE_CONTRIB="30000",
            COH_COP="150000",
        ),
        build_line(
            CAND_ID="H6CA13002",
            CAND_NAME="DOE, JANE",
            CAND_PTY_AFFILIATION="REP",
            CAND_OFFICE_DISTRICT="13",
            TTL_RECEIPTS="500000",
            TTL_DISB="450000",
            OTHER_POL_CMTE_CONTRIB="300000",
            TTL_INDIV_CONTRIB="200000",
            COH_COP="40000",
        ),
        "H6TX01003|TRUNCATED, LINE",
        build_line(
            CAND_ID="S6CA00004",
            CAND_NAME="SMITH, JOHN A",
            CAND_OFFICE_DISTRICT="00",
            TTL_RECEIPTS="250000",
            CAND_CONTRIB="150000",
            CAND_LOANS="50000",
            TTL_INDIV_CONTRIB="50000",
            DEBTS_OWED_BY="300000",
        ),
        build_line(
            CAND_ID="H6WY00005",
            CAND_NAME="JONES, MARY",
            CAND_OFFICE_ST="WY",
            CAND_OFFICE_DISTRICT="00",
            TTL_RECEIPTS="80000",
            TTL_INDIV_CONTRIB="70000",
            POL_PTY_CONTRIB="10000",
        ),
    ]
    return "\n".join(lines) + "\n"


@pytest.fixture
def record_source(sample_blob: str) -> InMemoryRecordSource:
    return InMemoryRecordSource(sample_blob)


@pytest.fixture
def client(record_source: InMemoryRecordSource) -> TestClient:
    """FastAPI test client backed by the in-memory bulk file"""
    app = create_app(source=record_source, cache=RecordCache(ttl_seconds=60))
    return TestClient(app)
