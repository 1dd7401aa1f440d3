"""Unit tests for the weball schema and record decoder"""

import pytest
from datetime import date
from campaign_finance.domain.decoder import (
    MISSING_CANDIDATE_ID,
    TRUNCATED_RECORD,
    decode_line,
)
from campaign_finance.domain.models import DecodeFailure, FinancialRecord
from campaign_finance.domain.schema import WEBALL_SCHEMA, minimum_field_count, parse_amount
from campaign_finance.utils.date_utils import cycle_for_date, parse_fec_date


def test_schema_is_thirty_columns_with_optional_refunds():
    """Weball layout: 30 columns, the two refund columns may be missing"""
    assert len(WEBALL_SCHEMA) == 30
    assert WEBALL_SCHEMA[0].name == "CAND_ID"
    assert WEBALL_SCHEMA[-1].name == "CMTE_REFUNDS"
    assert minimum_field_count() == 28


def test_decode_line_maps_columns_positionally(make_line):
    """Test every semantic group lands on the right attribute"""
    line = make_line(
        CAND_ID="H6CA12001",
        CAND_NAME="SMITH, JOHN A",
        CAND_ICI="I",
        TTL_RECEIPTS="100000.50",
        TRANS_FROM_AUTH="20000",
        TTL_DISB="60000",
        TRANS_TO_AUTH="5000",
        COH_BOP="1000",
        COH_COP="41000",
        CAND_CONTRIB="2500",
        CAND_LOANS="7500",
        OTHER_LOANS="1000",
        DEBTS_OWED_BY="12000",
        TTL_INDIV_CONTRIB="50000",
        OTHER_POL_CMTE_CONTRIB="30000",
        POL_PTY_CONTRIB="4000",
        CVG_END_DT="06/30/2026",
    )

    record = decode_line(line, line_number=1)

    assert isinstance(record, FinancialRecord)
    assert record.candidate_id == "H6CA12001"
    assert record.candidate_name == "SMITH, JOHN A"
    assert record.incumbent_challenger_status == "I"
    assert record.party == "DEM"
    assert record.state == "CA"
    assert record.district == "12"
    assert record.office == "H"
    assert record.total_receipts == 100000.50
    assert record.transfers_from_authorized == 20000
    assert record.total_disbursements == 60000
    assert record.transfers_to_authorized == 5000
    assert record.beginning_cash == 1000
    assert record.ending_cash == 41000
    assert record.individual_contributions == 50000
    assert record.pac_contributions == 30000
    assert record.party_contributions == 4000
    assert record.total_loans == 8500  # 7500 candidate + 1000 other
    assert record.total_debt == 12000
    assert record.coverage_end_date == date(2026, 6, 30)


def test_decode_line_derives_cycle_and_coverage_start(make_line):
    """Cycle is the even year closing the coverage period; start is Jan 1 of the odd year"""
    record = decode_line(make_line(CVG_END_DT="12/31/2025"))

    assert record.cycle_number == 2026
    assert record.coverage_start_date == date(2025, 1, 1)


def test_decode_line_explicit_cycle_wins(make_line):
    record = decode_line(make_line(CVG_END_DT="12/31/2025"), cycle=2024)
    assert record.cycle_number == 2024


def test_decode_line_blank_and_garbage_amounts_default_to_zero(make_line):
    """Unparsable numbers become 0 instead of rejecting the record"""
    record = decode_line(make_line(TTL_RECEIPTS="", TTL_DISB="n/a", COH_COP="1,234.50"))

    assert isinstance(record, FinancialRecord)
    assert record.total_receipts == 0.0
    assert record.total_disbursements == 0.0
    assert record.ending_cash == 1234.50


def test_decode_line_unparsable_date_is_none(make_line):
    """Bad coverage dates are None, never epoch; cycle falls back to 0"""
    record = decode_line(make_line(CVG_END_DT="not-a-date"))

    assert record.coverage_end_date is None
    assert record.coverage_start_date is None
    assert record.cycle_number == 0


def test_decode_line_truncated_record():
    """Too few columns is a failure value, not an exception"""
    result = decode_line("H6TX01003|TRUNCATED, LINE", line_number=3)

    assert isinstance(result, DecodeFailure)
    assert result.reason == TRUNCATED_RECORD
    assert result.line_number == 3
    assert result.field_count == 2


def test_decode_line_without_refund_columns(make_line):
    """The trailing optional columns may be absent"""
    line = "|".join(make_line().split("|")[:28])
    record = decode_line(line)

    assert isinstance(record, FinancialRecord)
    assert record.individual_refunds == 0.0
    assert record.committee_refunds == 0.0


def test_decode_line_missing_candidate_id(make_line):
    result = decode_line(make_line(CAND_ID=""))

    assert isinstance(result, DecodeFailure)
    assert result.reason == MISSING_CANDIDATE_ID


def test_decode_line_strips_line_terminator(make_line):
    record = decode_line(make_line(CMTE_REFUNDS="12") + "\r\n")
    assert record.committee_refunds == 12.0


def test_decode_line_rejects_non_string():
    """Programming errors still raise"""
    with pytest.raises(TypeError):
        decode_line(None)  # type: ignore[arg-type]


def test_decode_line_unknown_office_prefix(make_line):
    record = decode_line(make_line(CAND_ID="X1AA00001"))
    assert record.office == ""


def test_parse_amount_edge_cases():
    assert parse_amount("  42.10 ") == 42.10
    assert parse_amount("$1,000") == 1000.0
    assert parse_amount("-250") == -250.0
    assert parse_amount("nan") == 0.0
    assert parse_amount("inf") == 0.0


def test_parse_fec_date_encodings():
    assert parse_fec_date("06/30/2026") == date(2026, 6, 30)
    assert parse_fec_date("20260630") == date(2026, 6, 30)
    assert parse_fec_date("06302026") == date(2026, 6, 30)
    assert parse_fec_date("2026-06-30") == date(2026, 6, 30)
    assert parse_fec_date("") is None
    assert parse_fec_date("13/45/2026") is None


def test_cycle_for_date():
    assert cycle_for_date(date(2025, 3, 1)) == 2026
    assert cycle_for_date(date(2026, 11, 3)) == 2026
