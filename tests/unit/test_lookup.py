"""Unit tests for name and location lookup"""

from campaign_finance.domain.lookup import (
    AT_LARGE,
    find_by_candidate_name,
    find_by_location,
    name_tokens,
    normalize_district,
    primary_record,
)
from campaign_finance.domain.parser import parse_all_records


def test_name_search_is_order_tolerant(make_record):
    """'Smith, John' and 'John Smith' both find 'SMITH, JOHN A'"""
    record = make_record(CAND_NAME="SMITH, JOHN A")

    assert find_by_candidate_name([record], "Smith, John") == [record]
    assert find_by_candidate_name([record], "John Smith") == [record]
    assert find_by_candidate_name([record], "smith") == [record]


def test_name_search_requires_every_token(make_record):
    record = make_record(CAND_NAME="SMITH, JOHN A")
    assert find_by_candidate_name([record], "Jane Smith") == []


def test_name_search_substring_within_token(make_record):
    """Partial names still match, e.g. 'Ocasio' inside a hyphenated surname"""
    record = make_record(CAND_NAME="OCASIO-CORTEZ, ALEXANDRIA")
    assert find_by_candidate_name([record], "Ocasio Alexandria") == [record]


def test_name_search_preserves_collection_order(sample_blob):
    records = parse_all_records(sample_blob)
    matches = find_by_candidate_name(records, "John Smith")

    assert [r.candidate_id for r in matches] == ["H6CA12001", "S6CA00004"]


def test_name_search_blank_query_matches_nothing(sample_blob):
    records = parse_all_records(sample_blob)
    assert find_by_candidate_name(records, "") == []
    assert find_by_candidate_name(records, " , ") == []


def test_name_tokens_normalization():
    assert name_tokens("SMITH, JOHN A.") == {"smith", "john", "a"}
    assert name_tokens("John  A Smith") == name_tokens("Smith, John A")


def test_location_filter_is_exact(sample_blob):
    """District 12 never returns district 13 of the same state"""
    records = parse_all_records(sample_blob)
    matches = find_by_location(records, "CA", "12")

    assert [r.candidate_id for r in matches] == ["H6CA12001"]
    assert all(r.district == "12" for r in matches)


def test_location_state_only(sample_blob):
    records = parse_all_records(sample_blob)
    matches = find_by_location(records, "ca")

    assert [r.candidate_id for r in matches] == ["H6CA12001", "H6CA13002", "S6CA00004"]


def test_location_at_large_aliases(sample_blob):
    records = parse_all_records(sample_blob)

    for alias in ("00", "0", "AL", "at-large", "At Large"):
        matches = find_by_location(records, "WY", alias)
        assert [r.candidate_id for r in matches] == ["H6WY00005"]


def test_location_leading_zero_district(make_record):
    record = make_record(CAND_OFFICE_DISTRICT="01")
    assert find_by_location([record], "CA", "1") == [record]


def test_location_blank_state(sample_blob):
    assert find_by_location(parse_all_records(sample_blob), "") == []


def test_normalize_district():
    assert normalize_district("00") == AT_LARGE
    assert normalize_district(None) == AT_LARGE
    assert normalize_district("07") == "7"


def test_primary_record_is_first_match(sample_blob):
    records = parse_all_records(sample_blob)
    assert primary_record(find_by_candidate_name(records, "Smith")).candidate_id == "H6CA12001"
    assert primary_record([]) is None
