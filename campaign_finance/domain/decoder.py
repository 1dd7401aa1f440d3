"""Record decoder - turns one weball line into a FinancialRecord"""

from typing import Optional, Tuple, Union

from campaign_finance.domain.models import DecodeFailure, FinancialRecord
from campaign_finance.domain.schema import (
    FIELD_DELIMITER,
    WEBALL_SCHEMA,
    FieldSpec,
    minimum_field_count,
)
from campaign_finance.utils.date_utils import cycle_for_date, cycle_start_date

TRUNCATED_RECORD = "truncated record"
EMPTY_LINE = "empty line"
MISSING_CANDIDATE_ID = "missing candidate id"

OFFICE_CODES = ("H", "S", "P")


def decode_line(
    line: str,
    line_number: int = 0,
    cycle: Optional[int] = None,
    schema: Tuple[FieldSpec, ...] = WEBALL_SCHEMA,
) -> Union[FinancialRecord, DecodeFailure]:
    """
    Decode one pipe-delimited line into a FinancialRecord.

    Malformed input is reported as a DecodeFailure rather than raised so the
    batch parser can keep going. Only a non-string argument raises.

    Args:
        line: Raw line, with or without its line terminator
        line_number: 1-based position in the source, carried into failures
        cycle: Election cycle to stamp on the record; derived from the
            coverage end date when omitted
        schema: Ordered column layout
    """
    if not isinstance(line, str):
        raise TypeError(f"decode_line expects str, got {type(line).__name__}")

    line = line.rstrip("\r\n")
    if not line.strip():
        return DecodeFailure(line_number=line_number, reason=EMPTY_LINE)

    fields = line.split(FIELD_DELIMITER)
    if len(fields) < minimum_field_count(schema):
        return DecodeFailure(line_number=line_number, reason=TRUNCATED_RECORD, field_count=len(fields))

    values = {}
    for spec, raw in zip(schema, fields):
        values[spec.attribute] = spec.parser(raw)

    candidate_id = values.get("candidate_id", "")
    if not candidate_id:
        return DecodeFailure(line_number=line_number, reason=MISSING_CANDIDATE_ID, field_count=len(fields))

    coverage_end = values.get("coverage_end_date")
    if cycle is None:
        cycle = cycle_for_date(coverage_end) if coverage_end else 0

    office = candidate_id[0].upper()
    values["office"] = office if office in OFFICE_CODES else ""
    values["cycle_number"] = cycle
    values["coverage_start_date"] = cycle_start_date(cycle) if cycle else None

    return FinancialRecord(**values)
