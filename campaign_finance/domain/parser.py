"""Batch parser - decodes a whole weball file in one linear pass"""

import logging
from typing import Iterator, List, Optional, Union

from campaign_finance.domain.decoder import decode_line
from campaign_finance.domain.models import DecodeFailure, FinancialRecord, ParseResult


def iter_decoded(raw: Optional[str], cycle: Optional[int] = None) -> Iterator[Union[FinancialRecord, DecodeFailure]]:
    """
    Lazily decode every non-blank line of a raw bulk file.

    Blank lines (including the trailing newline) are skipped, not reported.
    Line numbers are 1-based positions in the original text.
    """
    if not raw:
        return
    # Only "\n" ends a record; form feeds and other separators may sit inside fields
    for line_number, line in enumerate(raw.split("\n"), start=1):
        if not line.strip():
            continue
        yield decode_line(line, line_number=line_number, cycle=cycle)


def parse_records(raw: Optional[str], cycle: Optional[int] = None) -> ParseResult:
    """
    Parse a raw weball blob into records, keeping decode failures on the side.

    Output order matches input line order. Failed lines are dropped from
    ``records`` and collected in ``failures``; an empty input is a valid,
    empty result.
    """
    result = ParseResult()
    for outcome in iter_decoded(raw, cycle=cycle):
        if isinstance(outcome, DecodeFailure):
            logging.debug(
                "Skipping undecodable line",
                extra={"line_number": outcome.line_number, "reason": outcome.reason},
            )
            result.failures.append(outcome)
        else:
            result.records.append(outcome)

    if result.failures:
        logging.info(
            "Parsed campaign finance records with skipped lines",
            extra={
                "records": len(result.records),
                "failure_count": result.failure_count,
                "failure_reasons": result.failure_reasons,
            },
        )
    return result


def parse_all_records(raw: Optional[str], cycle: Optional[int] = None) -> List[FinancialRecord]:
    """Parse a raw weball blob, returning only the successfully decoded records"""
    return parse_records(raw, cycle=cycle).records
