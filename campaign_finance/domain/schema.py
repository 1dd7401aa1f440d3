"""
FEC "weball" (all candidates) bulk-file layout.

Columns are positional and pipe-delimited. The order below is the published
FEC layout; a format change upstream is a change to WEBALL_SCHEMA only.
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Tuple

from campaign_finance.utils.date_utils import parse_fec_date

SCHEMA_VERSION = "weball-2024"
FIELD_DELIMITER = "|"


def parse_text(value: str) -> str:
    return value.strip()


def parse_amount(value: str) -> float:
    """
    Parse an FEC dollar amount.

    Blank or unparsable values become 0.0 so a slightly malformed line still
    yields a usable record.
    """
    cleaned = value.strip().replace(",", "").replace("$", "")
    if not cleaned:
        return 0.0
    try:
        amount = float(cleaned)
    except ValueError:
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


@dataclass(frozen=True)
class FieldSpec:
    """One positional column of the bulk file"""

    name: str  # FEC column name
    attribute: str  # FinancialRecord attribute it populates
    parser: Callable[[str], Any]
    required: bool = True


WEBALL_SCHEMA: Tuple[FieldSpec, ...] = (
    FieldSpec("CAND_ID", "candidate_id", parse_text),
    FieldSpec("CAND_NAME", "candidate_name", parse_text),
    FieldSpec("CAND_ICI", "incumbent_challenger_status", parse_text),
    FieldSpec("PTY_CD", "party_code", parse_text),
    FieldSpec("CAND_PTY_AFFILIATION", "party", parse_text),
    FieldSpec("TTL_RECEIPTS", "total_receipts", parse_amount),
    FieldSpec("TRANS_FROM_AUTH", "transfers_from_authorized", parse_amount),
    FieldSpec("TTL_DISB", "total_disbursements", parse_amount),
    FieldSpec("TRANS_TO_AUTH", "transfers_to_authorized", parse_amount),
    FieldSpec("COH_BOP", "beginning_cash", parse_amount),
    FieldSpec("COH_COP", "ending_cash", parse_amount),
    FieldSpec("CAND_CONTRIB", "candidate_contributions", parse_amount),
    FieldSpec("CAND_LOANS", "candidate_loans", parse_amount),
    FieldSpec("OTHER_LOANS", "other_loans", parse_amount),
    FieldSpec("CAND_LOAN_REPAY", "candidate_loan_repayments", parse_amount),
    FieldSpec("OTHER_LOAN_REPAY", "other_loan_repayments", parse_amount),
    FieldSpec("DEBTS_OWED_BY", "total_debt", parse_amount),
    FieldSpec("TTL_INDIV_CONTRIB", "individual_contributions", parse_amount),
    FieldSpec("CAND_OFFICE_ST", "state", parse_text),
    FieldSpec("CAND_OFFICE_DISTRICT", "district", parse_text),
    FieldSpec("SPEC_ELECTION", "special_election", parse_text),
    FieldSpec("PRIM_ELECTION", "primary_election", parse_text),
    FieldSpec("RUN_ELECTION", "runoff_election", parse_text),
    FieldSpec("GEN_ELECTION", "general_election", parse_text),
    FieldSpec("GEN_ELECTION_PRECENT", "general_election_percent", parse_amount),
    FieldSpec("OTHER_POL_CMTE_CONTRIB", "pac_contributions", parse_amount),
    FieldSpec("POL_PTY_CONTRIB", "party_contributions", parse_amount),
    FieldSpec("CVG_END_DT", "coverage_end_date", parse_fec_date),
    FieldSpec("INDIV_REFUNDS", "individual_refunds", parse_amount, required=False),
    FieldSpec("CMTE_REFUNDS", "committee_refunds", parse_amount, required=False),
)


@lru_cache(maxsize=None)
def minimum_field_count(schema: Tuple[FieldSpec, ...] = WEBALL_SCHEMA) -> int:
    """Number of columns a line needs to cover every required field"""
    required = [i for i, spec in enumerate(schema) if spec.required]
    return required[-1] + 1 if required else 0
