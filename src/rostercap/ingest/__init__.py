"""Input adapters that normalize raw salary and owner data."""

from .salaries import (
    DEFAULT_OWNER_MAPPING,
    DEFAULT_SALARY_MAPPING,
    UNKNOWN_OWNER,
    LoadReport,
    SalaryRow,
    load_owner_csv,
    load_records_from_csv,
    load_salary_csv,
    parse_money,
    parse_rows,
    rows_to_owners,
    rows_to_records,
    rows_to_records_with_report,
)

__all__ = [
    "DEFAULT_OWNER_MAPPING",
    "DEFAULT_SALARY_MAPPING",
    "UNKNOWN_OWNER",
    "LoadReport",
    "SalaryRow",
    "load_owner_csv",
    "load_records_from_csv",
    "load_salary_csv",
    "parse_money",
    "parse_rows",
    "rows_to_owners",
    "rows_to_records",
    "rows_to_records_with_report",
]
