"""Helpers to load salary/ACE CSVs and owner lookups and emit canonical records."""

from __future__ import annotations

import csv
import logging
import math
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel

from rostercap.models import PlayerRecord


logger = logging.getLogger(__name__)

UNKNOWN_OWNER = "Unknown"

DEFAULT_SALARY_MAPPING = {
    "name": "Player",
    "team": "Team|Tm",
    "position": "Pos",
    "salary": "SALARY",
    "ace": "ACE",
}

DEFAULT_OWNER_MAPPING = {
    "team": "Team",
    "owner": "GM",
}

_MONEY_NOISE = re.compile(r"[\"$,\s]")


def _column_spec(
    mapping: Mapping[str, str], key: str, defaults: Mapping[str, str]
) -> Tuple[str, ...]:
    spec = mapping.get(key)
    if spec is None:
        spec = defaults.get(key)
    if not spec:
        return ()
    return tuple(part.strip() for part in spec.split("|") if part.strip())


def _first_value(row: Mapping[str, Optional[str]], columns: Sequence[str]) -> str:
    """Return the first non-blank value among ``columns`` (stripped), else ``""``."""

    for column in columns:
        value = row.get(column)
        if value is not None and value.strip():
            return value.strip()
    return ""


class SalaryRow(BaseModel):
    raw_name: str
    raw_team: str = ""
    raw_position: str = ""
    raw_salary: str = ""
    raw_ace: str = ""

    @classmethod
    def from_mapping(
        cls,
        row: Mapping[str, Optional[str]],
        mapping: Mapping[str, str] | None = None,
    ) -> "SalaryRow":
        mapping = mapping or DEFAULT_SALARY_MAPPING

        def extract(key: str) -> str:
            return _first_value(row, _column_spec(mapping, key, DEFAULT_SALARY_MAPPING))

        return cls(
            raw_name=extract("name"),
            raw_team=extract("team"),
            raw_position=extract("position"),
            raw_salary=extract("salary"),
            raw_ace=extract("ace"),
        )


@dataclass(frozen=True)
class LoadReport:
    total_rows: int
    eligible_players: int
    skipped_rows: List[str]


def parse_money(raw: Optional[str]) -> float:
    """Convert ``"$1,250,000"``-style text to a float, falling back to ``0.0``."""

    if raw is None:
        return 0.0
    text = _MONEY_NOISE.sub("", raw)
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return value


def parse_rows(
    raw_rows: Iterable[Mapping[str, Optional[str]]],
    *,
    mapping: Mapping[str, str] | None = None,
) -> List[SalaryRow]:
    return [SalaryRow.from_mapping(row, mapping) for row in raw_rows]


def load_salary_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[SalaryRow]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.DictReader(f)
        rows = parse_rows(reader, mapping=mapping)
    logger.debug("Read %s salary rows from %s", len(rows), path)
    return rows


def rows_to_records_with_report(rows: Sequence[SalaryRow]) -> Tuple[List[PlayerRecord], LoadReport]:
    records: List[PlayerRecord] = []
    skipped: List[str] = []
    seen_names: set[str] = set()
    for index, row in enumerate(rows, start=1):
        salary = parse_money(row.raw_salary)
        ace = parse_money(row.raw_ace)
        if not row.raw_name or salary <= 0 or ace <= 0:
            skipped.append(row.raw_name or f"row {index}")
            continue
        # Names identify players on the board; the first eligible row wins.
        if row.raw_name in seen_names:
            skipped.append(row.raw_name)
            continue
        seen_names.add(row.raw_name)
        records.append(
            PlayerRecord(
                name=row.raw_name,
                team=row.raw_team,
                position=row.raw_position,
                salary=salary,
                ace=ace,
            )
        )

    records.sort(key=lambda record: record.ace, reverse=True)
    if skipped:
        logger.debug("Skipped %s ineligible salary rows", len(skipped))
    report = LoadReport(
        total_rows=len(rows),
        eligible_players=len(records),
        skipped_rows=skipped,
    )
    return records, report


def rows_to_records(rows: Sequence[SalaryRow]) -> List[PlayerRecord]:
    """Build eligible records, sorted by ACE descending.

    Rows without a name, or without a positive salary and ACE, are dropped, as
    are repeats of a name already loaded.
    """

    records, _ = rows_to_records_with_report(rows)
    return records


def load_records_from_csv(
    path: Path,
    *,
    mapping: Mapping[str, str] | None = None,
) -> Tuple[List[PlayerRecord], LoadReport]:
    return rows_to_records_with_report(load_salary_csv(path, mapping=mapping))


def rows_to_owners(
    raw_rows: Iterable[Mapping[str, Optional[str]]],
    *,
    mapping: Mapping[str, str] | None = None,
) -> Dict[str, str]:
    """Build a team -> owner lookup; later rows for the same team win."""

    mapping = mapping or DEFAULT_OWNER_MAPPING
    team_columns = _column_spec(mapping, "team", DEFAULT_OWNER_MAPPING)
    owner_columns = _column_spec(mapping, "owner", DEFAULT_OWNER_MAPPING)
    owners: Dict[str, str] = {}
    for row in raw_rows:
        team = _first_value(row, team_columns)
        if not team:
            continue
        owners[team] = _first_value(row, owner_columns) or UNKNOWN_OWNER
    return owners


def load_owner_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> Dict[str, str]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        owners = rows_to_owners(csv.DictReader(f), mapping=mapping)
    logger.debug("Loaded %s team owners from %s", len(owners), path)
    return owners
