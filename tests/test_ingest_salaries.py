from pathlib import Path

import pytest

from rostercap.ingest import (
    SalaryRow,
    load_owner_csv,
    load_records_from_csv,
    parse_money,
    parse_rows,
    rows_to_owners,
    rows_to_records,
    rows_to_records_with_report,
)


def _row(**kwargs):
    return SalaryRow.from_mapping(kwargs)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("$1,250,000", 1_250_000.0),
        ('  "$ 45,000,000" ', 45_000_000.0),
        ("3200.5", 3200.5),
        ("", 0.0),
        (None, 0.0),
        ("N/A", 0.0),
        ("nan", 0.0),
    ],
)
def test_parse_money(raw, expected):
    assert parse_money(raw) == expected


def test_from_mapping_prefers_team_then_tm():
    with_team = _row(Player="A", Team="BOS", Tm="LAL", SALARY="1", ACE="1")
    tm_only = _row(Player="B", Team="", Tm=" LAL ", SALARY="1", ACE="1")
    no_team_column = _row(Player="C", Tm="MIA", SALARY="1", ACE="1")

    assert with_team.raw_team == "BOS"
    assert tm_only.raw_team == "LAL"
    assert no_team_column.raw_team == "MIA"


def test_from_mapping_custom_columns():
    row = SalaryRow.from_mapping(
        {"name": " Jay Smith ", "salary": "$10", "estimate": "$12"},
        {"name": "name", "salary": "salary", "ace": "estimate"},
    )
    assert row.raw_name == "Jay Smith"
    assert row.raw_salary == "$10"
    assert row.raw_ace == "$12"
    assert row.raw_position == ""


def test_rows_to_records_filters_and_sorts():
    rows = [
        _row(Player="Low Ace", Team="BOS", Pos="PG", SALARY="$5,000,000", ACE="$4,000,000"),
        _row(Player="", Team="BOS", Pos="SG", SALARY="$5,000,000", ACE="$6,000,000"),
        _row(Player="No Salary", Team="BOS", Pos="SF", SALARY="", ACE="$6,000,000"),
        _row(Player="Zero Ace", Team="BOS", Pos="PF", SALARY="$1,000,000", ACE="0"),
        _row(Player="Garbage", Team="BOS", Pos="C", SALARY="abc", ACE="$2,000,000"),
        _row(Player="High Ace", Tm="LAL", Pos="C", SALARY="$30,000,000", ACE="$40,000,000"),
    ]

    records = rows_to_records(rows)

    assert [record.name for record in records] == ["High Ace", "Low Ace"]
    assert records[0].team == "LAL"
    assert records[0].value_pct == pytest.approx(-25.0)
    assert records[1].value_pct == pytest.approx(25.0)


def test_parse_rows_accepts_plain_mappings():
    rows = parse_rows([
        {"Player": "One", "Team": "DEN", "Pos": "C", "SALARY": "$1", "ACE": "$2"},
        {"Player": "Two", "Team": None, "Pos": None, "SALARY": None, "ACE": None},
    ])
    assert rows[0].raw_team == "DEN"
    assert rows[1].raw_salary == ""


def test_load_records_from_csv_reports_skips(tmp_path: Path):
    csv_path = tmp_path / "ACE_MODEL.csv"
    csv_path.write_text(
        "Player,Team,Pos,SALARY,ACE\n"
        'Nikola Center,DEN,C,"$51,415,938","$60,000,000"\n'
        'Bench Guy,DEN,PG,"$0","$1,000,000"\n'
        'Wing Two,2TM,SF,"$12,000,000","$10,000,000"\n',
        encoding="utf-8",
    )

    records, report = load_records_from_csv(csv_path)

    assert [record.name for record in records] == ["Nikola Center", "Wing Two"]
    assert records[0].salary == 51_415_938
    assert report.total_rows == 3
    assert report.eligible_players == 2
    assert report.skipped_rows == ["Bench Guy"]


def test_rows_to_owners_defaults_unknown_and_last_wins():
    owners = rows_to_owners([
        {"Team": "BOS", "GM": "Alice"},
        {"Team": " LAL ", "GM": ""},
        {"Team": "", "GM": "Nobody"},
        {"Team": "BOS", "GM": "Bea"},
    ])
    assert owners == {"BOS": "Bea", "LAL": "Unknown"}


def test_load_owner_csv(tmp_path: Path):
    csv_path = tmp_path / "gms.csv"
    csv_path.write_text("Team,GM\nBOS,Alice\nMIA,Carl\n", encoding="utf-8")

    assert load_owner_csv(csv_path) == {"BOS": "Alice", "MIA": "Carl"}


def test_rows_to_records_keeps_first_row_per_name():
    rows = [
        _row(Player="Traded Guy", Team="2TM", Pos="SG", SALARY="$8,000,000", ACE="$9,000,000"),
        _row(Player="Bench Twin", Team="MIA", Pos="PF", SALARY="$0", ACE="$1,000,000"),
        _row(Player="Traded Guy", Team="BOS", Pos="SG", SALARY="$4,000,000", ACE="$5,000,000"),
        _row(Player="Bench Twin", Team="BOS", Pos="PF", SALARY="$2,000,000", ACE="$3,000,000"),
    ]

    records, report = rows_to_records_with_report(rows)

    assert [(record.name, record.team) for record in records] == [
        ("Traded Guy", "2TM"),
        ("Bench Twin", "BOS"),
    ]
    assert report.eligible_players == 2
    assert report.skipped_rows == ["Bench Twin", "Traded Guy"]
