import csv
import json
from pathlib import Path

import pytest

from rostercap.cli import _parse_mapping, main


def _write_inputs(tmp_path: Path) -> tuple[Path, Path]:
    salaries = tmp_path / "ACE_MODEL.csv"
    salaries.write_text(
        "Player,Team,Tm,Pos,SALARY,ACE\n"
        'Star Guard,BOS,,PG,"$40,000,000","$50,000,000"\n'
        'Big Center,,LAL,C,"$60,000,000","$45,000,000"\n'
        'Wing Shooter,BOS,,SF,"$9,000,000","$12,000,000"\n'
        'Bench Body,MIA,,PF,"$0","$1,000,000"\n',
        encoding="utf-8",
    )
    owners = tmp_path / "gms.csv"
    owners.write_text("Team,GM\nBOS,Alice\n", encoding="utf-8")
    return salaries, owners


def test_parse_mapping():
    assert _parse_mapping(["team=Team|Tm", " ace = Estimate "]) == {"team": "Team|Tm", "ace": "Estimate"}
    with pytest.raises(ValueError):
        _parse_mapping(["broken"])


def test_cli_builds_roster_and_exports(tmp_path: Path, capsys):
    salaries, owners = _write_inputs(tmp_path)
    export_path = tmp_path / "roster.csv"

    main([
        str(salaries),
        "--owners", str(owners),
        "--pick", "Star Guard",
        "--pick", "Nobody",
        "--pick", "Big Center",
        "--salary-cap", "60000000",
        "--rankings",
        "--export", str(export_path),
    ])

    out = capsys.readouterr().out
    assert "Loaded 3/4 eligible players" in out
    assert "Not in pool: Nobody" in out
    assert "Could not add Big Center: Not enough cap space!" in out
    assert "Cap remaining: $10,000,000" in out
    assert "Alice" in out

    rows = list(csv.reader(export_path.open(encoding="utf-8")))
    assert [row[0] for row in rows[1:]] == ["Star Guard"]


def test_cli_capacity_override_and_drop(tmp_path: Path, capsys):
    salaries, _ = _write_inputs(tmp_path)

    main([
        str(salaries),
        "--capacity", "1",
        "--pick", "Wing Shooter",
        "--pick", "Star Guard",
        "--drop", "0",
        "--drop", "3",
        "--value-filter", "underpaid",
    ])

    out = capsys.readouterr().out
    assert "Could not add Star Guard: Roster is full!" in out
    assert "No roster slot 3" in out
    assert "Roster (0)" in out
    assert "Available (2)" in out


def test_cli_saves_profile(tmp_path: Path):
    salaries, _ = _write_inputs(tmp_path)
    profile_path = tmp_path / "profile.json"

    main([str(salaries), "--salary-column", "team=Tm|Team", "--save-profile", str(profile_path)])

    data = json.loads(profile_path.read_text(encoding="utf-8"))
    assert data["salary_mapping"] == {"team": "Tm|Team"}
    assert data["owner_mapping"] == {}


def test_cli_unknown_league_exits(tmp_path: Path):
    salaries, _ = _write_inputs(tmp_path)
    with pytest.raises(SystemExit):
        main([str(salaries), "--league", "XFL"])


def test_cli_missing_file_exits(tmp_path: Path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.csv")])
