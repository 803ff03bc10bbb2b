"""Command-line interface for building a capped roster from salary/ACE data."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from rostercap.config import DEFAULT_LEAGUE, RosterRules, get_rules
from rostercap.config_loader import MappingProfile
from rostercap.ingest import load_owner_csv, load_records_from_csv
from rostercap.models import PlayerRecord
from rostercap.pool import (
    FilterCriteria,
    RosterSummary,
    TeamRanking,
    export_roster_to_csv,
    filter_players,
    rank_teams,
    summarize_roster,
)
from rostercap.roster import MoveStatus, RosterBoard
from rostercap.valuation import format_money, format_value_pct


logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a salary-capped roster from ACE valuations")
    parser.add_argument("salaries", type=Path, help="Path to the player salary/ACE CSV")
    parser.add_argument("--owners", type=Path, default=None, help="Optional team -> GM CSV")
    parser.add_argument("--league", default=DEFAULT_LEAGUE, help="League rules key (e.g., NBA)")
    parser.add_argument("--capacity", type=int, default=None, help="Override the roster size limit")
    parser.add_argument("--salary-cap", type=float, default=None, help="Override the ACE salary cap")
    parser.add_argument(
        "--salary-column",
        action="append",
        default=[],
        help="Mapping for salary CSV columns (e.g., team=Team|Tm)",
    )
    parser.add_argument(
        "--owner-column",
        action="append",
        default=[],
        help="Mapping for owner CSV columns (e.g., owner=GM)",
    )
    parser.add_argument("--load-profile", type=Path, help="Load column mapping JSON", default=None)
    parser.add_argument("--save-profile", type=Path, help="Save column mapping JSON", default=None)
    parser.add_argument(
        "--pick",
        action="append",
        default=[],
        help="Player name to add to the roster (repeatable, applied in order)",
    )
    parser.add_argument(
        "--drop",
        type=int,
        action="append",
        default=[],
        help="Roster index (0-based) to send back to the pool after picks",
    )
    parser.add_argument("--search", default="", help="Case-insensitive player name filter")
    parser.add_argument("--salary-operator", choices=(">=", "<="), default=">=")
    parser.add_argument("--salary-value", type=float, default=None, help="ACE salary threshold")
    parser.add_argument(
        "--position",
        action="append",
        default=[],
        help="Restrict the pool to a position (repeatable)",
    )
    parser.add_argument(
        "--value-filter",
        choices=("all", "underpaid", "fair", "overpaid"),
        default="all",
    )
    parser.add_argument("--limit", type=int, default=25, help="Rows of the pool to print (0 = all)")
    parser.add_argument("--rankings", action="store_true", help="Print GM/team value rankings")
    parser.add_argument("--export", type=Path, default=None, help="Write the roster to this CSV path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _parse_mapping(entries: list[str]) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for entry in entries:
        if "=" not in entry:
            raise ValueError(f"Invalid mapping entry '{entry}', expected key=value")
        key, value = entry.split("=", 1)
        mapping[key.strip()] = value.strip()
    return mapping


def _resolve_rules(args: argparse.Namespace) -> RosterRules:
    return get_rules(args.league).with_overrides(
        capacity=args.capacity,
        salary_cap=args.salary_cap,
    )


def _player_line(player: PlayerRecord) -> str:
    return "{:<24} {:<5} {:<3} {:>14} {:>14} {:>8}  {}".format(
        player.name[:24],
        player.team or "N/A",
        player.position or "N/A",
        format_money(player.salary),
        format_money(player.ace),
        format_value_pct(player.value_pct),
        player.value_band,
    )


def _print_players(title: str, players: Sequence[PlayerRecord], limit: int = 0) -> None:
    print(f"{title} ({len(players)})")
    shown = players[:limit] if limit > 0 else players
    for player in shown:
        print(f"  {_player_line(player)}")
    hidden = len(players) - len(shown)
    if hidden > 0:
        print(f"  ... +{hidden} more")


def _print_summary(summary: RosterSummary, rules: RosterRules) -> None:
    counts = " ".join(f"{pos}={count}" for pos, count in summary.count_by_position.items())
    print(f"Players: {summary.total_players}/{rules.capacity}  {counts}")
    print(
        f"Cap remaining: {format_money(summary.cap_remaining)}  "
        f"Avg value: {format_value_pct(summary.mean_value_pct)} ({summary.mean_value_band})"
    )


def _print_rankings(rankings: Sequence[TeamRanking]) -> None:
    print("GM rankings")
    for row in rankings:
        print(
            f"  {row.rank:>3}. {row.owner:<20} {row.team:<5} {row.count:>3} "
            f"{format_value_pct(row.mean_value_pct):>8}"
        )


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        salary_mapping = _parse_mapping(args.salary_column)
        owner_mapping = _parse_mapping(args.owner_column)
        rules = _resolve_rules(args)
    except (KeyError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc
    logger.debug("Using %s rules: capacity=%s cap=%.0f", rules.league, rules.capacity, rules.salary_cap)

    if args.load_profile:
        profile = MappingProfile.load(args.load_profile)
        salary_mapping = profile.salary_mapping | salary_mapping
        owner_mapping = profile.owner_mapping | owner_mapping

    try:
        records, report = load_records_from_csv(args.salaries, mapping=salary_mapping or None)
        owners = load_owner_csv(args.owners, mapping=owner_mapping or None) if args.owners else {}
    except FileNotFoundError as exc:
        raise SystemExit(f"File not found: {exc.filename}") from exc

    if args.save_profile:
        MappingProfile(salary_mapping, owner_mapping).save(args.save_profile)
        print(f"Saved mapping profile to {args.save_profile}")

    print(f"Loaded {report.eligible_players}/{report.total_rows} eligible players")

    board = RosterBoard(records, rules=rules)
    for name in args.pick:
        result = board.move_to_selected(name)
        if result.status is MoveStatus.NOT_FOUND:
            print(f"Not in pool: {name}")
        elif result.status is MoveStatus.REJECTED:
            print(f"Could not add {name}: {result.reason.message}")
    for index in args.drop:
        if board.move_to_available(index) is None:
            print(f"No roster slot {index}")

    criteria = FilterCriteria(
        query=args.search,
        salary_operator=args.salary_operator,
        salary_value=args.salary_value,
        positions=tuple(args.position),
        value_filter=args.value_filter,
    )
    _print_players("Available", filter_players(board.available, criteria), limit=args.limit)
    _print_players("Roster", board.selected)
    _print_summary(summarize_roster(board.selected, rules), rules)

    if args.rankings:
        _print_rankings(rank_teams(board.all_players(), owners))

    if args.export:
        args.export.write_text(export_roster_to_csv(board.selected), encoding="utf-8")
        print(f"Wrote roster to {args.export}")


if __name__ == "__main__":
    main()
