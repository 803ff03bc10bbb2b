"""Player pool utilities (filtering, rankings, chart data, export)."""

from .charts import PlayerShare, ScatterPoint, ScatterSeries, TeamShares, salary_scatter, team_shares
from .export import export_roster_to_csv
from .filtering import FilterCriteria, filter_players, reset_filters
from .rankings import RosterSummary, TeamRanking, clean_team, rank_teams, summarize_roster

__all__ = [
    "FilterCriteria",
    "PlayerShare",
    "RosterSummary",
    "ScatterPoint",
    "ScatterSeries",
    "TeamRanking",
    "TeamShares",
    "clean_team",
    "export_roster_to_csv",
    "filter_players",
    "rank_teams",
    "reset_filters",
    "salary_scatter",
    "summarize_roster",
    "team_shares",
]
