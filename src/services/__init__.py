"""Application services wiring the log parser to storage."""

from services.game_logs import ProcessGameLogsResult, process_game_logs, validate_log_filename
from services.matches import MatchSummary, delete_all_matches, get_match_ranking, list_matches
from services.players import get_global_ranking

__all__ = [
    "MatchSummary",
    "ProcessGameLogsResult",
    "delete_all_matches",
    "get_global_ranking",
    "get_match_ranking",
    "list_matches",
    "process_game_logs",
    "validate_log_filename",
]
