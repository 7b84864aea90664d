"""Tests for rebuilding matches from a whole game log."""

from __future__ import annotations

import logging
from datetime import datetime

from domain.log_parser import MatchLogParser, parse_match_logs

MULTI_MATCH_LOG = """
23/04/1999 15:00:00 - New match 1 has started
23/04/1999 15:01:30 - Player1 killed Player2 using Shotgun

23/04/1999 15:02:00 - Player2 killed Player1 using Pistol
23/04/1999 15:03:00 - Player3 killed Player2 using AK47
23/04/1999 15:04:00 - <WORLD> killed Player3 by MOD_FALLING
23/04/1999 15:15:00 - Match 1 has ended

24/04/1999 10:00:00 - New match 2 has started
24/04/1999 10:05:00 - Player4 killed Player5 using Rifle
24/04/1999 10:06:00 - <WORLD> killed Player4 by DROWN
24/04/1999 10:15:00 - Match 2 has ended
"""


def test_single_match_scenario() -> None:
    result = parse_match_logs(
        "23/04/1999 15:00:00 - New match 1 has started\n"
        "23/04/1999 15:01:30 - Player1 killed Player2 using Shotgun\n"
        "23/04/1999 15:15:00 - Match 1 has ended"
    )

    assert result.parse_errors == []
    assert len(result.matches) == 1
    match = result.matches[0]
    assert match.id == "1"
    assert match.has_ended is True
    assert match.start_time == datetime(1999, 4, 23, 15, 0, 0)
    assert match.end_time == datetime(1999, 4, 23, 15, 15, 0)

    player1 = match.get_player_stats("Player1")
    player2 = match.get_player_stats("Player2")
    assert player1 is not None and player2 is not None
    assert (player1.kills, player1.deaths, player1.weapons_used) == (1, 0, {"Shotgun": 1})
    assert (player2.kills, player2.deaths) == (0, 1)


def test_multiple_matches_in_end_order_with_blank_lines_ignored() -> None:
    result = parse_match_logs(MULTI_MATCH_LOG)

    assert result.parse_errors == []
    assert [match.id for match in result.matches] == ["1", "2"]

    first, second = result.matches
    player2 = first.get_player_stats("Player2")
    player3 = first.get_player_stats("Player3")
    assert player2 is not None and player3 is not None
    assert (player2.kills, player2.deaths, player2.weapons_used) == (1, 2, {"Pistol": 1})
    assert (player3.kills, player3.deaths, player3.weapons_used) == (1, 1, {"AK47": 1})

    player4 = second.get_player_stats("Player4")
    player5 = second.get_player_stats("Player5")
    assert player4 is not None and player5 is not None
    assert (player4.kills, player4.deaths) == (1, 1)
    assert (player5.kills, player5.deaths) == (0, 1)


def test_world_kill_before_match_start_is_reported() -> None:
    result = parse_match_logs("23/04/1999 15:00:00 - <WORLD> killed Player2 by MOD_FALLING")

    assert result.matches == []
    assert result.parse_errors == ["Line 1: Match not started before processing event 'WORLD_KILL'"]


def test_events_without_active_match_are_reported_and_parsing_continues() -> None:
    result = parse_match_logs(
        "23/04/1999 14:59:00 - Player1 killed Player2 using Shotgun\n"
        "23/04/1999 14:59:30 - Match 0 has ended\n"
        "23/04/1999 15:00:00 - New match 1 has started\n"
        "23/04/1999 15:15:00 - Match 1 has ended"
    )

    assert [match.id for match in result.matches] == ["1"]
    assert result.parse_errors == [
        "Line 1: Match not started before processing event 'KILL'",
        "Line 2: Match not started before processing event 'MATCH_END'",
    ]


def test_invalid_date_and_unknown_event_lines_are_reported() -> None:
    result = parse_match_logs(
        "not a log line\n"
        "23/04/1999 15:00:00 - New match 2 has started\n"
        "23/04/1999 15:00:10 - Player1 joined the server\n"
        "23/04/1999 15:15:00 - Match 2 has ended"
    )

    assert [match.id for match in result.matches] == ["2"]
    assert result.parse_errors == [
        "Line 1: Invalid date format",
        "Line 3: Unknown event type",
    ]


def test_non_ascii_digits_in_date_are_invalid() -> None:
    result = parse_match_logs(
        "٢٣/04/1999 15:00:00 - New match 1 has started\n"
        "23/04/1999 15:15:00 - Match 1 has ended"
    )

    assert result.matches == []
    assert result.parse_errors == [
        "Line 1: Invalid date format",
        "Line 2: Match not started before processing event 'MATCH_END'",
    ]


def test_second_start_is_rejected_and_original_match_continues() -> None:
    result = parse_match_logs(
        "23/04/1999 15:00:00 - New match X has started\n"
        "23/04/1999 15:01:00 - Roman killed Nick using M16\n"
        "23/04/1999 15:02:00 - New match X has started\n"
        "23/04/1999 15:03:00 - Roman killed Nick using M16\n"
        "23/04/1999 15:15:00 - Match X has ended"
    )

    assert result.parse_errors == [
        "Line 3: Match already started before processing event 'MATCH_START'"
    ]
    assert len(result.matches) == 1
    match = result.matches[0]
    assert match.start_time == datetime(1999, 4, 23, 15, 0, 0)
    roman = match.get_player_stats("Roman")
    assert roman is not None
    assert roman.kills == 2
    assert roman.best_streak == 2


def test_mismatched_end_keeps_active_match_open() -> None:
    result = parse_match_logs(
        "23/04/1999 15:00:00 - New match Y has started\n"
        "23/04/1999 15:15:00 - Match X has ended\n"
        "23/04/1999 15:16:00 - Roman killed Nick using M16\n"
        "23/04/1999 15:20:00 - Match Y has ended"
    )

    assert result.parse_errors == ["Line 2: Match ID mismatch: Y !== X"]
    assert [match.id for match in result.matches] == ["Y"]
    assert result.matches[0].end_time == datetime(1999, 4, 23, 15, 20, 0)
    assert result.matches[0].get_player_stats("Roman") is not None


def test_incomplete_matches_are_dropped_without_extra_errors() -> None:
    result = parse_match_logs(
        "23/04/1999 15:00:00 - New match incomplete-match has started\n"
        "23/04/1999 15:01:00 - Roman killed Nick using M16\n"
        "23/04/1999 15:02:00 - New match complete-match has started\n"
        "23/04/1999 15:03:00 - Match complete-match has ended"
    )

    assert result.matches == []
    assert result.parse_errors == [
        "Line 3: Match already started before processing event 'MATCH_START'",
        "Line 4: Match ID mismatch: incomplete-match !== complete-match",
    ]


def test_unterminated_match_at_end_of_input_produces_nothing() -> None:
    result = parse_match_logs(
        "23/04/1999 15:00:00 - New match 1 has started\n"
        "23/04/1999 15:01:00 - Roman killed Nick using M16\n"
    )

    assert result.matches == []
    assert result.parse_errors == []


def test_line_numbers_count_blank_lines_and_crlf_is_trimmed() -> None:
    result = parse_match_logs(
        "\r\n"
        "   \r\n"
        "23/04/1999 15:00:00 - New match 1 has started\r\n"
        "garbage\r\n"
        "23/04/1999 15:15:00 - Match 1 has ended\r\n"
    )

    assert [match.id for match in result.matches] == ["1"]
    assert result.parse_errors == ["Line 4: Invalid date format"]


def test_malformed_line_does_not_change_other_results() -> None:
    clean = parse_match_logs(MULTI_MATCH_LOG)
    lines = MULTI_MATCH_LOG.split("\n")
    lines.insert(4, "this line is broken")
    noisy = parse_match_logs("\n".join(lines))

    assert noisy.parse_errors == ["Line 5: Invalid date format"]
    assert noisy.matches == clean.matches


def test_empty_input_returns_empty_result() -> None:
    result = parse_match_logs("")

    assert result.matches == []
    assert result.parse_errors == []


def test_parser_instances_do_not_share_state() -> None:
    first = MatchLogParser().execute("23/04/1999 15:00:00 - New match 1 has started")
    second = MatchLogParser().execute(
        "23/04/1999 15:15:00 - Match 1 has ended\n"
        "bad line"
    )

    assert first.parse_errors == []
    assert second.matches == []
    assert second.parse_errors == [
        "Line 1: Match not started before processing event 'MATCH_END'",
        "Line 2: Invalid date format",
    ]


def test_rejected_lines_and_summary_are_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="domain.log_parser"):
        parse_match_logs("bad line\n23/04/1999 15:00:00 - New match 1 has started")

    messages = [record.getMessage() for record in caplog.records]
    assert "Rejected log line: Line 1: Invalid date format" in messages
    assert "Dropping unterminated match id=1" in messages
    assert "Parsed game log: completed_matches=0 parse_errors=1" in messages
