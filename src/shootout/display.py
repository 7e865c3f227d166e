"""Text formatting for rack, round and match results."""

from typing import List

from src.shootout.models import MatchResult, RackResult, RoundResult


def format_rack(rack: RackResult) -> List[str]:
    """Rack line, followed by the starry line for starry racks."""
    symbols = " ".join(shot.outcome.symbol for shot in rack.shots)
    lines = [f"Rack: {symbols} | {rack.rack_points} pts"]
    if rack.starry_shot is not None:
        lines.append(
            f"Starry: {rack.starry_shot.outcome.symbol} | {rack.starry_points} pts"
        )
    return lines


def format_round(round_result: RoundResult) -> List[str]:
    lines = []
    for rack in round_result.racks:
        lines.extend(format_rack(rack))
    lines.append(
        f"Total score for Player {round_result.player_number}: "
        f"{round_result.total_score} pts"
    )
    return lines


def format_turn_banner(player_number: int) -> str:
    return f"Player {player_number}, it's your turn!"


def format_highest_score(match_result: MatchResult) -> str:
    # Only the score is announced; ties are not told apart.
    return f"Highest score is: {match_result.highest_score}"
