"""Validation of raw console input."""

from typing import Optional, Tuple

from src.shootout.config import (
    INVALID_INPUT_MESSAGE,
    INVALID_PLAY_AGAIN_MESSAGE,
    MAX_RACK_CHOICE,
    MAX_SHOOTING_CAPABILITY,
    MIN_PLAYERS,
    MIN_RACK_CHOICE,
    MIN_SHOOTING_CAPABILITY,
    PLAY_AGAIN_NO,
    PLAY_AGAIN_YES,
    TOO_FEW_PLAYERS_MESSAGE,
)


class ValidationError(ValueError):
    """Raised when a value falls outside its legal range."""

    pass


CheckResult = Tuple[Optional[int], Optional[str]]


def parse_int(raw) -> Optional[int]:
    """Parse an integer typed at the console, or None if it is not one.

    Values that are already ints pass through; bools are rejected.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    try:
        return int(raw.strip())
    except (ValueError, AttributeError):
        return None


def _check_range(raw: str, low: int, high: Optional[int], message: str) -> CheckResult:
    value = parse_int(raw)
    if value is None:
        return None, message
    if value < low or (high is not None and value > high):
        return None, message
    return value, None


def check_player_count(raw: str) -> CheckResult:
    """
    Validate the number of players.

    Returns:
        (value, error_message) - (value, None) if valid
    """
    value = parse_int(raw)
    if value is None:
        return None, INVALID_INPUT_MESSAGE
    if value < MIN_PLAYERS:
        return None, TOO_FEW_PLAYERS_MESSAGE
    return value, None


def check_rack_choice(raw: str) -> CheckResult:
    """Validate a money-ball rack position (1-5)."""
    return _check_range(raw, MIN_RACK_CHOICE, MAX_RACK_CHOICE, INVALID_INPUT_MESSAGE)


def check_shooting_capability(raw: str) -> CheckResult:
    """Validate a shooting capability percentage (1-99)."""
    return _check_range(
        raw, MIN_SHOOTING_CAPABILITY, MAX_SHOOTING_CAPABILITY, INVALID_INPUT_MESSAGE
    )


def check_play_again(raw: str) -> CheckResult:
    """Validate the play-again answer; 1 means yes, 0 means no."""
    value = parse_int(raw)
    if value not in (PLAY_AGAIN_YES, PLAY_AGAIN_NO):
        return None, INVALID_PLAY_AGAIN_MESSAGE
    return value, None


def require_valid(check, raw, name: Optional[str] = None) -> int:
    """Run a check_* function and raise ValidationError if it rejects ``raw``.

    Used to validate values set from code rather than typed at the console.
    """
    value, error = check(raw)
    if error is not None:
        prefix = f"{name}: " if name else ""
        raise ValidationError(f"{prefix}{error} (got {raw!r})")
    return value
