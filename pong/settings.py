"""Match settings, their menu labels and their JSON persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

MAX_ROUNDS = 9
MAX_BALL_COUNT = 10
MAX_STATIC_OBSTACLES = 5
MAX_MOVING_OBSTACLES = 5

APP_DATA_PATH = "game_data.json"

_SECTION = "GameSettings"


class Difficulty(Enum):
    """Skill level of a computer-controlled player."""

    EASY = 0
    NORMAL = 1
    HARD = 2


_LABELS = {
    Difficulty.EASY: "Computer (Easy)",
    Difficulty.NORMAL: "Computer (Normal)",
    Difficulty.HARD: "Computer (Hard)",
}


def _as_bool(section: dict[str, Any], key: str) -> bool:
    value = section[key]
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be a boolean, got {value!r}")
    return value


def _as_int(section: dict[str, Any], key: str) -> int:
    value = section[key]
    if not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number, got {value!r}")
    return int(value)


@dataclass
class PongSettings:
    """How a match is set up."""

    left_computer: bool = False
    right_computer: bool = False
    left_difficulty: Difficulty = Difficulty.NORMAL
    right_difficulty: Difficulty = Difficulty.NORMAL
    rounds: int = 3
    ball_count: int = 1
    static_obstacles: int = 0
    moving_obstacles: int = 0

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """The settings in their stored JSON layout."""
        return {
            _SECTION: {
                "LeftPlayerComputer": self.left_computer,
                "RightPlayerComputer": self.right_computer,
                "LeftPlayerDifficulty": self.left_difficulty.value,
                "RightPlayerDifficulty": self.right_difficulty.value,
                "Rounds": self.rounds,
                "BallCount": self.ball_count,
                "StaticObstacles": self.static_obstacles,
                "MovingObstacles": self.moving_obstacles,
            }
        }

    @classmethod
    def from_dict(cls, data: Any) -> PongSettings:
        """Read settings from their stored JSON layout; raise ValueError if malformed."""
        try:
            section = data[_SECTION]
            return cls(
                left_computer=_as_bool(section, "LeftPlayerComputer"),
                right_computer=_as_bool(section, "RightPlayerComputer"),
                left_difficulty=Difficulty(_as_int(section, "LeftPlayerDifficulty")),
                right_difficulty=Difficulty(_as_int(section, "RightPlayerDifficulty")),
                rounds=_as_int(section, "Rounds"),
                ball_count=_as_int(section, "BallCount"),
                static_obstacles=_as_int(section, "StaticObstacles"),
                moving_obstacles=_as_int(section, "MovingObstacles"),
            )
        except (KeyError, TypeError, IndexError) as exc:
            raise ValueError(f"malformed settings: {exc!r}") from exc


def player_type_label(is_computer: bool, difficulty: Difficulty) -> str:
    """Menu label for a player slot."""
    if not is_computer:
        return "Human"
    return _LABELS.get(difficulty, "Unknown")


def cycle_player_type(is_computer: bool, difficulty: Difficulty) -> tuple[bool, Difficulty]:
    """Next player type: Human, then Easy, Normal, Hard computer, then Human again."""
    if not is_computer:
        return True, Difficulty.EASY
    if difficulty is Difficulty.EASY:
        return True, Difficulty.NORMAL
    if difficulty is Difficulty.NORMAL:
        return True, Difficulty.HARD
    return False, difficulty


def load_settings(path: str | Path = APP_DATA_PATH) -> PongSettings:
    """Load stored settings; defaults when the file is absent or its values are malformed."""
    try:
        with open(path, encoding="utf-8") as file:
            data = json.load(file)
    except OSError:
        return PongSettings()
    try:
        return PongSettings.from_dict(data)
    except ValueError:
        return PongSettings()


def save_settings(settings: PongSettings, path: str | Path = APP_DATA_PATH) -> bool:
    """Store settings as indented JSON; return whether the file could be written."""
    try:
        with open(path, "w", encoding="utf-8") as file:
            file.write(json.dumps(settings.to_dict(), indent=4))
    except OSError:
        return False
    return True