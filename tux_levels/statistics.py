from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:  # pragma: no cover - assist typing only
    from tux_levels.level import Level


class Statistics:
    """Per-level totals and the player's progress against them.

    ``init`` derives the totals from a fully loaded level; the collected
    counters start at zero and are updated by whoever plays the level.
    """

    def __init__(self) -> None:
        self.total_coins = 0
        self.total_badguys = 0
        self.total_secrets = 0
        self.target_time = 0.0

        self.coins = 0
        self.badguys = 0
        self.secrets = 0
        self.time = 0.0

        self.valid = False

    def init(self, level: "Level") -> None:
        """Recomputes the totals from ``level`` and resets progress."""
        self.total_coins = level.get_total_coins()
        self.total_badguys = level.get_total_badguys()
        self.total_secrets = level.get_total_secrets()
        self.target_time = level.target_time

        self.coins = 0
        self.badguys = 0
        self.secrets = 0
        self.time = 0.0

        self.valid = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "coins": (self.coins, self.total_coins),
            "badguys": (self.badguys, self.total_badguys),
            "secrets": (self.secrets, self.total_secrets),
            "time": (self.time, self.target_time),
        }


__all__ = ["Statistics"]
