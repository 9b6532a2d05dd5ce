"""
Engine configuration.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from checkers_engine.board.state import Side


class ScoringMode(Enum):
    """
    Position scoring heuristic.

        - MATERIAL: men and weighted kings only
        - MATERIAL_AND_POTENTIAL: adds a bonus for men close to promotion
    """
    MATERIAL = "Number"
    MATERIAL_AND_POTENTIAL = "NumberAndPotential"


class SeedPolicy(Enum):
    """
    How the move-order shuffle is seeded.

        - FIXED: seed 0, reproducible play
        - TIME: wall-clock seed, varied play across runs
    """
    FIXED = "fixed"
    TIME = "time"


def _coerce_enum(enum_cls, value, field_name: str):
    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if value == member.value or (isinstance(value, str) and value.upper() == member.name):
            return member
    choices = ", ".join(repr(m.value) for m in enum_cls)
    raise ValueError(f"{field_name} should be one of {choices}, got {value!r}")


@dataclass
class EngineConfig:
    """Configuration for the search engine.

    All values are validated at construction so that a bad setting fails
    before any search starts, never in the middle of one.
    """

    white_depth: int = 3
    """Search depth (plies after the root turn) when White is to move"""

    black_depth: int = 3
    """Search depth (plies after the root turn) when Black is to move"""

    scoring_mode: ScoringMode = ScoringMode.MATERIAL
    """Heuristic used to score leaf positions"""

    pruning: bool = True
    """Enable alpha-beta cutoffs (False searches the full minimax tree)"""

    seed_policy: SeedPolicy = SeedPolicy.TIME
    """Seed for the move-order shuffle"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        for name in ("white_depth", "black_depth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if not isinstance(self.pruning, bool):
            raise ValueError(f"pruning must be a boolean, got {self.pruning!r}")

        self.scoring_mode = _coerce_enum(ScoringMode, self.scoring_mode, "scoring_mode")
        self.seed_policy = _coerce_enum(SeedPolicy, self.seed_policy, "seed_policy")

    def depth_for(self, side: Side) -> int:
        """Configured search depth for ``side``."""
        return self.white_depth if side is Side.WHITE else self.black_depth

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "EngineConfig":
        """
        Build a config from an already-parsed settings mapping.

        Expected layout::

            {"Bot": {"WhiteBotLevel": 3, "BlackBotLevel": 3,
                     "BotScoringType": "NumberAndPotential",
                     "Optimization": "O1", "NoRandom": false}}

        ``Optimization == "O0"`` disables pruning; a truthy ``NoRandom``
        selects the fixed seed.

        Raises:
            ValueError: If the section or a key is missing, or a value is invalid
        """
        try:
            bot = settings["Bot"]
            return cls(
                white_depth=bot["WhiteBotLevel"],
                black_depth=bot["BlackBotLevel"],
                scoring_mode=bot["BotScoringType"],
                pruning=bot["Optimization"] != "O0",
                seed_policy=SeedPolicy.FIXED if bot["NoRandom"] else SeedPolicy.TIME,
            )
        except KeyError as e:
            raise ValueError(f"Missing setting: {e.args[0]}") from e

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"EngineConfig(\n"
            f"  Depth: white={self.white_depth}, black={self.black_depth}\n"
            f"  Scoring: {self.scoring_mode.value}\n"
            f"  Pruning: {'on' if self.pruning else 'off'}\n"
            f"  Seed: {self.seed_policy.value}\n"
            f")"
        )
