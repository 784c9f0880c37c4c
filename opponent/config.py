"""
Computer opponent configuration.
Difficulty tiers and search settings.
"""

from enum import Enum


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Take a win or block, else random
    HARD = 3      # Full minimax

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """Parse a tier name such as "easy" or "Hard"."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty {name!r}. Choose one of: {choices}") from None


class OpponentConfig:
    """
    Configuration class for the computer opponent.
    Change these values to tune the AI!
    """

    # ==================== DIFFICULTY ====================
    DEFAULT_DIFFICULTY = Difficulty.MEDIUM

    # ==================== MINIMAX SETTINGS ====================
    # Score of a win found at depth 0. Deeper wins score less
    # (WIN_SCORE - depth) so faster wins and slower losses are preferred.
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== DIAGNOSTICS ====================
    # Print search statistics after each computer move
    VERBOSE = False
