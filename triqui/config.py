"""
Engine configuration for Triqui.
All the tunable values for scoring and debug output.
"""

from .board import Mark


class EngineConfig:
    """
    Configuration class for the engine and game session.
    Override on an instance, e.g. `config.DEBUG_MODE = True`.
    """

    # ==================== SCORING ====================
    # Terminal score for a win, adjusted by search depth:
    # WIN_SCORE - depth for an engine win, depth - WIN_SCORE for a loss
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== GAME RULES ====================
    # Whoever holds this mark always moves first
    FIRST_MARK = Mark.X

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
