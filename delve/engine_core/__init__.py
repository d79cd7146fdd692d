"""
Engine Core - The rules of a dungeon run.

The engine is the runtime that:
1. Builds a shuffled deck
2. Draws hands, recycling the discard pile when the deck runs out
3. Resolves selected cards against the party's resources
4. Enhances enemies that share a hand
5. Applies all of this to GameState through the reducer
"""

from .card import Card, ContentKind, TerrainKind, create_card
from .shuffle import RandomSource, shuffle
from .deck import create_deck
from .draw import DrawResult, draw_cards
from .resolution import ProgressResult, enemy_damage, progress
from .enhancement import enhance_enemies_on_hand
from .state import GamePhase, GameState, Pile
from .action import Action, ActionResult, ActionType, ErrorCode
from .reducer import Reducer, apply_action

__all__ = [
    "Card",
    "ContentKind",
    "TerrainKind",
    "create_card",
    "RandomSource",
    "shuffle",
    "create_deck",
    "DrawResult",
    "draw_cards",
    "ProgressResult",
    "enemy_damage",
    "progress",
    "enhance_enemies_on_hand",
    "GamePhase",
    "GameState",
    "Pile",
    "Action",
    "ActionResult",
    "ActionType",
    "ErrorCode",
    "Reducer",
    "apply_action",
]
