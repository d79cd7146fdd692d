"""
Action System - Actions and their results.

Two things can happen to a run: it is set up, or the player picks a card
from the hand. Both go through the reducer as actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .state import GameState


class ActionType(Enum):
    """Types of actions in the system."""
    SETUP_GAME = "setup_game"
    SELECT_CARD = "select_card"


class ErrorCode(str, Enum):
    """Codes carried by unsuccessful or ignored results."""
    INVALID_ACTION = "INVALID_ACTION"
    GAME_OVER = "GAME_OVER"
    NO_HANDLER = "NO_HANDLER"
    SLOT_EMPTY = "SLOT_EMPTY"


@dataclass(frozen=True)
class Action:
    """
    A complete action to be applied to the game state.

    slot_index is the zero-based hand position for SELECT_CARD.
    """
    action_type: ActionType
    slot_index: int | None = None

    @classmethod
    def setup_game(cls) -> Action:
        """Factory for the setup action."""
        return cls(action_type=ActionType.SETUP_GAME)

    @classmethod
    def select_card(cls, slot_index: int) -> Action:
        """Factory for a hand selection."""
        return cls(action_type=ActionType.SELECT_CARD, slot_index=slot_index)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    An ignored result is successful but leaves the state unchanged, e.g. a
    click on an empty hand slot.
    """
    success: bool
    new_state: GameState | None = None
    error: str | None = None
    error_code: ErrorCode | None = None
    ignored: bool = False

    # Human-readable changes, for logs and front ends
    state_changes: list[str] = field(default_factory=list)

    # Set by the draw that follows a selection
    recycled: bool = False

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def ignore(cls, state: GameState, reason: str, error_code: ErrorCode) -> ActionResult:
        """Create a no-op result that keeps the current state."""
        return cls(success=True, new_state=state, error=reason, error_code=error_code, ignored=True)

    @classmethod
    def success_with_state(
        cls,
        state: GameState,
        changes: list[str] | None = None,
        recycled: bool = False,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            recycled=recycled,
        )
