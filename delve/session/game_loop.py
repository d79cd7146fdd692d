"""
Game Loop - Drives one dungeon run.

The loop:
1. Set up: build the deck and deal the opening hand
2. Wait for the player to pick a hand slot
3. Resolve it through the reducer (progress, piles, draw, enhancement)
4. Hand a snapshot to the front end
5. Repeat until the run is won or lost

The loop holds the only reference to the current GameState. Each call runs
to completion before the next is accepted.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field

from ..config import GameSettings, get_settings
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer
from ..engine_core.state import GamePhase, GameState
from .schemas import GameSnapshot, snapshot_from_state

logger = logging.getLogger(__name__)


@dataclass
class TurnResult:
    """
    Result of processing one event.

    ignored is True for selections that did nothing (empty slot).
    """
    success: bool
    phase: GamePhase
    snapshot: GameSnapshot | None = None
    ignored: bool = False
    recycled: bool = False
    changes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def is_over(self) -> bool:
        return self.phase in (GamePhase.WON, GamePhase.LOST)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(seed=42)
        result = loop.start()

        while not result.is_over:
            show(result.snapshot)
            result = loop.select(read_slot())
    """

    def __init__(self, settings: GameSettings | None = None, seed: int | None = None):
        self.settings = settings or get_settings()
        self.seed = seed
        self._rng = random.Random(seed)
        self.reducer = Reducer(settings=self.settings, random_source=self._rng.random)
        self.state = GameState.initial(
            party_force=self.settings.initial_party_force,
            necessary_progression=self.settings.initial_necessary_progression,
        )

    def start(self) -> TurnResult:
        """Build the deck and draw the opening hand."""
        logger.info("Starting run (seed=%s)", self.seed)
        return self._dispatch(Action.setup_game())

    def select(self, slot_index: int) -> TurnResult:
        """Resolve the card in a zero-based hand slot."""
        return self._dispatch(Action.select_card(slot_index))

    def snapshot(self) -> GameSnapshot:
        """Display snapshot of the current state."""
        return snapshot_from_state(self.state, self.settings.max_hand_count)

    def _dispatch(self, action: Action) -> TurnResult:
        result: ActionResult = self.reducer.apply(self.state, action)

        if not result.success:
            logger.warning("Action %s rejected: %s", action.action_type.value, result.error)
            return TurnResult(
                success=False,
                phase=self.state.phase,
                snapshot=self.snapshot(),
                errors=[result.error] if result.error else [],
            )

        self.state = result.new_state
        return TurnResult(
            success=True,
            phase=self.state.phase,
            snapshot=self.snapshot(),
            ignored=result.ignored,
            recycled=result.recycled,
            changes=list(result.state_changes),
        )
