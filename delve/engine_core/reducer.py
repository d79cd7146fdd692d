"""
Reducer - Applies actions to game state.

The reducer is the single point of state transition.
All state changes must go through apply_action().

Design principles:
- (state, action) -> new state, nothing kept between calls
- Validates the phase before applying
- Returns ActionResult with success/failure
- Card construction errors are bugs, not rule violations, and propagate
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field

from ..config import EnhancementPolicy, GameSettings
from .action import Action, ActionResult, ActionType, ErrorCode
from .deck import create_deck
from .draw import draw_cards
from .enhancement import enhance_enemies_on_hand
from .resolution import progress
from .shuffle import RandomSource
from .state import GamePhase, GameState

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    Settings provide deck composition and hand size; random_source drives
    every shuffle.
    """
    settings: GameSettings
    random_source: RandomSource = field(default=random.random)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with new state or error.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            return validation_error

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=ErrorCode.NO_HANDLER,
            )

        return handler(state, action)

    def _validate_action(self, state: GameState, action: Action) -> ActionResult | None:
        """Return a failed result if the action is not allowed in this phase."""
        if state.is_over:
            return ActionResult.failure(
                f"Game is over ({state.phase.value}) - no actions allowed",
                error_code=ErrorCode.GAME_OVER,
            )

        if state.phase == GamePhase.SETUP and action.action_type != ActionType.SETUP_GAME:
            return ActionResult.failure(
                "Game not started - only setup actions allowed",
                error_code=ErrorCode.INVALID_ACTION,
            )

        if state.phase == GamePhase.PLAYING and action.action_type == ActionType.SETUP_GAME:
            return ActionResult.failure(
                "Game already set up",
                error_code=ErrorCode.INVALID_ACTION,
            )

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.SETUP_GAME: self._handle_setup,
            ActionType.SELECT_CARD: self._handle_select,
        }
        return handlers.get(action_type)

    def _handle_setup(self, state: GameState, action: Action) -> ActionResult:
        """Build the deck and deal the opening hand."""
        s = self.settings
        deck = create_deck(
            enemy_count=s.enemy_card_count,
            sanctum_count=s.sanctum_card_count,
            trap_count=s.trap_card_count,
            treasure_count=s.treasure_card_count,
            random_source=self.random_source,
        )
        drawn = draw_cards(deck, s.max_hand_count, state.discard_pile, self.random_source)

        new_state = state._copy_with(
            deck=drawn.new_deck,
            hand=drawn.new_hand,
            discard_pile=drawn.new_discard_pile,
            phase=GamePhase.PLAYING,
        )
        new_state = new_state._copy_with(phase=self._evaluate_phase(new_state))

        return ActionResult.success_with_state(
            new_state,
            changes=[
                f"Built a deck of {len(deck)} cards",
                f"Drew {len(drawn.new_hand)} card(s)",
            ],
        )

    def _handle_select(self, state: GameState, action: Action) -> ActionResult:
        """
        Resolve the card in the selected slot and refill the hand.

        Steps: progress, move the selected card to the resolved pile and the
        rest of the hand to the discard pile, draw a new hand, then enhance
        enemies if the run is in danger mode.
        """
        slot_index = action.slot_index
        selected = state.card_in_slot(slot_index) if slot_index is not None else None
        if selected is None:
            logger.info(
                "Ignoring selection of empty slot %s (hand has %d card(s))",
                slot_index, len(state.hand),
                extra={"slot_index": slot_index, "turn_number": state.turn_number},
            )
            return ActionResult.ignore(
                state, f"No card in slot {slot_index}", ErrorCode.SLOT_EMPTY,
            )

        resolved = progress(
            state.party_force,
            selected,
            state.necessary_progression,
            max_party_force=self.settings.max_party_force,
        )
        changes = [
            f"Resolved {selected.describe()}: party force "
            f"{state.party_force} -> {resolved.new_party_force}, "
            f"progression {state.necessary_progression} -> {resolved.new_necessary_progression}",
        ]

        resolved_pile = state.resolved_card_pile + (selected,)
        discard_pile = state.discard_pile + tuple(
            card for card in state.hand if card.id != selected.id
        )

        drawn = draw_cards(
            state.deck, self.settings.max_hand_count, discard_pile, self.random_source,
        )

        danger_mode = state.danger_mode
        if drawn.is_shuffled:
            changes.append("Discard pile shuffled into the deck")
            if not danger_mode:
                danger_mode = True
                logger.info(
                    "Danger mode activated on turn %d", state.turn_number + 1,
                    extra={"turn_number": state.turn_number + 1},
                )
                changes.append("Danger mode activated")

        hand = drawn.new_hand
        if danger_mode or self.settings.enhancement_policy == EnhancementPolicy.ALWAYS:
            hand = enhance_enemies_on_hand(hand)

        new_state = state._copy_with(
            deck=drawn.new_deck,
            hand=hand,
            discard_pile=drawn.new_discard_pile,
            resolved_card_pile=resolved_pile,
            party_force=resolved.new_party_force,
            necessary_progression=resolved.new_necessary_progression,
            danger_mode=danger_mode,
            turn_number=state.turn_number + 1,
        )
        phase = self._evaluate_phase(new_state)
        if phase != new_state.phase:
            new_state = new_state._copy_with(phase=phase)
            logger.info(
                "Run ended: %s after %d turn(s)", phase.value, new_state.turn_number,
                extra={"turn_number": new_state.turn_number},
            )
            changes.append(f"Game over: {phase.value}")

        return ActionResult.success_with_state(new_state, changes=changes, recycled=drawn.is_shuffled)

    @staticmethod
    def _evaluate_phase(state: GameState) -> GamePhase:
        """
        Decide whether the run continues.

        A fallen party loses even on the turn it reaches the sanctum.
        An empty hand means the dungeon ran out of cards.
        """
        if state.party_force <= 0:
            return GamePhase.LOST
        if state.necessary_progression <= 0:
            return GamePhase.WON
        if not state.hand:
            return GamePhase.LOST
        return GamePhase.PLAYING


def apply_action(
    settings: GameSettings,
    state: GameState,
    action: Action,
    random_source: RandomSource = random.random,
) -> ActionResult:
    """Convenience function to apply an action."""
    reducer = Reducer(settings=settings, random_source=random_source)
    return reducer.apply(state, action)
