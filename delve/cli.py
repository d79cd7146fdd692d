"""
Delve CLI - Play a run in the terminal.

Usage:
    delve play [--seed N]      Play a run, picking cards by slot number
    delve deck [--seed N]      Print a freshly built starting deck
"""

import argparse
import random
import sys

from pydantic import ValidationError


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Delve - Dungeon Card Crawl",
        prog="delve",
    )
    parser.add_argument("--log-level", help="Override DELVE_LOG_LEVEL")
    parser.add_argument("--log-format", choices=["text", "json"], help="Override DELVE_LOG_FORMAT")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    play_parser = subparsers.add_parser("play", help="Play a run")
    play_parser.add_argument("--seed", type=int, help="Random seed for a reproducible run")

    deck_parser = subparsers.add_parser("deck", help="Print a starting deck")
    deck_parser.add_argument("--seed", type=int, help="Random seed")

    args = parser.parse_args(argv)

    from .config import get_settings
    from .logging_setup import setup_logging

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}")
        sys.exit(2)

    setup_logging(
        args.log_level or settings.log_level,
        args.log_format or settings.log_format.value,
    )

    if args.command == "play":
        cmd_play(args, settings)
    elif args.command == "deck":
        cmd_deck(args, settings)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deck(args, settings):
    """Print a starting deck, front card first."""
    from .engine_core import create_deck

    rng = random.Random(args.seed)
    deck = create_deck(
        enemy_count=settings.enemy_card_count,
        sanctum_count=settings.sanctum_card_count,
        trap_count=settings.trap_card_count,
        treasure_count=settings.treasure_card_count,
        random_source=rng.random,
    )
    for card in deck:
        print(f"#{card.id:>3}  {card.describe()}")
    print(f"\n{len(deck)} cards")


def cmd_play(args, settings):
    """Interactive run."""
    from .session import GameLoop

    loop = GameLoop(settings=settings, seed=args.seed)
    result = loop.start()
    render(result.snapshot)

    while not result.is_over:
        try:
            choice = input(f"Pick a card [1-{settings.max_hand_count}] or q to quit: ").strip()
        except EOFError:
            print()
            return
        if choice.lower() in ("q", "quit"):
            return
        if not choice.isdigit():
            continue

        result = loop.select(int(choice) - 1)
        if result.ignored:
            continue
        for change in result.changes:
            print(f"  - {change}")
        render(result.snapshot)

    if result.phase.value == "won":
        print("\nThe party reached the sanctum!")
    else:
        print("\nThe party has fallen.")


def render(snapshot):
    """Print a snapshot."""
    print()
    print(
        f"Deck: {snapshot.deck_count}  Discard: {snapshot.discard_pile_count}  "
        f"Resolved: {snapshot.resolved_card_pile_count}"
    )
    print(
        f"Party force: {snapshot.displayed_party_force}  "
        f"Progression left: {snapshot.necessary_progression}"
        + ("  [DANGER]" if snapshot.danger_mode else "")
    )
    for i, card in enumerate(snapshot.slots(), start=1):
        face = " / ".join(card.lines()) if card else "(empty)"
        print(f"  [{i}] {face}")


if __name__ == "__main__":
    main()
