"""
numguess CLI - Command-line interface for the game.

Usage:
    numguess play [--tier NAME] [--seed N]    Play in the terminal
    numguess tiers                             List difficulty tiers
    numguess scores [--reset]                  Show best scores
    numguess serve [--host H] [--port P]       Run the HTTP API

During play, type a number to guess, or:
    :new          start over on the same tier
    :tier NAME    start over on another tier
    :quit         leave
"""

import argparse
import logging
import os
import random
import sys

DEFAULT_SCORES_PATH = os.getenv("NUMGUESS_SCORES_PATH", None)
DEFAULT_LOG_LEVEL = os.getenv("NUMGUESS_LOG_LEVEL", "WARNING").upper()
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="numguess - hotter/colder number guessing",
        prog="numguess",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL if DEFAULT_LOG_LEVEL in LOG_LEVELS else "WARNING",
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--tier", default="medium", help="Difficulty tier")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    play_parser.add_argument("--scores", default=DEFAULT_SCORES_PATH, help="Best-score file")

    # Tiers command
    subparsers.add_parser("tiers", help="List difficulty tiers")

    # Scores command
    scores_parser = subparsers.add_parser("scores", help="Show best scores")
    scores_parser.add_argument("--scores", default=DEFAULT_SCORES_PATH, help="Best-score file")
    scores_parser.add_argument("--reset", action="store_true", help="Forget all best scores")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "tiers":
        return cmd_tiers(args)
    elif args.command == "scores":
        return cmd_scores(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args, read=input):
    """Interactive terminal game."""
    from .engine_core import GuessEngine, OutcomeKind
    from .errors import UnknownTierError
    from .feedback import describe, status_line
    from .session import GameManager
    from .storage import JsonScoreStore

    engine = GuessEngine(
        store=JsonScoreStore(args.scores),
        rng=random.Random(args.seed),
    )
    manager = GameManager(engine=engine)

    try:
        game = manager.start(args.tier)
    except UnknownTierError as e:
        print(f"Error: {e}")
        sys.exit(1)

    _print_intro(game.session)

    while True:
        try:
            line = read("> ").strip()
        except EOFError:
            print()
            break

        if line in (":quit", ":q"):
            break

        if line == ":tier":
            print("Usage: :tier NAME (one of: " + ", ".join(manager.tiers) + ")")
            continue

        if line == ":new" or line.startswith(":tier "):
            tier_name = line.split(maxsplit=1)[1] if line != ":new" else None
            try:
                game = manager.restart(game.game_id, tier_name=tier_name)
            except UnknownTierError as e:
                print(f"Error: {e}")
                continue
            _print_intro(game.session)
            continue

        if line.startswith(":"):
            print(f"Unknown command: {line} (try :new, :tier NAME or :quit)")
            continue

        outcome = manager.guess(game.game_id, line)
        print(describe(outcome))
        if outcome.kind == OutcomeKind.INCORRECT:
            print(status_line(outcome.session))
        elif outcome.is_terminal:
            print(status_line(outcome.session))
            print("Type :new to play again or :quit to leave.")

    return 0


def _print_intro(session):
    print(
        f"New {session.tier.name} game: guess a number between "
        f"{session.min_value} and {session.max_value}. "
        f"You have {session.attempt_limit} attempts."
    )
    if session.best_score is not None:
        print(f"Best score on {session.tier.name}: {session.best_score}")


def cmd_tiers(args):
    """List difficulty tiers."""
    from .engine_core import TIERS, DEFAULT_TIER

    for tier in TIERS.values():
        marker = " (default)" if tier.name == DEFAULT_TIER else ""
        print(
            f"{tier.name:<8} {tier.min_value}-{tier.max_value}, "
            f"{tier.attempt_limit} attempts{marker}"
        )
    return 0


def cmd_scores(args):
    """Show or reset best scores."""
    from .engine_core import TIERS
    from .storage import JsonScoreStore

    store = JsonScoreStore(args.scores)
    if args.reset:
        store.clear()
        print("Best scores cleared.")
        return 0

    scores = {name: None for name in TIERS}
    scores.update(store.all())
    for name, best in scores.items():
        print(f"{name:<8} {best if best is not None else '-'}")
    return 0


def cmd_serve(args):
    """Run the HTTP API with uvicorn."""
    import uvicorn

    print(f"Serving numguess on http://{args.host}:{args.port}/api/docs")
    uvicorn.run("numguess.api.app:app", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
