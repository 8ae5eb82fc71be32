"""
Main entry point for playing word scramble in a terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --seed 42 --verbose

Type a word and press enter to submit it. ":new" starts a new round with a
fresh root word and ":quit" (or end of input) stops the game.
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

import yaml

from .game import GameConfig, GameSession, GameError, format_verdict
from .verifiers import ACCEPTED


NEW_ROUND_COMMAND = ":new"
QUIT_COMMAND = ":quit"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def print_round(session: GameSession, verbose: bool = False, out: Optional[TextIO] = None) -> None:
    """Announce the root word for a new round."""
    out = out or sys.stdout
    print(f"\n=== {session.root_word.capitalize()} ===", file=out)
    if verbose:
        print(f"Letters: {' '.join(sorted(session.root_word))}", file=out)


def play(
    session: GameSession,
    read_line: Callable[[], Optional[str]],
    verbose: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """
    Run rounds until the player quits or input runs out.

    Args:
        session: Session to play (a round is started if none is active)
        read_line: Returns the next submission, or None at end of input
        verbose: If True, print letters and used words as well
        out: Stream to print to
    """
    out = out or sys.stdout

    if not session.in_round:
        session.start_round()
    print_round(session, verbose, out)

    while True:
        line = read_line()
        if line is None or line.strip() == QUIT_COMMAND:
            break

        if line.strip() == NEW_ROUND_COMMAND:
            session.start_round()
            print_round(session, verbose, out)
            continue

        verdict = session.submit(line)

        if verdict == ACCEPTED:
            print(f"+{len(session.used_words[0])}  Score: {session.score}", file=out)
            if verbose:
                print(f"Words: {', '.join(session.used_words)}", file=out)
            continue

        # Empty submissions have no message and are ignored
        message = format_verdict(verdict, session.root_word)
        if message:
            title, body = message
            print(f"{title}: {body}", file=out)


def _read_stdin() -> Optional[str]:
    try:
        return input("> ")
    except EOFError:
        return None


def main():
    parser = argparse.ArgumentParser(
        description="Play word scramble: make words from the letters of a root word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  language: en
  seed: 42
  min_root_length: 3
  fallback_root_word: silkworm
  word_list: words.txt
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used if omitted)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for root word selection (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print letters and used words after each submission"
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config) if args.config else GameConfig()
        if args.seed is not None:
            config = config.model_copy(update={"seed": args.seed})
        session = GameSession.create(config=config)
        session.start_round()
    except Exception as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Config: {args.config or '(defaults)'}")
        print(f"Language: {config.language}")
        print(f"Root words available: {session.root_words.words_available}")

    try:
        play(session, _read_stdin, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
    except GameError as e:
        print(f"Error during game: {e}", file=sys.stderr)
        return 1

    state = session.get_state()

    # Print summary
    print()
    print("=== Game Summary ===")
    print(f"Root word: {state.root_word}")
    print(f"Words found: {len(state.used_words)}")
    print(f"Score: {state.score}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
