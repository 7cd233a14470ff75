"""cli.py

Console front-end: interactive play and strategy simulation.

Example:
    $ montyhall play --doors 5 --prize R
    $ montyhall simulate --doors 3 --trials 20000 --strategy both --seed 7
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from loguru import logger

from .config import (
    DEFAULT_DOORS,
    MAX_CONSOLE_DOORS,
    MIN_DOORS,
    STRATEGIES,
    GameConfig,
    SimulationConfig,
)
from .game import GameController, game_from_config
from .rendering.text import render_doors
from .simulate import simulate
from .state import Phase

InputFn = Callable[[str], str]


# ──────────────────────────────────────────────────────────────────────────────── #
#                                  Argument parsing                                #
# ──────────────────────────────────────────────────────────────────────────────── #
def parse_door_count(raw: str) -> int | None:
    """Door count from user text, or None if it is not a number in the console range."""
    try:
        doors = int(raw)
    except ValueError:
        return None
    return doors if MIN_DOORS <= doors <= MAX_CONSOLE_DOORS else None


def parse_prize_door(raw: str, n_doors: int) -> int | None:
    """1-based prize door from user text, or None if it does not name a door."""
    try:
        door = int(raw)
    except ValueError:
        return None
    return door if 1 <= door <= n_doors else None


def game_config_from_args(args: argparse.Namespace, ask: InputFn | None = None) -> GameConfig | None:
    """Turns the ``play`` flags into a :class:`GameConfig`, reporting unusable values.

    A missing ``--doors`` or ``--prize`` is asked for through ``ask``; without ``ask``
    the defaults (3 doors, random prize) apply.

    Returns:
        GameConfig | None: None if the player answered a prompt with ``Q``.
    """
    raw_doors = args.doors
    if raw_doors is None and ask is not None:
        raw_doors = ask(f"Enter number of doors ({MIN_DOORS}-{MAX_CONSOLE_DOORS}) or Q to quit: ").strip()
        if raw_doors.upper() == "Q":
            return None

    n_doors = DEFAULT_DOORS
    if raw_doors is not None:
        n_doors = parse_door_count(raw_doors) or DEFAULT_DOORS
        if n_doors != parse_door_count(raw_doors):
            print(f"Invalid input, using default of {DEFAULT_DOORS} doors.")

    raw_prize = args.prize
    if raw_prize is None and ask is not None:
        raw_prize = ask(
            f"Enter door number (1-{n_doors}) for prize, R for random, or Q to quit: "
        ).strip()
        if raw_prize.upper() == "Q":
            return None

    prize = None
    if raw_prize is not None and raw_prize.strip().upper() != "R":
        prize = parse_prize_door(raw_prize, n_doors)
        if prize is None:
            print("Invalid choice, using random placement.")
    return GameConfig(n_doors=n_doors, prize_door=prize, seed=args.seed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="montyhall", description="N-door Monty Hall simulator.")
    parser.add_argument("-v", "--verbose", action="store_true", help="log game events to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    play = sub.add_parser("play", help="play one game interactively")
    play.add_argument("--doors", default=None, help=f"number of doors ({MIN_DOORS}-{MAX_CONSOLE_DOORS})")
    play.add_argument("--prize", default=None, help="prize door number, or R for random")
    play.add_argument("--seed", type=int, default=None)

    sim = sub.add_parser("simulate", help="estimate win rates of final-choice strategies")
    sim.add_argument("--doors", type=int, default=DEFAULT_DOORS)
    sim.add_argument("--trials", type=int, default=10_000)
    sim.add_argument("--strategy", choices=[*STRATEGIES, "both"], default="both")
    sim.add_argument("--seed", type=int, default=None)
    return parser


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


# ──────────────────────────────────────────────────────────────────────────────── #
#                                 Interactive play                                 #
# ──────────────────────────────────────────────────────────────────────────────── #
def draw(game: GameController) -> None:
    print(render_doors(game.door_states(), game.all_probabilities()))
    print(game.status())
    print()


def _initial_pick_turn(game: GameController, ask: InputFn) -> bool:
    """Returns False when the player quits."""
    command = ask(
        f"Enter door number (1-{game.number_of_doors()}) or P for prize location, Q to quit: "
    ).strip().upper()

    if command == "Q":
        return False
    if command == "P":
        print(f"The prize is behind door {game.prize_door()}!")
        return True

    try:
        door = int(command)
    except ValueError:
        door = 0
    if game.make_initial_pick(door):
        print(f"You picked door {door}!")
        game.reveal_empty_doors()
    else:
        print("Invalid command.")
    return True


def _final_choice_turn(game: GameController, ask: InputFn) -> bool:
    """Returns False when the game is over or the player quits."""
    print("Final Choice:")
    print(f"S: Switch to door {game.remaining_door()}")
    print(f"K: Keep door {game.user_pick()}")
    print("P: Show prize location (cheat!)")
    print("Q: Quit")
    command = ask("Enter command: ").strip().upper()

    if command in ("S", "K"):
        won = game.make_final_choice(switch_door=command == "S")
        kept = "switched to" if command == "S" else "kept"
        print(f"You {kept} door {game.final_door()}!")
        draw(game)
        print("Congratulations! You won!" if won else "Sorry, you lost.")
        print(f"The prize was behind door {game.prize_door()}.")
        return False
    if command == "P":
        print(f"The prize is behind door {game.prize_door()}!")
        return True
    if command == "Q":
        return False
    print("Invalid command.")
    return True


def play(game: GameController, ask: InputFn = input) -> bool:
    """Runs the interactive loop until the game ends or the player quits.

    Returns:
        bool: whether the player won.
    """
    running = True
    while running:
        draw(game)
        if game.current_phase() is Phase.INITIAL_PICK:
            running = _initial_pick_turn(game, ask)
        else:
            running = _final_choice_turn(game, ask)
    return game.has_user_won()


# ──────────────────────────────────────────────────────────────────────────────── #
#                                   Entry point                                    #
# ──────────────────────────────────────────────────────────────────────────────── #
def main(argv: Sequence[str] | None = None, ask: InputFn = input) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.command == "play":
        try:
            config = game_config_from_args(args, ask)
            if config is None:
                print("Goodbye!")
                return 0
            play(game_from_config(config), ask)
        except (EOFError, KeyboardInterrupt):
            print()
        print("Thank you for playing!")
        return 0

    if args.doors < MIN_DOORS:
        print(f"Number of doors must be at least {MIN_DOORS}.", file=sys.stderr)
        return 2
    if args.trials < 1:
        print("At least one trial is required.", file=sys.stderr)
        return 2

    strategies = ("stay", "switch") if args.strategy == "both" else (args.strategy,)
    for strategy in strategies:
        result = simulate(
            SimulationConfig(n_doors=args.doors, strategy=strategy, trials=args.trials, seed=args.seed)
        )
        print(
            f"{strategy:<6} won {result.wins} / {result.trials} "
            f"for {100 * result.win_rate:.1f}% (expected {100 * result.expected_win_rate:.1f}%)"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
