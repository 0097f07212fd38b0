"""
cli.py

Точка входа: одна жадная партия или полный перебор стандартной доски.

Использование:
    python main.py                         # жадная партия
    python main.py --history               # ... с позициями после каждого хода
    python main.py --search                # гистограмма по всем партиям
    python main.py --search --parallel -w 4
"""

import argparse
import sys
from typing import Dict, List, Optional

from .core.layout import STANDARD_EMPTY_START
from .core.standard import StandardBoard
from .solvers import GreedySolver, ParallelPermutationSolver, PermutationSolver
from .utils.error_handling import handle_errors
from .utils.logging import configure_logging
from .utils.monitoring import get_monitor, monitor_time


# Оценка финала: 1 колышек - лучший исход
COMMENTARY = {
    1: "You're genius!",
    2: "You're purty smart.",
    3: "You're just plain dumb.",
}
DEFAULT_COMMENT = "You're just plain 'eg-no-ra-moose."


def comment_for_score(score: int) -> str:
    """Комментарий к финальному счёту."""
    return COMMENTARY.get(score, DEFAULT_COMMENT)


def format_histogram(results: Dict[int, int]) -> List[str]:
    """Строки "колышков: партий" по возрастанию счёта и итог."""
    lines = [f"  {score:>2} pegs: {results[score]}" for score in sorted(results)]
    lines.append(f"  total: {sum(results.values())}")
    return lines


@monitor_time('play')
def play(board: StandardBoard, show_history: bool = False, verbose: bool = False) -> int:
    """Играет жадную партию и печатает итог. Возвращает счёт."""
    solver = GreedySolver(verbose=verbose)
    played = solver.solve(board)

    if show_history:
        for move, snapshot in zip(played, board.get_history()):
            print(f"\n{solver.format_move(move)}")
            print(snapshot)

    print()
    board.print_board()
    score = board.get_score()
    print(f"Score: {score}")
    print(comment_for_score(score))
    return score


def run_search(board: StandardBoard, parallel: bool = False,
               workers: Optional[int] = None, verbose: bool = False) -> Dict[int, int]:
    """Полный перебор и печать гистограммы."""
    if parallel:
        solver = ParallelPermutationSolver(num_workers=workers, verbose=verbose)
    else:
        solver = PermutationSolver(verbose=verbose)

    results = solver.solve(board)

    print("\nFinal pegs per line:")
    for line in format_histogram(results):
        print(line)
    print(f"\n{solver.stats}")
    return results


@handle_errors(default_return=1)
def run(args: argparse.Namespace) -> int:
    board = StandardBoard(args.empty).create_board()
    print("Board created")
    board.print_board()

    if args.search:
        run_search(board, args.parallel, args.workers, args.verbose)
    else:
        play(board, args.history, args.verbose)

    if args.stats:
        get_monitor().print_stats()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle Peg Solitaire (15 spaces)',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                      # one greedy game
  python main.py --search             # count every possible game
  python main.py --search --parallel  # same, in several processes
        """
    )
    parser.add_argument(
        '--search', action='store_true',
        help='Enumerate every game and print final peg counts'
    )
    parser.add_argument(
        '--parallel', action='store_true',
        help='Split the search across processes'
    )
    parser.add_argument(
        '--workers', '-w', type=int, default=None,
        help='Worker processes for --parallel (default: CPU count)'
    )
    parser.add_argument(
        '--empty', '-e', type=int, default=STANDARD_EMPTY_START,
        help=f'Initially empty space id (default: {STANDARD_EMPTY_START})'
    )
    parser.add_argument(
        '--history', action='store_true',
        help='Print the board after every greedy move'
    )
    parser.add_argument(
        '--stats', action='store_true',
        help='Print timing statistics'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Log solver progress'
    )
    parser.add_argument(
        '--log-file',
        help='Also write the log to this file'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(args.verbose, args.log_file)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
