import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Tuple

from . import config

logger = logging.getLogger(__name__)

EMPTY = ''
PLAYER_X = 'X'
PLAYER_O = 'O'

BOARD_SIZE = 3


class InvalidArgument(ValueError):
    """
    raised when a collaborator asks for a history index that does not exist
    """


class WinnerInfo(NamedTuple):
    winner: Optional[str]
    winning_squares: Optional[Tuple[int, ...]]


@dataclass(frozen=True)
class Move:
    """
    one history snapshot: the board after a move and where it was played
    """
    squares: Tuple[str, ...]
    location: Optional[Tuple[int, int]] = None   # (row, col), 1-indexed

    @property
    def location_text(self):
        if self.location is None:
            return ""
        row, col = self.location
        return f"({row}, {col})"


class MoveEntry(NamedTuple):
    move: int
    text: str
    is_current: bool


def winning_lines(board_size=BOARD_SIZE):
    """
    index lines in fixed order: rows, columns, main diag, anti-diag
    """
    n = board_size
    lines = [tuple(r * n + c for c in range(n)) for r in range(n)]
    lines += [tuple(r * n + c for r in range(n)) for c in range(n)]
    lines.append(tuple(i * n + i for i in range(n)))
    lines.append(tuple(i * n + (n - 1 - i) for i in range(n)))
    return lines


LINES = winning_lines()


def compute_winner(squares) -> WinnerInfo:
    """
    first complete line wins; ties between lines go to the earlier one
    """
    for line in LINES:
        first = squares[line[0]]
        if first != EMPTY and all(squares[i] == first for i in line):
            return WinnerInfo(first, line)
    return WinnerInfo(None, None)


def next_player(squares):
    # X always opens, so parity of filled cells decides
    filled = sum(1 for cell in squares if cell != EMPTY)
    return PLAYER_X if filled % 2 == 0 else PLAYER_O


def status_text(squares, x_is_next=None):
    winner = compute_winner(squares).winner
    if winner:
        return f"Winner: {winner}"
    if all(cell != EMPTY for cell in squares):
        return "Draw!"
    if x_is_next is None:
        player = next_player(squares)
    else:
        player = PLAYER_X if x_is_next else PLAYER_O
    return f"Next player: {player}"


def move_location(index, board_size=BOARD_SIZE):
    return (index // board_size + 1, index % board_size + 1)


def _start_move():
    return Move(squares=(EMPTY,) * (BOARD_SIZE * BOARD_SIZE))


class GameLogic:
    """
    tic-tac-toe rules, history and time travel

    history[0] is always the empty board; current_move points at the
    snapshot being shown. playing from an earlier snapshot drops every
    later one before the new move is appended.
    """
    def __init__(self, ascending=None):
        """
        init history and display order
        """
        self.board_size = BOARD_SIZE       # fixed 3x3 grid
        self.history: List[Move] = [_start_move()]
        self.current_move = 0
        self.is_ascending = config.START_ASCENDING if ascending is None else ascending

    @property
    def current_squares(self):
        return self.history[self.current_move].squares

    @property
    def x_is_next(self):
        return self.current_move % 2 == 0

    @property
    def current_player(self):
        return PLAYER_X if self.x_is_next else PLAYER_O

    @property
    def winner_info(self):
        return compute_winner(self.current_squares)

    @property
    def status(self):
        return status_text(self.current_squares, self.x_is_next)

    @property
    def move_count(self):
        return sum(1 for cell in self.current_squares if cell != EMPTY)

    @property
    def game_over(self):
        return (self.winner_info.winner is not None
                or self.move_count == len(self.current_squares))

    def play(self, index):
        """
        put the mover's mark on cell index
        blocked plays (game won, cell taken, off the board) change nothing
        """
        squares = self.current_squares
        if isinstance(index, bool) or not isinstance(index, int) \
           or not 0 <= index < len(squares):
            logger.debug("ignoring play at %r: not a board index", index)
            return
        if self.winner_info.winner or squares[index] != EMPTY:
            logger.debug("ignoring play at %d: cell taken or game won", index)
            return

        player = self.current_player
        next_squares = list(squares)
        next_squares[index] = player
        move = Move(tuple(next_squares), move_location(index, self.board_size))

        # drop any future left over from a jump back
        self.history = self.history[:self.current_move + 1] + [move]
        self.current_move = len(self.history) - 1
        logger.debug("%s played %s, now at move #%d",
                     player, move.location_text, self.current_move)

    def jump_to(self, move):
        """
        show snapshot move; history itself is untouched
        """
        if isinstance(move, bool) or not isinstance(move, int) \
           or not 0 <= move < len(self.history):
            raise InvalidArgument(
                f"move {move!r} outside history of length {len(self.history)}")
        self.current_move = move
        logger.debug("jumped to move #%d", move)

    def reset(self):
        """
        back to an empty board; sort order is kept
        """
        self.history = [_start_move()]
        self.current_move = 0
        logger.debug("game reset")

    def toggle_sort_order(self):
        self.is_ascending = not self.is_ascending

    def describe_move(self, move):
        step = self.history[move]
        if move == self.current_move:
            return f"You are at move #{move} {step.location_text}".rstrip()
        if move > 0:
            return f"Go to move #{move} {step.location_text}".rstrip()
        return "Go to game start"

    def move_entries(self):
        """
        move list rows in display order
        """
        entries = [MoveEntry(move, self.describe_move(move), move == self.current_move)
                   for move in range(len(self.history))]
        if not self.is_ascending:
            entries.reverse()
        return entries
