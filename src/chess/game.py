"""
The Game class is the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the rules required to play a turn:
resolve the pieces, validate the movement, guard against self-check, commit, and decide whether the game ended.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional, Self

from loguru import logger

from src.chess.board import Board
from src.chess.check import is_in_check
from src.chess.fen import FENState, side_to_fen
from src.chess.moves import Move, validate_move
from src.chess.pieces import Piece, PieceKind, Side
from src.chess.square import Square, all_squares
from src.core.config import EngineConfig
from src.core.exceptions import GameOverError, IllegalMoveError
from src.core.shared_types import MoveClassification, MoveError, Outcome, Status

WINNER_TO_OUTCOME: dict[Side, Outcome] = {
    Side.WHITE: Outcome.WIN_WHITE,
    Side.BLACK: Outcome.WIN_BLACK,
}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Side = Side.WHITE
    history: list[MoveClassification] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS
    config: EngineConfig = field(default_factory=EngineConfig, compare=False)

    @classmethod
    def new_game(cls, config: Optional[EngineConfig] = None) -> Self:
        """Standard opening layout, white to move"""
        return cls(board=Board.standard(), config=config or EngineConfig())

    @classmethod
    def empty(cls, config: Optional[EngineConfig] = None) -> Self:
        return cls(board=Board(), config=config or EngineConfig())

    @classmethod
    def from_fen(cls, fen: str, config: Optional[EngineConfig] = None) -> Self:
        """Start from a custom position. Only the placement and the side to move are used."""
        state = FENState.from_fen(fen)
        return cls(
            board=Board.from_fen(state.position),
            turn=state.side_to_move,
            config=config or EngineConfig(),
        )

    def to_fen(self) -> str:
        return f"{self.board.to_fen()} {side_to_fen(self.turn)}"

    @property
    def finished(self) -> bool:
        return self.status != Status.IN_PROGRESS

    @property
    def outcome(self) -> Optional[Outcome]:
        """
        The turn is handed over on every committed move, also the last one.
        On checkmate the side to move is the mated side, so the winner is its opponent.
        """
        if self.status == Status.IN_PROGRESS:
            return None
        if self.status == Status.CHECKMATE:
            return WINNER_TO_OUTCOME[self.turn.opponent]
        return Outcome.TIE

    @property
    def is_check(self) -> bool:
        """Is the side to move currently in check"""
        return is_in_check(self.board, self.turn)

    @property
    def half_move_clock(self) -> int:
        """Number of half moves since the last pawn move or capture"""
        count = 0
        for classification in reversed(self.history):
            if classification == MoveClassification.CAPTURE_OR_PAWN:
                break
            count += 1
        return count

    def do_move(self, move: Move) -> Optional[Outcome]:
        """
        Attempt to make a move
        -----

        1. Game must still be in progress
        2. Resolve the pieces standing on the start / end squares
        3. Validate the movement shape (and path)
        4. Try the move on a scratch board: you cannot leave your own king in check
        5. Commit the scratch board + classify the move into the history + hand the turn to the opponent
        6. Check if the opponent (now the side to move) has any legal reply left (checkmate / stalemate)
        7. Check the 50 half-move rule

        Returns the Outcome if the move ended the game, None if the game continues.
        Raises IllegalMoveError (GameOverError once finished) if the move is rejected. Nothing is changed in that case.
        """
        if self.finished:
            raise GameOverError(f"Game is over. status: {self.status}")

        mover = self.turn
        try:
            is_capture = self._check_move(move, mover)
            board_after_move = self._board_after_move(self.board, move, mover)
        except IllegalMoveError as error:
            logger.debug(f"Rejected {move} for {mover.name.lower()}: {error.reason}")
            raise

        moving_piece = self.board.piece(move.start)
        # for the type checker: _check_move already made sure there is a piece to move
        assert moving_piece is not None

        self.board = board_after_move
        self.history.append(self._classify(moving_piece, is_capture))
        self.turn = mover.opponent
        logger.debug(f"{mover.name.lower()} played {move.to_uci()} -> {self.to_fen()}")

        self._update_game_status(mover)
        if self.finished:
            logger.info(f"Game finished: {self.status} ({self.outcome})")
            return self.outcome
        return None

    def legal_moves(self, side: Optional[Side] = None) -> Iterator[Move]:
        """
        Lazily generate every legal move for `side` (default: the side to move)
        ----

        Brute force: every square with a piece of the side as start, every square of the board as end.
        Each candidate goes through the same checks as `do_move`, on scratch boards only, so the game is never touched.
        """
        side = side or self.turn
        for start in self.board.locate_side(side):
            for end in all_squares():
                move = Move(start, end)
                try:
                    self._check_move(move, side)
                    self._board_after_move(self.board, move, side)
                except IllegalMoveError:
                    continue
                yield move

    def has_legal_move(self, side: Side) -> bool:
        return next(self.legal_moves(side), None) is not None

    # -- PRIVATE HELPERS ---
    def _check_move(self, move: Move, side: Side) -> bool:
        """
        Everything that can be decided without making the move. Returns whether the move is a capture.
        """
        if not (move.start.is_within_bounds() and move.end.is_within_bounds()):
            raise IllegalMoveError(MoveError.OUTSIDE_BOARD)

        moving_piece = self.board.piece(move.start)
        if moving_piece is None:
            raise IllegalMoveError(MoveError.NO_PIECE)
        if moving_piece.side != side:
            raise IllegalMoveError(MoveError.WRONG_COLOR_PIECE)

        target_piece = self.board.piece(move.end)
        if target_piece is not None and target_piece.side == side:
            raise IllegalMoveError(MoveError.FRIENDLY_FIRE)
        is_capture = target_piece is not None

        error = validate_move(
            self.board, side, move, moving_piece, target_piece, is_capture
        )
        if error is not None:
            raise IllegalMoveError(error)
        return is_capture

    @staticmethod
    def _board_after_move(board: Board, move: Move, side: Side) -> Board:
        """
        Return a copy of the board with the move played.
        The copy is thrown away if the move would leave (or put) your own king in check.
        """
        scratch_board = board.copy()
        scratch_board.move_piece(move.start, move.end)
        if is_in_check(scratch_board, side):
            raise IllegalMoveError(MoveError.SELF_CHECK)
        return scratch_board

    @staticmethod
    def _classify(moving_piece: Piece, is_capture: bool) -> MoveClassification:
        if moving_piece.kind == PieceKind.PAWN or is_capture:
            return MoveClassification.CAPTURE_OR_PAWN
        return MoveClassification.OTHER

    def _update_game_status(self, mover: Side) -> None:
        """
        Performs checks to see if game has ended and changes status accordingly.

        `mover` is the side that just moved. The turn already belongs to its opponent.
        """
        opponent = mover.opponent
        if not self.has_legal_move(opponent):
            if is_in_check(self.board, opponent):
                self._change_status(Status.CHECKMATE)
            else:
                self._change_status(Status.STALEMATE)
            return

        if self._is_half_move_draw():
            self._change_status(Status.DRAW_FIFTY_MOVE_RULE)

    def _is_half_move_draw(self) -> bool:
        """If the last `draw_window` half-moves contain no pawn move and no capture, the game is drawn"""
        window = self.config.draw_window
        if len(self.history) < window:
            return False
        return all(
            classification == MoveClassification.OTHER
            for classification in self.history[-window:]
        )

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status


def build_move(from_square_alg: str, to_square_alg: str) -> Move:
    """Convenience for the service layer: squares in algebraic notation"""
    return Move(
        Square.from_algebraic(from_square_alg), Square.from_algebraic(to_square_alg)
    )
