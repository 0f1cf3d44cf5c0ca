"""Orchestration between a caller (CLI, router, network peer) and the rules engine. Games are kept in memory."""

from typing import Optional
from uuid import UUID, uuid4

from loguru import logger

from src.api.models import (
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    MoveResponse,
)
from src.chess.game import Game, build_move
from src.core.config import EngineConfig
from src.core.exceptions import GameNotFoundError, IllegalMoveError
from src.core.logging import setup_logging
from src.core.shared_types import Outcome, Status

DRAW_REASONS: dict[Status, str] = {
    Status.STALEMATE: "stalemate",
    Status.DRAW_FIFTY_MOVE_RULE: "the 50 half-move rule",
}


def describe_outcome(outcome: Optional[Outcome], status: Status) -> Optional[str]:
    """The announcement a display layer can show once a game is over"""
    if outcome is None:
        return None
    if outcome == Outcome.WIN_WHITE:
        return "White has checkmated Black"
    if outcome == Outcome.WIN_BLACK:
        return "Black has checkmated White"
    reason = DRAW_REASONS.get(status)
    return f"The game is a draw by {reason}" if reason else "The game is a draw"


class ChessService:
    """
    Orchestration of layers for chess games.

    NOTE: Calls for the same game must be serialised by the caller. A Game is not safe to share between threads.
    """

    def __init__(self, config: Optional[EngineConfig] = None) -> None:
        self.config = config or EngineConfig()
        setup_logging(self.config)
        self.games: dict[UUID, Game] = {}

    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Standard layout, unless the request brings its own starting position"""
        game = (
            Game.from_fen(request.starting_fen, config=self.config)
            if request.starting_fen
            else Game.new_game(config=self.config)
        )
        game_id = uuid4()
        self.games[game_id] = game
        logger.info(f"Created game {game_id} from {game.to_fen()}")
        return self._create_game_response(game_id, game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        game = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game)

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        A rejected move is not an error for the caller: the response says why, and the game is unchanged.
        """
        game = self._fetch_game(request.game_id)
        move = build_move(request.from_square, request.to_square)

        try:
            game.do_move(move)
        except IllegalMoveError as error:
            return MoveResponse(
                game_id=request.game_id,
                accepted=False,
                error=error.reason,
                game=self._create_game_response(request.game_id, game),
            )

        return MoveResponse(
            game_id=request.game_id,
            accepted=True,
            game=self._create_game_response(request.game_id, game),
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        self._fetch_game(request.game_id)
        del self.games[request.game_id]
        logger.info(f"Deleted game {request.game_id}")

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        return GameResponse(
            game_id=game_id,
            fen_state=game.to_fen(),
            status=game.status,
            outcome=game.outcome,
            announcement=describe_outcome(game.outcome, game.status),
            half_move_clock=game.half_move_clock,
        )

    def _fetch_game(self, game_id: UUID) -> Game:
        """Attempt to find the game and raise error if it fails."""
        game = self.games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game
