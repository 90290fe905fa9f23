"""HTTP routes. Thin layer: parse the request, hand it to the service, map domain errors to status codes."""

import logging
from uuid import UUID

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.models import (
    ClickRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    ResetGameRequest,
    SquareModel,
)
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    GameAlreadyOverError,
    GameError,
    InvalidRequestError,
    RepositoryError,
)
from src.db.memory_repository import InMemoryGameRepository
from src.services.checkers_service import CheckersService

logger = logging.getLogger(__name__)

ERROR_STATUS_CODES: dict[type[GameError], int] = {
    RepositoryError: status.HTTP_404_NOT_FOUND,
    GameAlreadyOverError: status.HTTP_409_CONFLICT,
    InvalidRequestError: 422,
}


def error_status_code(error: GameError) -> int:
    """Most specific match wins. Anything else the game refuses is a bad request."""
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_400_BAD_REQUEST


def create_app(
    service: CheckersService | None = None, settings: Settings | None = None
) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title=settings.app_title)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    checkers_service = service or CheckersService(InMemoryGameRepository())

    def get_service() -> CheckersService:
        return checkers_service

    @app.exception_handler(GameError)
    async def handle_game_error(request: Request, exc: GameError) -> JSONResponse:
        code = error_status_code(exc)
        logger.debug("%s %s -> %d: %s", request.method, request.url.path, code, exc)
        return JSONResponse(
            status_code=code,
            content={"error": type(exc).__name__, "detail": str(exc)},
        )

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/games", status_code=status.HTTP_201_CREATED)
    def create_game(svc: CheckersService = Depends(get_service)) -> GameResponse:
        return svc.create_new_game()

    @app.get("/games/{game_id}")
    def get_game(
        game_id: UUID, svc: CheckersService = Depends(get_service)
    ) -> GameResponse:
        return svc.get_game_state(GetGameRequest(game_id=game_id))

    @app.post("/games/{game_id}/moves")
    def make_move(
        game_id: UUID,
        from_square: SquareModel,
        to_square: SquareModel,
        svc: CheckersService = Depends(get_service),
    ) -> GameResponse:
        request = MoveRequest(
            game_id=game_id, from_square=from_square, to_square=to_square
        )
        return svc.make_move(request)

    @app.post("/games/{game_id}/clicks")
    def click(
        game_id: UUID,
        square: SquareModel,
        svc: CheckersService = Depends(get_service),
    ) -> GameResponse:
        return svc.click(ClickRequest(game_id=game_id, square=square))

    @app.post("/games/{game_id}/reset")
    def reset_game(
        game_id: UUID, svc: CheckersService = Depends(get_service)
    ) -> GameResponse:
        return svc.reset_game(ResetGameRequest(game_id=game_id))

    @app.delete("/games/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_game(game_id: UUID, svc: CheckersService = Depends(get_service)) -> None:
        svc.delete_game(DeleteGameRequest(game_id=game_id))

    return app
