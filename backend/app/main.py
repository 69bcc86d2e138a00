from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_cors_origins
from app.models import GamesReadResponse
from routes.game_ws import router as game_router
from services.store import games

app = FastAPI(title="Tic-Tac-Toe API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(game_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/games", response_model=GamesReadResponse)
def read_games() -> GamesReadResponse:
    return GamesReadResponse(active=len(games))
