from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import numpy as np
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from api.v1.router import api_router
from services.db import SqlRecipeStore, create_engine_for, init_models
from services.gemini import TextGenerator, client_from_settings
from services.seed_data import SEED_RECIPES
from services.store import InMemoryRecipeStore, RecipeStore

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOG = logging.getLogger(__name__)


async def _build_store() -> RecipeStore:
    seed = SEED_RECIPES if settings.seed_on_startup else []
    if not settings.database_url:
        _LOG.info("DATABASE_URL not set – using in-memory recipe store")
        return InMemoryRecipeStore(seed=seed)

    eng = create_engine_for(settings.database_url)
    await init_models(eng)
    store = SqlRecipeStore(eng)
    if seed and await store.count_recipes() == 0:
        for new in seed:
            await store.create_recipe(new)
        _LOG.info("seeded %d sample recipes", len(seed))
    return store


def create_app(
    store: RecipeStore | None = None,
    llm: TextGenerator | None = None,
    rng: np.random.Generator | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(app.state, "store", None) is None:
            app.state.store = await _build_store()
        yield

    app = FastAPI(title="Chef API", version="1.0.0", lifespan=lifespan)
    app.state.store = store
    app.state.llm = llm if llm is not None else client_from_settings()
    app.state.rng = rng

    # CORS (public demo only – lock down in prod)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "message": "Invalid request data",
                "errors": jsonable_encoder(exc.errors(), custom_encoder={Exception: str}),
            },
        )

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        _LOG.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    app.include_router(api_router, prefix="/api")

    @app.get("/health", tags=["meta"])
    def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.env_name}

    return app


app = create_app()


def serve() -> None:
    """`chef-api` / `python main.py`: run the app under uvicorn."""
    uvicorn.run("main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
