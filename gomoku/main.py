import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gomoku.config import Settings, load_settings
from gomoku.ws_handler import router as ws_router


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = load_settings()

    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("gomoku").setLevel(settings.log_level)

    app = FastAPI(title="Gomoku")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(ws_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
