from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import router as articles_router
from comments import router as comments_router
from core import config, endpoints, errors
from core.db import Database
from topics import router as topics_router
from users import router as users_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, owned by the app and closed on shutdown.
    app.state.db = await Database.connect()
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


def create_app(*, lifespan_handler=lifespan) -> FastAPI:
    config.configure_logging()

    # Trailing-slash variants fall through to the "invalid url" 404.
    app = FastAPI(title="news-api", lifespan=lifespan_handler, redirect_slashes=False)

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(endpoints.router, tags=["endpoints"])
    app.include_router(topics_router.router, tags=["topics"])
    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(comments_router.router, tags=["comments"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/health", include_in_schema=False)
    def health() -> dict:
        return {"status": "ok"}

    errors.register_exception_handlers(app)
    return app


app = create_app()
