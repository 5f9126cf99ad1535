from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from catalog import __version__
from catalog.api import create_api_router
from catalog.core.config import Settings, get_settings
from catalog.core.container import ApplicationContainer
from catalog.core.logging import configure_logging
from catalog.infrastructure.database import dispose_engine, init_db
from catalog.interfaces.http.errors import setup_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await dispose_engine()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # Settings validation fails here, at startup, when the signing secret is missing.
    settings = settings or get_settings()
    configure_logging(settings)
    container = ApplicationContainer(settings=settings)
    container.init_infrastructure()

    app = FastAPI(
        title=settings.project_name,
        description="Catalog backend: account registration and sessions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Authorization"],
    )

    setup_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def homepage() -> str:
        return "Welcome page"

    return app


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "catalog.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
