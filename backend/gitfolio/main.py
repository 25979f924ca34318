import sys
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .config import Settings, get_settings
from .datasources.base import RepoSource
from .datasources.github_adapter import GitHubAdapter
from .schemas import LikeResponse, ProjectsResponse, ShareResult, ViewMode
from .services.cache import RepoCache
from .services.fetcher import RepoFetcher
from .services.likes import LikeStore
from .services.portfolio import AppState, PortfolioService
from .services.share import DeferredShareClient, ShareClient, ShareService
from .services.storage import JsonFileStorage, StorageClient


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def create_app(
    settings: Optional[Settings] = None,
    source: Optional[RepoSource] = None,
    storage: Optional[StorageClient] = None,
    share_client: Optional[ShareClient] = None,
    cache: Optional[RepoCache] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    storage = storage or JsonFileStorage(settings.storage_path)
    cache = cache or RepoCache(storage, ttl_seconds=settings.cache_ttl_seconds)
    source = source or GitHubAdapter(settings)
    fetcher = RepoFetcher(source, cache, settings.github_username)
    service = PortfolioService(
        settings,
        fetcher,
        LikeStore(storage),
        ShareService(share_client or DeferredShareClient(), settings),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        aclose = getattr(source, "aclose", None)
        if aclose is not None:
            await aclose()

    app = FastAPI(title="gitfolio", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.service = service
    app.state.portfolio = AppState()

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}

    @app.get("/projects", response_model=ProjectsResponse)
    async def projects(
        request: Request,
        response: Response,
        q: str = Query(""),
        mode: ViewMode = Query(ViewMode.all),
    ):
        state = await service.load(request.app.state.portfolio)
        request.app.state.portfolio = state
        if state.show_fallback:
            response.status_code = 502
        return service.view(state, q, mode)

    @app.post("/projects/refresh", response_model=ProjectsResponse)
    async def refresh(
        request: Request,
        response: Response,
        q: str = Query(""),
        mode: ViewMode = Query(ViewMode.all),
    ):
        state = await service.refresh(request.app.state.portfolio)
        request.app.state.portfolio = state
        if state.error:
            response.status_code = 502
        return service.view(state, q, mode)

    @app.get("/projects/{name}/likes", response_model=LikeResponse)
    async def get_likes(name: str):
        return service.likes(name)

    @app.post("/projects/{name}/likes", response_model=LikeResponse)
    async def like(name: str):
        return service.like(name)

    @app.post("/projects/{name}/share", response_model=ShareResult)
    async def share_project(name: str, request: Request):
        result = await service.share_project(request.app.state.portfolio, name)
        if result is None:
            raise HTTPException(status_code=404, detail=f"Unknown project: {name}")
        return result

    @app.post("/share", response_model=ShareResult)
    async def share_portfolio():
        return await service.share_portfolio()

    @app.post("/copy-link", response_model=ShareResult)
    async def copy_link():
        return await service.copy_link()

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8020)
