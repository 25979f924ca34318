"""Ties the pipeline together: fetch -> rank -> render -> view filter.

All mutable state lives in :class:`AppState`; service methods take the
current state and return a new one instead of touching shared globals.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from loguru import logger

from ..config import Settings
from ..schemas import (
    FallbackPanel,
    LikeResponse,
    ProjectsResponse,
    RankedRepository,
    ShareResult,
    ViewMode,
)
from .exceptions import GitfolioError
from .fetcher import RepoFetcher
from .likes import LikeStore
from .ranking import rank_repos, sort_for_mode
from .renderer import EMPTY_MESSAGE, project_card, render_repos
from .share import ShareService
from .view_filter import apply_view_filter

LOAD_FAILED_STATUS = "Couldn't load projects from GitHub right now. (API rate limit or connection issue)"
REFRESH_FAILED_STATUS = "Refresh failed. Try again in a minute."
REFRESHED_STATUS = "Refreshed from GitHub."
CACHE_STATUS = "Loaded projects from cache."


@dataclass(frozen=True)
class AppState:
    repos: List[RankedRepository] = field(default_factory=list)
    source: Optional[str] = None
    status: str = ""
    error: Optional[str] = None
    # whether the error replaces the project list with a fallback panel
    show_fallback: bool = False


class PortfolioService:
    def __init__(
        self,
        settings: Settings,
        fetcher: RepoFetcher,
        like_store: LikeStore,
        share_service: ShareService,
    ):
        self.settings = settings
        self.fetcher = fetcher
        self.like_store = like_store
        self.share_service = share_service

    async def load(self, state: AppState, force: bool = False) -> AppState:
        try:
            result = await self.fetcher.fetch_repos(force=force)
        except GitfolioError as exc:
            logger.warning(f"[portfolio] loading repositories failed: {exc}")
            return replace(state, status=LOAD_FAILED_STATUS, error=str(exc), show_fallback=True)

        repos = rank_repos(result.records, self.settings.excluded_repos, self.settings.featured_repos)
        if result.source == "cache":
            status = CACHE_STATUS
        else:
            status = f"Loaded {len(repos)} repo(s)."
        return AppState(repos=repos, source=result.source, status=status)

    async def refresh(self, state: AppState) -> AppState:
        new_state = await self.load(state, force=True)
        if new_state.error:
            # keep whatever was shown before; only the status changes
            return replace(state, status=REFRESH_FAILED_STATUS, error=new_state.error, show_fallback=False)
        return replace(new_state, status=REFRESHED_STATUS)

    def fallback_panel(self, error: str) -> FallbackPanel:
        return FallbackPanel(
            title="Projects couldn't load",
            message="No worries, the portfolio still works. Try Refresh or check again later.",
            detail=error,
            link_url=self.settings.profile_url,
            link_label="View Repos on GitHub",
        )

    def view(self, state: AppState, query: str = "", mode: ViewMode = ViewMode.all) -> ProjectsResponse:
        base = {
            "username": self.settings.github_username,
            "mode": mode,
            "query": query,
            "source": state.source,
            "message": state.status,
        }
        if state.error and state.show_fallback:
            return ProjectsResponse(
                **base,
                status=state.status,
                total=0,
                visible_count=0,
                cards=[],
                fallback=self.fallback_panel(state.error),
            )

        ordered = sort_for_mode(state.repos, mode)
        cards = render_repos(ordered, self.like_store, self.settings)
        filtered = apply_view_filter(cards, query, mode)
        return ProjectsResponse(
            **base,
            status=filtered.status,
            total=len(cards),
            visible_count=filtered.visible_count,
            cards=filtered.cards,
            empty_message=None if cards else EMPTY_MESSAGE,
        )

    def find_repo(self, state: AppState, name: str) -> Optional[RankedRepository]:
        for repo in state.repos:
            if repo.name == name:
                return repo
        return None

    def like(self, name: str) -> LikeResponse:
        return LikeResponse(name=name, likes=self.like_store.increment_likes(name))

    def likes(self, name: str) -> LikeResponse:
        return LikeResponse(name=name, likes=self.like_store.get_likes(name))

    async def share_project(self, state: AppState, name: str) -> Optional[ShareResult]:
        repo = self.find_repo(state, name)
        if repo is None:
            return None
        card = project_card(repo, self.like_store.get_likes(name), self.settings)
        return await self.share_service.share_project(card)

    async def share_portfolio(self) -> ShareResult:
        return await self.share_service.share_portfolio()

    async def copy_link(self) -> ShareResult:
        return await self.share_service.copy_link()
