from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViewMode(str, Enum):
    all = "all"
    recent = "recent"
    stars = "stars"
    featured = "featured"


class RepositoryRecord(BaseModel):
    """Repository as returned by the GitHub API; never mutated locally."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    topics: List[str] = []
    stargazers_count: int = Field(default=0, ge=0)
    pushed_at: Optional[datetime] = None
    homepage: Optional[str] = None
    html_url: str
    fork: bool = False


class RankedRepository(RepositoryRecord):
    featured: bool = False


class CacheEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    saved_at: int = Field(alias="savedAt")  # epoch milliseconds
    data: List[Dict[str, Any]]


class ProjectCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    language: Optional[str]
    stars: int
    updated: str
    topics: List[str]
    repo_url: str
    live_url: Optional[str]
    share_url: str
    likes: int
    image: Optional[str]
    featured: bool
    search_name: str
    search_language: str
    search_topics: str
    visible: bool = True


class FallbackPanel(BaseModel):
    title: str
    message: str
    detail: str
    link_url: str
    link_label: str


class ProjectsResponse(BaseModel):
    username: str
    mode: ViewMode
    query: str
    source: Optional[str] = None  # "cache" or "remote"
    status: str
    message: Optional[str] = None
    total: int
    visible_count: int
    cards: List[ProjectCard]
    empty_message: Optional[str] = None
    fallback: Optional[FallbackPanel] = None


class LikeResponse(BaseModel):
    name: str
    likes: int


class ShareOutcome(str, Enum):
    shared = "shared"
    cancelled = "cancelled"
    copied = "copied"
    manual = "manual"


class ShareResult(BaseModel):
    outcome: ShareOutcome
    title: str
    text: str
    url: str
    message: Optional[str] = None
