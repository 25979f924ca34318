from datetime import datetime
from typing import List, Mapping, Optional, Sequence

from ..config import Settings
from ..schemas import ProjectCard, RankedRepository
from .likes import LikeStore

DEFAULT_DESCRIPTION = "No description yet. Add one in GitHub repo settings."
EMPTY_MESSAGE = "No repos found. Make sure your repos are public."
MAX_TOPIC_BADGES = 4


def format_date(value: Optional[datetime]) -> str:
    """Short human date such as "Jan 5, 2024"."""
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"


def live_url_for(repo: RankedRepository, custom_homepages: Mapping[str, str]) -> Optional[str]:
    custom = custom_homepages.get(repo.name)
    if custom:
        return custom
    if repo.homepage and repo.homepage.startswith("http"):
        return repo.homepage
    return None


def project_card(repo: RankedRepository, likes: int, settings: Settings) -> ProjectCard:
    description = (
        repo.description
        or settings.custom_descriptions.get(repo.name)
        or DEFAULT_DESCRIPTION
    )
    live_url = live_url_for(repo, settings.custom_homepages)
    return ProjectCard(
        name=repo.name,
        description=description,
        language=repo.language,
        stars=repo.stargazers_count,
        updated=format_date(repo.pushed_at),
        topics=repo.topics[:MAX_TOPIC_BADGES],
        repo_url=repo.html_url,
        live_url=live_url,
        share_url=live_url or repo.html_url,
        likes=likes,
        image=settings.project_images.get(repo.name),
        featured=repo.featured,
        search_name=repo.name.lower(),
        search_language=(repo.language or "").lower(),
        search_topics=" ".join(repo.topics).lower(),
    )


def render_repos(
    repos: Sequence[RankedRepository], like_store: LikeStore, settings: Settings
) -> List[ProjectCard]:
    likes = like_store.all_likes()
    return [project_card(repo, likes.get(repo.name, 0), settings) for repo in repos]
