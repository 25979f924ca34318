from typing import Iterable, List, Sequence, TypeVar

from ..schemas import RankedRepository, RepositoryRecord, ViewMode

R = TypeVar("R", bound=RepositoryRecord)


def pushed_timestamp(repo: RepositoryRecord) -> float:
    # repositories that were never pushed sort after everything else
    if repo.pushed_at is None:
        return float("-inf")
    return repo.pushed_at.timestamp()


def rank_repos(
    repos: Iterable[RepositoryRecord],
    excluded: Iterable[str],
    featured: Iterable[str],
) -> List[RankedRepository]:
    excluded_set = {name.lower() for name in excluded}
    featured_set = {name.lower() for name in featured}

    ranked = [
        RankedRepository(**{**repo.model_dump(), "featured": repo.name.lower() in featured_set})
        for repo in repos
        if not repo.fork and repo.name.lower() not in excluded_set
    ]
    # sorted() is stable, so ties keep their input order
    return sorted(ranked, key=lambda r: (not r.featured, -pushed_timestamp(r)))


def sort_for_mode(repos: Sequence[R], mode: ViewMode) -> List[R]:
    """Re-sort for the "recent" and "stars" views; featured grouping is dropped."""
    if mode == ViewMode.recent:
        return sorted(repos, key=pushed_timestamp, reverse=True)
    if mode == ViewMode.stars:
        return sorted(repos, key=lambda r: r.stargazers_count, reverse=True)
    return list(repos)
