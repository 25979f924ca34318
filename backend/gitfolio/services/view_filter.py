from dataclasses import dataclass
from typing import List, Sequence

from ..schemas import ProjectCard, ViewMode


@dataclass(frozen=True)
class FilterResult:
    cards: List[ProjectCard]
    visible_count: int
    status: str


def normalize_query(query: str | None) -> str:
    return (query or "").strip().lower()


def matches_search(card: ProjectCard, query: str) -> bool:
    q = normalize_query(query)
    if not q:
        return True
    return q in card.search_name or q in card.search_language or q in card.search_topics


def matches_mode(card: ProjectCard, mode: ViewMode) -> bool:
    if mode == ViewMode.featured:
        return card.featured
    return True


def apply_view_filter(cards: Sequence[ProjectCard], query: str | None, mode: ViewMode) -> FilterResult:
    q = normalize_query(query)
    filtered = [
        card.model_copy(update={"visible": matches_search(card, q) and matches_mode(card, mode)})
        for card in cards
    ]
    visible = sum(1 for card in filtered if card.visible)
    return FilterResult(cards=filtered, visible_count=visible, status=f"{visible} project(s) shown")
