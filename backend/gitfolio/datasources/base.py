from typing import Any, Dict, List, Protocol

# Raw repository object as decoded from the GitHub API.
RepoPayload = Dict[str, Any]


class RepoSource(Protocol):
    async def list_user_repositories(self, username: str) -> List[RepoPayload]:
        ...
