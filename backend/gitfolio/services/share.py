from typing import Protocol

from loguru import logger

from ..config import Settings
from ..schemas import ProjectCard, ShareOutcome, ShareResult


class ShareCancelled(Exception):
    """The user dismissed the native share sheet."""


class ShareUnavailable(Exception):
    """Native share or clipboard access failed or is not supported."""


class ShareClient(Protocol):
    def can_share(self) -> bool:
        ...

    async def share(self, title: str, text: str, url: str) -> None:
        ...

    async def copy_text(self, text: str) -> None:
        ...


class DeferredShareClient:
    """Server-side client: no share sheet, no clipboard.

    Every share resolves to a manual-copy result whose payload the browser can
    hand to its own share or clipboard APIs.
    """

    def can_share(self) -> bool:
        return False

    async def share(self, title: str, text: str, url: str) -> None:
        raise ShareUnavailable("native share is not available on the server")

    async def copy_text(self, text: str) -> None:
        raise ShareUnavailable("clipboard is not available on the server")


class ShareService:
    def __init__(self, client: ShareClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def share(self, title: str, text: str, url: str) -> ShareResult:
        def result(outcome: ShareOutcome, message: str | None = None) -> ShareResult:
            return ShareResult(outcome=outcome, title=title, text=text, url=url, message=message)

        try:
            if self.client.can_share():
                await self.client.share(title, text, url)
                return result(ShareOutcome.shared)
            await self.client.copy_text(url)
            return result(ShareOutcome.copied, "Link copied to clipboard! Share it anywhere you like.")
        except ShareCancelled:
            return result(ShareOutcome.cancelled)
        except ShareUnavailable as exc:
            logger.debug(f"[share] falling back to clipboard: {exc}")

        try:
            await self.client.copy_text(url)
        except ShareUnavailable:
            return result(ShareOutcome.manual, f"Share failed. You can manually copy this link:\n{url}")
        return result(ShareOutcome.copied, "Link copied to clipboard!")

    async def share_project(self, card: ProjectCard) -> ShareResult:
        return await self.share(
            title=f"{card.name} - {self.settings.owner_name}",
            text=f"Check out this project: {card.name}",
            url=card.share_url,
        )

    async def share_portfolio(self) -> ShareResult:
        return await self.share(
            title=self.settings.portfolio_title,
            text=self.settings.portfolio_text,
            url=self.settings.portfolio_url,
        )

    async def copy_link(self, url: str | None = None) -> ShareResult:
        url = url or self.settings.portfolio_url
        title = self.settings.portfolio_title
        try:
            await self.client.copy_text(url)
        except ShareUnavailable:
            return ShareResult(
                outcome=ShareOutcome.manual,
                title=title,
                text=url,
                url=url,
                message=f"Copy this link manually:\n{url}",
            )
        return ShareResult(outcome=ShareOutcome.copied, title=title, text=url, url=url, message="Copied!")
