"""Favorite toggle with optimistic updates.

Policy: no rollback. The local state flips as soon as the user toggles and
stays flipped even if the remote call fails; the failure goes to the error
sink only. Local state is therefore eventually consistent with the favorites
store and trusts the client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from foodorder.api import FoodApi
from foodorder.errors import ApiError, ErrorSink, log_error_sink
from foodorder.models import FavoriteState, Item

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FavoriteChange:
    """A pending remote call produced by an optimistic toggle."""

    item: Item
    target: FavoriteState

    @property
    def operation(self) -> str:
        return "add_favorite" if self.target is FavoriteState.FAVORITE else "remove_favorite"


class FavoriteToggle:
    def __init__(self, api: FoodApi, on_error: ErrorSink = log_error_sink) -> None:
        self.api = api
        self.on_error = on_error
        # Not reloaded from the store on entry.
        self.state = FavoriteState.NOT_FAVORITE

    @property
    def is_favorite(self) -> bool:
        return self.state is FavoriteState.FAVORITE

    def toggle(self, item: Item) -> FavoriteChange:
        """Flip the local state now and return the remote call to run."""
        if self.is_favorite:
            self.state = FavoriteState.NOT_FAVORITE
        else:
            self.state = FavoriteState.FAVORITE
        logger.debug("favorite_toggled item=%r state=%s", item.id, self.state.value)
        return FavoriteChange(item=item, target=self.state)

    async def sync(self, change: FavoriteChange) -> bool:
        """Send ``change`` to the favorites store. Returns False on failure."""
        try:
            if change.target is FavoriteState.FAVORITE:
                await self.api.add_favorite(change.item)
            else:
                await self.api.remove_favorite(change.item.id)
        except (ApiError, httpx.HTTPError) as exc:
            self.on_error(change.operation, exc)
            return False
        return True

    async def toggle_and_sync(self, item: Item) -> bool:
        return await self.sync(self.toggle(item))
