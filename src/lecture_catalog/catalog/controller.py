"""Catalog state controller consumed by the catalog view.

One instance per mounted view: construct it, ``start()`` it (or use it as an
async context manager) and ``dispose()`` it when the view goes away. The view
reads ``visible_records`` and the status flags and calls the explicit
triggers (``load_more``, ``refresh``, ``retry``, ``on_record_created``) in
response to scroll, button and upload events.
"""

from __future__ import annotations

import logging
from functools import partial
from types import TracebackType

from lecture_catalog.catalog.cache import CatalogCache
from lecture_catalog.catalog.filters import FilterEngine
from lecture_catalog.catalog.pagination import PaginationController, PaginationState
from lecture_catalog.catalog.refresh import FetchOperation, FetchTrigger, RefreshCoordinator
from lecture_catalog.domain.lecture import DEFAULT_PAGE_SIZE, FilterCriteria, LectureRecord
from lecture_catalog.infra.config import catalog_page_size
from lecture_catalog.ports.lecture_source import RemoteLectureSource

logger = logging.getLogger(__name__)


class CatalogController:
    def __init__(
        self,
        source: RemoteLectureSource,
        page_size: int = DEFAULT_PAGE_SIZE,
        prefetch_sparse_results: bool = True,
    ) -> None:
        """
        Initialize the controller with its lecture source.

        Args:
            source: Remote collection to page through
            page_size: Records requested per fetch
            prefetch_sparse_results: After a filter change leaves less than
                one page visible, fetch one more page if any remain
        """
        self._cache = CatalogCache()
        self._pagination = PaginationController(source, self._cache, page_size)
        self._coordinator = RefreshCoordinator()
        self._criteria = FilterCriteria()
        self._visible: list[LectureRecord] = []
        self._prefetch_sparse_results = prefetch_sparse_results
        self._disposed = False

    @classmethod
    def from_env(cls, source: RemoteLectureSource) -> CatalogController:
        """Build a controller whose page size comes from CATALOG_PAGE_SIZE."""
        return cls(source, page_size=catalog_page_size())

    async def __aenter__(self) -> CatalogController:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.dispose()

    # ==========================================================================
    # View state
    # ==========================================================================

    @property
    def visible_records(self) -> tuple[LectureRecord, ...]:
        return tuple(self._visible)

    @property
    def records(self) -> tuple[LectureRecord, ...]:
        return self._cache.all()

    @property
    def criteria(self) -> FilterCriteria:
        return self._criteria

    @property
    def is_loading(self) -> bool:
        return self._coordinator.is_loading

    @property
    def is_refreshing(self) -> bool:
        return self._coordinator.is_refreshing

    @property
    def error(self) -> str | None:
        return self._coordinator.error

    @property
    def has_more(self) -> bool:
        return self._pagination.has_more

    @property
    def page(self) -> int:
        return self._pagination.page

    @property
    def page_size(self) -> int:
        return self._pagination.page_size

    @property
    def pagination(self) -> PaginationState:
        return self._pagination.state

    @property
    def disposed(self) -> bool:
        return self._disposed

    # ==========================================================================
    # Triggers
    # ==========================================================================

    async def start(self) -> bool:
        """Initial load of page 1."""
        return await self._trigger(FetchTrigger.INITIAL, self._pagination.reload_first)

    async def load_more(self) -> bool:
        """Fetch the next page (infinite-scroll sentinel)."""
        return await self._trigger(FetchTrigger.LOAD_MORE, self._pagination.load_next)

    async def refresh(self) -> bool:
        """Full refresh: replace the cache with a fresh page 1."""
        return await self._trigger(FetchTrigger.MANUAL_REFRESH, self._pagination.reload_first)

    async def retry(self) -> bool:
        """Re-issue the operation that last failed. No-op without a failure."""
        failed = self._coordinator.failed_trigger
        if failed is None:
            return False
        if failed is FetchTrigger.LOAD_MORE:
            return await self._trigger(FetchTrigger.RETRY, self._pagination.load_next)
        return await self._trigger(FetchTrigger.RETRY, self._pagination.reload_first)

    async def on_record_created(self) -> bool:
        """
        Reload from page 1 after a lecture was created.

        Takes over from any fetch in flight: a new record can shift the
        ranking, so pages fetched before it are no longer authoritative.
        """
        logger.info("Lecture created, reloading catalog from page 1")

        return await self._trigger(
            FetchTrigger.RECORD_CREATED,
            partial(self._pagination.reload_first, force=True),
            force=True,
        )

    async def set_filter(self, criteria: FilterCriteria) -> None:
        """
        Replace the active filters and recompute the visible set.

        Does not query the source, except for at most one prefetch when the
        new selection leaves fewer than a page of records visible.

        Raises:
            FilterValidationError: If criteria are invalid
        """
        criteria.validate()
        self._criteria = criteria
        self._recompute()

        if self._should_prefetch():
            logger.debug(
                "Prefetching for sparse filter result",
                extra={"visible": len(self._visible), "page": self._pagination.page},
            )
            await self.load_more()

    async def clear_filters(self) -> None:
        await self.set_filter(FilterCriteria.cleared())

    def dispose(self) -> None:
        """Detach from the view; outstanding results will be discarded."""
        if self._disposed:
            return
        self._disposed = True
        self._pagination.invalidate()

    # ==========================================================================
    # Internals
    # ==========================================================================

    async def _trigger(
        self,
        trigger: FetchTrigger,
        operation: FetchOperation,
        force: bool = False,
    ) -> bool:
        if self._disposed:
            logger.debug("Ignoring trigger on disposed catalog", extra={"trigger": trigger.value})
            return False

        accepted = await self._coordinator.run(trigger, operation, force=force)
        if accepted:
            self._recompute()
        return accepted

    def _recompute(self) -> None:
        self._visible = FilterEngine.apply(self._cache.all(), self._criteria)

    def _should_prefetch(self) -> bool:
        return (
            self._prefetch_sparse_results
            and not self._disposed
            and len(self._visible) < self._pagination.page_size
            and self._pagination.has_more
            and not self._coordinator.in_flight
        )
