"""Page cursor state machine for the lecture catalog.

States:
    IDLE       -- ready to fetch the current page
    FETCHING   -- a fetch is outstanding; further requests are no-ops
    EXHAUSTED  -- the last page came back short; only a reset or a full
                  reload leaves this state

Every fetch is tagged with the cache generation it was issued in. A result
that arrives after the generation moved on (reset, forced reload, dispose)
is discarded instead of ingested.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from lecture_catalog.catalog.cache import CatalogCache
from lecture_catalog.domain.errors import DomainError
from lecture_catalog.domain.lecture import DEFAULT_PAGE_SIZE, LectureRecord, Paging
from lecture_catalog.ports.lecture_source import RemoteLectureSource

logger = logging.getLogger(__name__)


class PaginationPhase(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True, slots=True)
class PaginationState:
    page: int
    phase: PaginationPhase
    generation: int

    @property
    def has_more(self) -> bool:
        return self.phase is not PaginationPhase.EXHAUSTED

    @property
    def in_flight(self) -> bool:
        return self.phase is PaginationPhase.FETCHING


@dataclass(frozen=True, slots=True)
class PageResult:
    """Outcome of one accepted page fetch."""

    page: int
    generation: int
    fetched: int
    added: int
    exhausted: bool


class PaginationController:
    """
    Issues page fetches against the remote source and feeds the cache.

    The page cursor only advances after a page has been ingested, so page N
    is always in the cache before page N+1 is requested. A failed fetch
    leaves the cache and the cursor untouched.
    """

    def __init__(
        self,
        source: RemoteLectureSource,
        cache: CatalogCache,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        Paging(page=1, page_size=page_size).validate()

        self._source = source
        self._cache = cache
        self._page_size = page_size
        self._page = 1
        self._phase = PaginationPhase.IDLE
        self._generation = 0

    @property
    def state(self) -> PaginationState:
        return PaginationState(page=self._page, phase=self._phase, generation=self._generation)

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def phase(self) -> PaginationPhase:
        return self._phase

    @property
    def has_more(self) -> bool:
        return self._phase is not PaginationPhase.EXHAUSTED

    @property
    def in_flight(self) -> bool:
        return self._phase is PaginationPhase.FETCHING

    async def load_next(self) -> PageResult | None:
        """
        Fetch and ingest the current page.

        Returns:
            PageResult, or None if the request was a no-op (already fetching,
            exhausted) or its result went stale while it was outstanding

        Raises:
            SourceUnavailableError: If the source fails for the current generation
            Exception: Non-domain errors propagate even when the fetch went stale
        """
        if self._phase is not PaginationPhase.IDLE:
            logger.debug("Ignoring page request", extra={"phase": self._phase.value})
            return None

        page = self._page
        generation = self._generation
        self._phase = PaginationPhase.FETCHING

        try:
            records = await self._source.fetch_page(page, self._page_size)
        except DomainError:
            if generation != self._generation:
                logger.debug(
                    "Discarding failure of stale page fetch",
                    exc_info=True,
                    extra={"page": page, "generation": generation},
                )
                return None
            self._phase = PaginationPhase.IDLE
            raise
        except Exception:
            if generation == self._generation:
                self._phase = PaginationPhase.IDLE
            raise

        if generation != self._generation:
            logger.debug("Discarding stale page", extra={"page": page, "generation": generation})
            return None

        return self._accept(records, page=page, generation=generation, replace=False)

    async def reload_first(self, force: bool = False) -> PageResult | None:
        """
        Start a new cache generation from page 1.

        The cache is only replaced once page 1 has arrived, so a failed
        reload keeps the records and cursor the user already had.

        Args:
            force: Take over even if a fetch is outstanding; that fetch's
                   result will be discarded

        Returns:
            PageResult, or None if the request was a no-op or went stale

        Raises:
            SourceUnavailableError: If the source fails for the current generation
            Exception: Non-domain errors propagate even when the fetch went stale
        """
        if self._phase is PaginationPhase.FETCHING and not force:
            logger.debug("Ignoring reload while a page is outstanding")
            return None

        previous_phase = (
            PaginationPhase.IDLE if self._phase is PaginationPhase.FETCHING else self._phase
        )
        self._generation += 1
        generation = self._generation
        self._phase = PaginationPhase.FETCHING

        try:
            records = await self._source.fetch_page(1, self._page_size)
        except DomainError:
            if generation != self._generation:
                logger.debug(
                    "Discarding failure of stale reload",
                    exc_info=True,
                    extra={"generation": generation},
                )
                return None
            self._phase = previous_phase
            raise
        except Exception:
            if generation == self._generation:
                self._phase = previous_phase
            raise

        if generation != self._generation:
            logger.debug("Discarding stale reload", extra={"generation": generation})
            return None

        return self._accept(records, page=1, generation=generation, replace=True)

    def reset(self) -> None:
        """Clear the cache and return to page 1 in a fresh generation."""
        self._generation += 1
        self._cache.reset()
        self._page = 1
        self._phase = PaginationPhase.IDLE

    def invalidate(self) -> None:
        """Orphan any outstanding fetch without touching the cache."""
        self._generation += 1
        if self._phase is PaginationPhase.FETCHING:
            self._phase = PaginationPhase.IDLE

    def _accept(
        self,
        records: list[LectureRecord],
        page: int,
        generation: int,
        replace: bool,
    ) -> PageResult:
        if replace:
            self._cache.reset()
        added = self._cache.ingest(records)

        # A short page means the collection has nothing beyond it
        exhausted = len(records) < self._page_size
        self._page = page + 1
        self._phase = PaginationPhase.EXHAUSTED if exhausted else PaginationPhase.IDLE

        return PageResult(
            page=page,
            generation=generation,
            fetched=len(records),
            added=added,
            exhausted=exhausted,
        )
