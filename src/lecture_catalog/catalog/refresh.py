from __future__ import annotations

import logging
from enum import Enum
from typing import Awaitable, Callable

from lecture_catalog.catalog.pagination import PageResult
from lecture_catalog.domain.errors import DomainError

logger = logging.getLogger(__name__)


class FetchTrigger(str, Enum):
    INITIAL = "initial"
    LOAD_MORE = "load_more"
    MANUAL_REFRESH = "manual_refresh"
    RECORD_CREATED = "record_created"
    RETRY = "retry"


FetchOperation = Callable[[], Awaitable[PageResult | None]]


class RefreshCoordinator:
    """
    Serializes every fetch-triggering event into one logical operation.

    - At most one fetch is in flight; triggers arriving meanwhile are dropped,
      not queued
    - A forced trigger takes over; the fetch it superseded can no longer
      touch the flags
    - Failures are kept in ``error`` until the next attempt starts; there is
      no automatic retry
    """

    def __init__(self) -> None:
        self._active_token: int | None = None
        self._next_token = 0
        self._has_loaded = False
        self._is_loading = False
        self._is_refreshing = False
        self._error: str | None = None
        self._failed_trigger: FetchTrigger | None = None

    @property
    def is_loading(self) -> bool:
        """True while fetching before any fetch of this session succeeded."""
        return self._is_loading

    @property
    def is_refreshing(self) -> bool:
        """True while fetching after the catalog has loaded once."""
        return self._is_refreshing

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def in_flight(self) -> bool:
        return self._active_token is not None

    @property
    def failed_trigger(self) -> FetchTrigger | None:
        """Trigger of the last attempt if it failed, else None."""
        return self._failed_trigger

    async def run(
        self,
        trigger: FetchTrigger,
        operation: FetchOperation,
        force: bool = False,
    ) -> bool:
        """
        Run a fetch operation unless another one is in flight.

        Args:
            trigger: What caused the fetch (for retry bookkeeping and logs)
            operation: Coroutine factory performing the fetch
            force: Run even if a fetch is in flight

        Returns:
            True if a page was accepted, False if the trigger was dropped,
            the fetch failed, or its result was discarded

        Raises:
            Exception: Non-domain errors propagate after the flags are reset
        """
        if self._active_token is not None and not force:
            logger.debug("Dropping fetch trigger", extra={"trigger": trigger.value})
            return False

        self._next_token += 1
        token = self._next_token
        self._active_token = token

        self._error = None
        self._is_loading = not self._has_loaded
        self._is_refreshing = self._has_loaded

        try:
            result = await operation()
        except DomainError as exc:
            if self._active_token == token:
                self._error = exc.message
                # A failed retry keeps the operation kind it was retrying
                if trigger is not FetchTrigger.RETRY or self._failed_trigger is None:
                    self._failed_trigger = trigger
                logger.warning(
                    "Lecture fetch failed",
                    extra={
                        "trigger": trigger.value,
                        "error_code": exc.error_code,
                        "reason": exc.message,
                    },
                )
            return False
        finally:
            if self._active_token == token:
                self._active_token = None
                self._is_loading = False
                self._is_refreshing = False

        if result is None:
            return False

        if not self._has_loaded:
            logger.info("Catalog loaded", extra={"trigger": trigger.value, "records": result.added})
        self._has_loaded = True
        self._failed_trigger = None
        return True
