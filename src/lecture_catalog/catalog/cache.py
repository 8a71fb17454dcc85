from __future__ import annotations

from typing import Iterable

from lecture_catalog.domain.lecture import LectureRecord


class CatalogCache:
    """
    Append-only store of the lectures fetched in the current generation.

    - Insertion order is fetch arrival order (rank order under a stable sort)
    - Records are deduplicated by id; the first-seen copy wins
    - Existing entries are never reordered or replaced
    """

    def __init__(self) -> None:
        self._records: list[LectureRecord] = []
        self._ids: set[str] = set()

    def ingest(self, page: Iterable[LectureRecord]) -> int:
        """
        Append the records not already cached.

        Args:
            page: Records in arrival order (may overlap earlier pages)

        Returns:
            Number of records newly added
        """
        added = 0
        for record in page:
            if record.id in self._ids:
                continue
            self._ids.add(record.id)
            self._records.append(record)
            added += 1
        return added

    def reset(self) -> None:
        self._records.clear()
        self._ids.clear()

    def all(self) -> tuple[LectureRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._ids
