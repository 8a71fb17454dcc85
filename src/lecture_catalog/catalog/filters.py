from __future__ import annotations

from typing import Sequence

from lecture_catalog.domain.lecture import FilterCriteria, LectureRecord


class FilterEngine:
    """
    Applies filter criteria to cached lectures.

    - AND semantics across week, course and text query
    - Unset fields match everything
    - Week and course: exact match
    - Query: case-insensitive substring of title or instructor
    - Input order is preserved; nothing is fetched
    """

    @staticmethod
    def apply(records: Sequence[LectureRecord], criteria: FilterCriteria) -> list[LectureRecord]:
        if criteria.is_empty():
            return list(records)
        return [record for record in records if FilterEngine.matches(record, criteria)]

    @staticmethod
    def matches(record: LectureRecord, criteria: FilterCriteria) -> bool:
        if criteria.week is not None and record.week_number != criteria.week:
            return False
        if criteria.course_id is not None and record.course_id != criteria.course_id:
            return False

        query = criteria.normalized_query
        if query is not None and not (
            query in record.title.lower() or query in record.instructor.lower()
        ):
            return False
        return True
