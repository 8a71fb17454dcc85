from lecture_catalog.infra.db.models.base import Base
from lecture_catalog.infra.db.models.lecture import LectureRow

__all__ = ["Base", "LectureRow"]
