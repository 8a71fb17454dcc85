from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Course:
    id: str
    name: str
    code: str


@dataclass(frozen=True, slots=True)
class AcademicLevel:
    id: str
    name: str
    courses: tuple[Course, ...]


# ==============================================================================
# Course Taxonomy
# ==============================================================================

FOUNDATION = AcademicLevel(
    id="foundation",
    name="Foundation",
    courses=(
        Course(id="Python", name="Python", code="F101"),
        Course(id="Math-1", name="Math-1", code="F102"),
        Course(id="CT", name="CT", code="F103"),
        Course(id="Math-2", name="Math-2", code="F104"),
        Course(id="Stats-1", name="Stats-1", code="F105"),
        Course(id="Stats-2", name="Stats-2", code="F106"),
        Course(id="English-1", name="English-1", code="F107"),
        Course(id="English-2", name="English-2", code="F108"),
    ),
)

DIPLOMA = AcademicLevel(
    id="diploma",
    name="Diploma",
    courses=(
        Course(id="JAVA", name="JAVA", code="D201"),
        Course(id="PDSA", name="PDSA", code="D202"),
        Course(id="DBMS", name="DBMS", code="D203"),
        Course(id="App-Dev-1", name="App-Dev-1", code="D204"),
        Course(id="App-Dev-2", name="App-Dev-2", code="D205"),
        Course(id="SC", name="SC", code="D206"),
        Course(id="TDS", name="TDS", code="D207"),
        Course(id="MLF", name="MLF", code="D208"),
        Course(id="MLP", name="MLP", code="D209"),
        Course(id="MLT", name="MLT", code="D210"),
        Course(id="BDMS", name="BDMS", code="D211"),
        Course(id="BA", name="BA", code="D212"),
    ),
)

BSC = AcademicLevel(
    id="bsc",
    name="BSc",
    courses=(
        Course(id="bsc-1", name="Artificial Intelligence", code="B301"),
        Course(id="bsc-2", name="Machine Learning", code="B302"),
        Course(id="bsc-3", name="Cloud Computing", code="B303"),
        Course(id="bsc-4", name="Big Data Analytics", code="B304"),
        Course(id="bsc-5", name="Computer Graphics", code="B305"),
        Course(id="bsc-6", name="Cybersecurity", code="B306"),
        Course(id="bsc-7", name="Distributed Systems", code="B307"),
        Course(id="bsc-8", name="Software Project Management", code="B308"),
    ),
)

BS = AcademicLevel(
    id="bs",
    name="BS",
    courses=(
        Course(id="bs-1", name="Software Eng.", code="BS401"),
        Course(id="bs-2", name="Software Testing", code="BS402"),
        Course(id="bs-3", name="AI: Search Method", code="BS403"),
        Course(id="bs-4", name="Deep Learning", code="BS404"),
        Course(id="bs-5", name="SFPG", code="BS405"),
        Course(id="bs-6", name="BDBN", code="BS406"),
        Course(id="bs-7", name="DVD", code="BS407"),
        Course(id="bs-8", name="STML", code="BS408"),
    ),
)

ACADEMIC_LEVELS: tuple[AcademicLevel, ...] = (FOUNDATION, DIPLOMA, BSC, BS)

_COURSES_BY_ID: dict[str, Course] = {
    course.id: course for level in ACADEMIC_LEVELS for course in level.courses
}


def all_courses() -> list[Course]:
    """All courses in taxonomy order (level by level)."""
    return [course for level in ACADEMIC_LEVELS for course in level.courses]


def find_course(course_id: str) -> Course | None:
    return _COURSES_BY_ID.get(course_id)


def is_known_course(course_id: str) -> bool:
    return course_id in _COURSES_BY_ID
