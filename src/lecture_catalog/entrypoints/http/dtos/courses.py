from pydantic import BaseModel


class CourseDTO(BaseModel):
    id: str
    name: str
    code: str


class AcademicLevelDTO(BaseModel):
    id: str
    name: str
    courses: list[CourseDTO]


class CourseCatalogResponseDTO(BaseModel):
    levels: list[AcademicLevelDTO]
