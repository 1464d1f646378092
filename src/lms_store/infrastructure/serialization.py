from typing import Any

from adaptix import NameStyle, P, Retort, loader, name_mapping

from lms_store.application.course_gateway import (
    CourseCreateRequest,
    CourseUpdateRequest,
    RemoteCourse,
    RemoteCourseAuthor,
)
from lms_store.domain.external_ref import normalize_ref


def _remote_id(value: Any) -> str:
    normalized = normalize_ref(value)
    if normalized is None:
        raise TypeError("Remote id must not be empty")
    return normalized


def build_retort() -> Retort:
    """camelCase JSON for both the persisted blob and the Course API"""
    return Retort(
        recipe=[
            loader(P[RemoteCourse].id, _remote_id),
            loader(P[RemoteCourseAuthor].id, _remote_id),
            name_mapping(
                CourseCreateRequest,
                name_style=NameStyle.CAMEL,
                omit_default=True,
            ),
            name_mapping(
                CourseUpdateRequest,
                name_style=NameStyle.CAMEL,
                omit_default=True,
            ),
            name_mapping(name_style=NameStyle.CAMEL),
        ],
    )
