import logging
from dataclasses import dataclass
from typing import Any

import httpx
from adaptix import Retort
from adaptix.load_error import AggregateLoadError, LoadError

from lms_store.application.course_gateway import (
    CourseCreateRequest,
    CourseUpdateRequest,
    RemoteCourse,
    RemoteCourseGateway,
    RemoteCoursePage,
)
from lms_store.application.exceptions.base import (
    RemoteCourseApiError,
    RemoteCoursePayloadError,
    RemoteCourseUnavailableError,
)
from lms_store.bootstrap.configs import CourseApiConfig
from lms_store.domain.course import CourseStatus

logger = logging.getLogger(__name__)


def build_http_client(config: CourseApiConfig) -> httpx.AsyncClient:
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if config.token:
        headers["Authorization"] = f"Bearer {config.token}"

    return httpx.AsyncClient(
        base_url=config.base_url,
        headers=headers,
        timeout=httpx.Timeout(config.timeout),
        follow_redirects=True,
    )


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        return str(payload.get("detail") or payload.get("message") or payload)
    return str(payload)


@dataclass(slots=True, frozen=True)
class HttpCourseGateway(RemoteCourseGateway):
    client: httpx.AsyncClient
    retort: Retort

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_data: dict[str, Any] | None = None,
    ) -> httpx.Response:
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self.client.request(
                method,
                path,
                params=params,
                json=json_data,
            )
        except httpx.TimeoutException as e:
            raise RemoteCourseUnavailableError(detail=f"{method} {path} timed out") from e
        except httpx.RequestError as e:
            raise RemoteCourseUnavailableError(detail=f"{method} {path}: {e}") from e

        if response.is_error:
            logger.warning(
                "Course API %s %s -> %s",
                method,
                path,
                response.status_code,
            )
            raise RemoteCourseApiError(
                status_code=response.status_code,
                detail=_error_detail(response),
            )

        logger.debug("Course API %s %s -> %s", method, path, response.status_code)
        return response

    def _load(self, response: httpx.Response, tp: Any) -> Any:
        try:
            payload = response.json()
            if tp is RemoteCoursePage and isinstance(payload, list):
                # Some deployments serve the bare list without pagination
                items = self.retort.load(payload, list[RemoteCourse])
                return RemoteCoursePage(items=items, total=len(items))
            return self.retort.load(payload, tp)
        except (ValueError, TypeError, LoadError, AggregateLoadError) as e:
            raise RemoteCoursePayloadError(
                status_code=response.status_code,
                detail=repr(e),
            ) from e

    async def list_courses(
        self,
        page: int = 1,
        limit: int = 20,
        search: str | None = None,
        status: CourseStatus | None = None,
    ) -> RemoteCoursePage:
        response = await self._request(
            "GET",
            "/courses",
            params={
                "page": page,
                "limit": limit,
                "search": search,
                "status": status.value if status is not None else None,
            },
        )

        return self._load(response, RemoteCoursePage)

    async def get_course(self, course_id: str) -> RemoteCourse:
        response = await self._request("GET", f"/courses/{course_id}")
        return self._load(response, RemoteCourse)

    async def create_course(self, request: CourseCreateRequest) -> RemoteCourse:
        response = await self._request(
            "POST",
            "/courses",
            json_data=self.retort.dump(request),
        )
        course = self._load(response, RemoteCourse)
        logger.info("Course created on backend: %s", course.id)
        return course

    async def update_course(
        self,
        course_id: str,
        request: CourseUpdateRequest,
    ) -> RemoteCourse:
        response = await self._request(
            "PATCH",
            f"/courses/{course_id}",
            json_data=self.retort.dump(request),
        )
        return self._load(response, RemoteCourse)

    async def delete_course(self, course_id: str) -> None:
        await self._request("DELETE", f"/courses/{course_id}")
        logger.info("Course deleted on backend: %s", course_id)
