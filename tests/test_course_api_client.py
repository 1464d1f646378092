import json

import httpx
import pytest

from lms_store.application.course_gateway import CourseCreateRequest, CourseUpdateRequest
from lms_store.application.exceptions.base import (
    RemoteCourseApiError,
    RemoteCoursePayloadError,
    RemoteCourseUnavailableError,
)
from lms_store.bootstrap.configs import CourseApiConfig
from lms_store.domain.course import CourseStatus
from lms_store.infrastructure.http.course_api_client import (
    HttpCourseGateway,
    build_http_client,
)
from lms_store.infrastructure.serialization import build_retort

BASE_URL = "http://course-api.test"

REMOTE_COURSE = {
    "id": 42,
    "title": "Kubernetes Fundamentals",
    "description": "Pods and services",
    "videoUrl": "https://www.youtube.com/watch?v=X48VuDVv0do",
    "status": "published",
    "tags": ["Cloud & DevOps Engineer"],
    "createdBy": {"id": 7, "email": "jane@lms.dev", "name": "Jane", "role": "instructor"},
    "createdAt": "2026-01-10T08:00:00.000Z",
    "updatedAt": "2026-02-15T10:30:00.000Z",
    "overview": "not modelled locally",
}


def make_gateway(handler):
    client = httpx.AsyncClient(
        base_url=BASE_URL,
        transport=httpx.MockTransport(handler),
    )
    return HttpCourseGateway(client=client, retort=build_retort())


# ============= Tests: client setup =============

def test_build_http_client_sets_bearer_token():
    """Test token goes to the Authorization header"""
    client = build_http_client(CourseApiConfig(base_url=BASE_URL, token="secret"))

    assert client.headers["Authorization"] == "Bearer secret"
    assert str(client.base_url).startswith(BASE_URL)


def test_build_http_client_without_token():
    """Test no Authorization header when no token is configured"""
    client = build_http_client(CourseApiConfig(base_url=BASE_URL))

    assert "Authorization" not in client.headers
    assert client.timeout.read == 30.0


# ============= Tests: list_courses =============

@pytest.mark.asyncio
async def test_list_courses_parses_page():
    """Test camelCase page with numeric ids"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={"items": [REMOTE_COURSE], "page": 1, "limit": 100, "total": 1},
        )

    gateway = make_gateway(handler)

    page = await gateway.list_courses(limit=100)

    assert seen["path"] == "/courses"
    assert seen["params"] == {"page": "1", "limit": "100"}
    assert page.total == 1
    course = page.items[0]
    assert course.id == "42"
    assert course.status is CourseStatus.PUBLISHED
    assert course.video_url == "https://www.youtube.com/watch?v=X48VuDVv0do"
    assert course.created_by.id == "7"
    assert course.created_by.name == "Jane"
    assert course.updated_at == "2026-02-15T10:30:00.000Z"


@pytest.mark.asyncio
async def test_list_courses_passes_filters():
    """Test search and status filters reach the query string"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json={"items": [], "page": 2, "limit": 5, "total": 0})

    gateway = make_gateway(handler)

    await gateway.list_courses(page=2, limit=5, search="kube", status=CourseStatus.DRAFT)

    assert seen["params"] == {"page": "2", "limit": "5", "search": "kube", "status": "draft"}


@pytest.mark.asyncio
async def test_list_courses_accepts_bare_list():
    """Test unpaginated list responses"""
    gateway = make_gateway(lambda request: httpx.Response(200, json=[REMOTE_COURSE]))

    page = await gateway.list_courses()

    assert [c.id for c in page.items] == ["42"]
    assert page.total == 1


# ============= Tests: errors =============

@pytest.mark.asyncio
async def test_error_status_raises_api_error():
    """Test non-2xx responses keep status and detail"""
    gateway = make_gateway(
        lambda request: httpx.Response(404, json={"message": "Course not found"}),
    )

    with pytest.raises(RemoteCourseApiError) as exc_info:
        await gateway.get_course("404")

    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Course not found"


@pytest.mark.asyncio
async def test_transport_error_raises_unavailable():
    """Test connection failures"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = make_gateway(handler)

    with pytest.raises(RemoteCourseUnavailableError):
        await gateway.list_courses()


@pytest.mark.asyncio
async def test_timeout_raises_unavailable():
    """Test timeouts"""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    gateway = make_gateway(handler)

    with pytest.raises(RemoteCourseUnavailableError) as exc_info:
        await gateway.get_course("42")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_malformed_payload_raises_payload_error():
    """Test undecodable bodies"""
    gateway = make_gateway(lambda request: httpx.Response(200, json={"items": "nope"}))

    with pytest.raises(RemoteCoursePayloadError):
        await gateway.list_courses()


@pytest.mark.asyncio
async def test_non_json_payload_raises_payload_error():
    """Test HTML error pages served with 200"""
    gateway = make_gateway(lambda request: httpx.Response(200, text="<html></html>"))

    with pytest.raises(RemoteCoursePayloadError):
        await gateway.get_course("42")


# ============= Tests: writes =============

@pytest.mark.asyncio
async def test_create_course_posts_camel_case_body():
    """Test request body omits unset fields"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["body"] = json.loads(request.content)
        return httpx.Response(201, json=REMOTE_COURSE)

    gateway = make_gateway(handler)

    course = await gateway.create_course(
        CourseCreateRequest(
            title="Kubernetes Fundamentals",
            video_url="https://www.youtube.com/watch?v=X48VuDVv0do",
            status=CourseStatus.PUBLISHED,
            tags=["Cloud & DevOps Engineer"],
        ),
    )

    assert seen["method"] == "POST"
    assert seen["body"] == {
        "title": "Kubernetes Fundamentals",
        "videoUrl": "https://www.youtube.com/watch?v=X48VuDVv0do",
        "status": "published",
        "tags": ["Cloud & DevOps Engineer"],
    }
    assert course.id == "42"


@pytest.mark.asyncio
async def test_update_course_patches_status():
    """Test PATCH goes to the course resource"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={**REMOTE_COURSE, "status": "archived"})

    gateway = make_gateway(handler)

    course = await gateway.update_course("42", CourseUpdateRequest(status=CourseStatus.ARCHIVED))

    assert seen == {"method": "PATCH", "path": "/courses/42", "body": {"status": "archived"}}
    assert course.status is CourseStatus.ARCHIVED


@pytest.mark.asyncio
async def test_delete_course():
    """Test DELETE with empty response body"""
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        return httpx.Response(204)

    gateway = make_gateway(handler)

    await gateway.delete_course("42")

    assert seen == {"method": "DELETE", "path": "/courses/42"}
