import pytest
from conftest import FakeCourseGateway
from dishka import Provider, Scope, from_context, make_async_container, provide
from fastapi.testclient import TestClient

from lms_store.application.course_gateway import RemoteCourse, RemoteCourseGateway
from lms_store.application.reconciliation import CourseReconciler
from lms_store.bootstrap.configs import Config, CourseApiConfig, StoreConfig
from lms_store.bootstrap.entrypoints.api import create_app
from lms_store.bootstrap.ioc.application import ApplicationProvider
from lms_store.bootstrap.ioc.store import EphemeralStoreProvider
from lms_store.domain.course import CourseStatus


class FakeCourseApiProvider(Provider):
    scope = Scope.APP

    gateway = from_context(RemoteCourseGateway)

    @provide
    def get_reconciler(self, gateway: RemoteCourseGateway) -> CourseReconciler:
        return CourseReconciler(gateway=gateway)


# ============= Fixtures =============

@pytest.fixture
def config():
    return Config(
        store=StoreConfig(persistence_enabled=False),
        course_api=CourseApiConfig(),
    )


@pytest.fixture
def client(config, fake_gateway):
    container = make_async_container(
        FakeCourseApiProvider(),
        EphemeralStoreProvider(),
        ApplicationProvider(),
        context={RemoteCourseGateway: fake_gateway},
    )
    app = create_app(config, container)
    with TestClient(app) as test_client:
        yield test_client


# ============= Tests: healthcheck =============

def test_healthcheck(client):
    """Test liveness and request id header"""
    response = client.get("/healthcheck")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    """Test caller-provided request ids are kept"""
    response = client.get("/healthcheck", headers={"X-Request-ID": "abc"})

    assert response.headers["X-Request-ID"] == "abc"


# ============= Tests: instructor =============

def test_instructor_courses_newest_first(client):
    """Test instructor list includes drafts"""
    response = client.get("/instructor/courses")

    assert response.status_code == 200
    courses = response.json()
    assert courses[0]["id"] == "new-course-draft"
    assert courses[0]["status"] == "draft"
    assert courses[0]["last_updated"] == "2025-01-31"


def test_create_course(client, fake_gateway):
    """Test create goes through the Course API"""
    response = client.post(
        "/instructor/courses",
        json={
            "title": "Kubernetes Fundamentals",
            "roles": ["Cloud & DevOps Engineer"],
            "modules": [
                {
                    "id": "mod-1",
                    "title": "Cluster basics",
                    "order": 3,
                    "chapters": [
                        {
                            "id": "ch-1",
                            "type": "video",
                            "title": "What is a pod",
                            "url": "https://www.youtube.com/watch?v=X48VuDVv0do",
                            "order": 0,
                        },
                    ],
                },
            ],
        },
    )

    assert response.status_code == 201
    course = response.json()
    assert course["id"] == "101"
    assert course["backend_id"] == "101"
    assert course["path_slug"] == "cloud-devops"
    assert course["modules"][0]["order"] == 0
    assert "101" in fake_gateway.courses


def test_create_course_validation_error(client):
    """Test empty title is rejected"""
    response = client.post("/instructor/courses", json={"title": ""})

    assert response.status_code == 422


def test_create_course_backend_down(client, fake_gateway):
    """Test Course API outage maps to 502"""
    fake_gateway.offline = True

    response = client.post("/instructor/courses", json={"title": "Lost"})

    assert response.status_code == 502
    assert "unreachable" in response.json()["detail"]


def test_update_unknown_course(client):
    """Test 404 mapping"""
    response = client.patch("/instructor/courses/missing", json={"title": "x"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found by id='missing'"


def test_set_modules(client):
    """Test module replacement"""
    response = client.put(
        "/instructor/courses/html-css/modules",
        json={"modules": [{"id": "m9", "title": "Flexbox", "order": 4}]},
    )

    assert response.status_code == 200
    modules = response.json()["modules"]
    assert [(m["id"], m["order"]) for m in modules] == [("m9", 0)]


def test_publish_then_visible_to_learners(client, fake_gateway):
    """Test published draft shows on its learning path"""
    response = client.post("/instructor/courses/new-course-draft/publish")

    assert response.status_code == 200
    assert response.json()["status"] == "published"
    assert response.json()["backend_id"] == "101"

    path = client.get("/learner/paths/cloud-devops/courses").json()
    assert [c["id"] for c in path] == ["new-course-draft"]


def test_archive_and_delete(client):
    """Test archive then delete of a local course"""
    response = client.post("/instructor/courses/html-css/archive")
    assert response.status_code == 200
    assert response.json()["status"] == "archived"

    response = client.delete("/instructor/courses/html-css")
    assert response.status_code == 204

    response = client.get("/learner/courses/html-css")
    assert response.status_code == 404


def test_update_course_rejects_empty_roles(client):
    """Test an empty role list is a validation error"""
    response = client.patch("/instructor/courses/html-css", json={"roles": []})

    assert response.status_code == 422


# ============= Tests: learner =============

def test_learner_path_courses(client):
    """Test only published fullstack courses are listed"""
    response = client.get("/learner/paths/fullstack/courses")

    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == ["prog-basics", "rest-api", "html-css"]


def test_learner_cannot_open_draft(client):
    """Test draft courses are not served to learners"""
    response = client.get("/learner/courses/new-course-draft")

    assert response.status_code == 404
    assert response.json()["detail"] == "Course not found by id='new-course-draft'"

    client.post("/instructor/courses/new-course-draft/publish")
    assert client.get("/learner/courses/new-course-draft").status_code == 200


def test_learner_course_by_id(client):
    """Test course detail with nested modules"""
    response = client.get("/learner/courses/prog-basics")

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Programming Basics"
    assert body["modules"][0]["chapters"]


# ============= Tests: assessments =============

def test_assignments(client):
    """Test list, get, update and duplicate add"""
    assignments = client.get("/assignments").json()
    assert [a["id"] for a in assignments] == ["1", "2", "7", "13"]

    response = client.patch("/assignments/2", json={"ai_feedback": "Solid traversal"})
    assert response.status_code == 200
    assert response.json()["ai_feedback"] == "Solid traversal"

    assert client.get("/assignments/2").json()["ai_feedback"] == "Solid traversal"
    assert client.get("/assignments/missing").status_code == 404

    duplicate = {**assignments[0]}
    response = client.post("/assignments", json=duplicate)
    assert response.status_code == 409


def test_add_assignment(client):
    """Test a new assignment is stored"""
    response = client.post(
        "/assignments",
        json={
            "id": "99",
            "title": "Write integration tests",
            "course": "REST API Development",
            "course_id": "rest-api",
            "path_slug": "fullstack",
            "module": "REST Principles",
            "module_id": "m1",
            "role": "Full Stack Developer",
            "type": "Coding",
            "due_date": "Mar 10, 2026",
            "due_date_iso": "2026-03-10",
        },
    )

    assert response.status_code == 201
    assert response.json()["status"] == "Assigned"
    assert client.get("/assignments/99").status_code == 200


def test_quizzes(client):
    """Test quiz listing and upsert by path id"""
    quizzes = client.get("/quizzes").json()
    assert [q["id"] for q in quizzes] == ["13"]

    quiz = client.get("/quizzes/13").json()
    response = client.put("/quizzes/14", json={**quiz, "assignment_id": "14"})

    assert response.status_code == 200
    assert response.json()["id"] == "14"
    assert client.get("/quizzes/14").json()["assignment_id"] == "14"
    assert client.get("/quizzes/missing").status_code == 404


def test_available_assessments(client):
    """Test quizzes first, quiz assignments not repeated"""
    items = client.get("/assessments").json()

    assert items[0] == {"id": "13", "title": "Module Quiz: REST API Concepts", "type": "quiz"}
    assert [i["id"] for i in items if i["type"] == "assignment"] == ["1", "2", "7"]


# ============= Tests: sync =============

def test_sync_courses(client, fake_gateway):
    """Test manual sync appends remote courses"""
    fake_gateway.courses["42"] = RemoteCourse(
        id="42",
        title="Remote course",
        status=CourseStatus.PUBLISHED,
        tags=["QA Engineer"],
    )

    response = client.post("/sync/courses")

    assert response.status_code == 200
    body = response.json()
    assert body["new_courses"] == 1
    assert body["courses_after"] == body["courses_before"] + 1
    assert [c["id"] for c in client.get("/learner/paths/qa/courses").json()] == ["42"]
