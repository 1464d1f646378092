"""Built-in sample catalog the store is seeded with before hydration."""

from datetime import date

from lms_store.domain.assignment import (
    Assignment,
    AssignmentStatus,
    ReferenceMaterial,
    Rubric,
)
from lms_store.domain.course import (
    CompletionRule,
    CompletionRuleConfig,
    CompletionRuleType,
    ContentItem,
    ContentType,
    Course,
    CourseStatus,
    Instructor,
    Module,
)
from lms_store.domain.quiz import QuestionType, QuizConfig, QuizOption, QuizQuestion
from lms_store.domain.state import StoreState

WATCH_VIDEOS = CompletionRule(type=CompletionRuleType.WATCH_VIDEOS)


def _video(item_id: str, title: str, url: str, duration: str, order: int) -> ContentItem:
    return ContentItem(
        id=item_id,
        type=ContentType.VIDEO,
        title=title,
        url=url,
        duration=duration,
        published=True,
        order=order,
    )


def initial_courses() -> list[Course]:
    return [
        Course(
            id="prog-basics",
            title="Programming Basics",
            description=(
                "Introduction to programming concepts, variables, "
                "control flow, and problem-solving."
            ),
            thumbnail="/image.png",
            estimated_duration="2 weeks",
            status=CourseStatus.PUBLISHED,
            roles=["Full Stack Developer"],
            phase="Foundation",
            course_order=1,
            instructor=Instructor(name="Sarah Chen", role="Senior Developer"),
            skills=["Variables", "Loops", "Functions"],
            path_slug="fullstack",
            last_updated=date(2025, 1, 28),
            enrolled_count=42,
            completion_rate=78,
            created_at=date(2024, 10, 1),
            modules=[
                Module(
                    id="m1",
                    title="Introduction to Programming",
                    order=0,
                    chapters=[
                        _video("c1", "Welcome Video", "https://example.com/v1", "15 min", 0),
                        ContentItem(
                            id="c2",
                            type=ContentType.PDF,
                            title="Syllabus PDF",
                            url="/docs/syllabus.pdf",
                            published=True,
                            order=1,
                        ),
                    ],
                    completion_rules=[WATCH_VIDEOS],
                ),
                Module(
                    id="m2",
                    title="Variables and Data Types",
                    order=1,
                    chapters=[
                        _video("c3", "Variables Overview", "https://example.com/v2", "20 min", 0),
                    ],
                    completion_rules=[WATCH_VIDEOS],
                ),
                Module(
                    id="m3",
                    title="Module Quiz",
                    order=2,
                    completion_rules=[
                        CompletionRule(
                            type=CompletionRuleType.PASS_QUIZ,
                            config=CompletionRuleConfig(pass_score=70),
                        ),
                    ],
                    attached_quiz_id="q1",
                    pass_score=70,
                ),
            ],
        ),
        Course(
            id="rest-api",
            title="REST API Development",
            description="Design and build RESTful APIs.",
            thumbnail="/image.png",
            estimated_duration="3 weeks",
            status=CourseStatus.PUBLISHED,
            roles=["Full Stack Developer"],
            phase="Advanced",
            course_order=5,
            prerequisite_course_ids=["prog-basics"],
            instructor=Instructor(name="Sarah Chen", role="Senior Developer"),
            skills=["REST", "API Design"],
            path_slug="fullstack",
            last_updated=date(2025, 1, 30),
            enrolled_count=28,
            completion_rate=45,
            created_at=date(2024, 11, 15),
            modules=[
                Module(
                    id="m1",
                    title="REST Principles",
                    order=0,
                    chapters=[
                        _video("c1", "REST Overview", "https://example.com/rest", "30 min", 0),
                        ContentItem(
                            id="c2",
                            type=ContentType.LINK,
                            title="API Design Guide",
                            url="https://restfulapi.net",
                            published=True,
                            order=1,
                        ),
                    ],
                    completion_rules=[WATCH_VIDEOS],
                ),
            ],
        ),
        Course(
            id="html-css",
            title="HTML & CSS Fundamentals",
            description="Build structured, styled web pages.",
            thumbnail="/image.png",
            estimated_duration="3 weeks",
            status=CourseStatus.PUBLISHED,
            roles=["Full Stack Developer"],
            phase="Intermediate",
            course_order=3,
            prerequisite_course_ids=["web-fundamentals"],
            instructor=Instructor(name="Emma Davis", role="UI Engineer"),
            skills=["HTML5", "CSS3", "Responsive Design"],
            path_slug="fullstack",
            last_updated=date(2025, 1, 25),
            enrolled_count=35,
            completion_rate=72,
            created_at=date(2024, 12, 1),
            modules=[
                Module(
                    id="m1",
                    title="HTML Document Structure",
                    order=0,
                    chapters=[
                        _video("c1", "HTML Basics", "https://example.com/html", "20 min", 0),
                        ContentItem(
                            id="c2",
                            type=ContentType.PPT,
                            title="Slides",
                            url="/slides/html.pptx",
                            published=True,
                            order=1,
                        ),
                    ],
                    completion_rules=[WATCH_VIDEOS],
                ),
            ],
        ),
        Course(
            id="new-course-draft",
            title="Docker & Containerization",
            description="Container concepts and Docker.",
            thumbnail="/image.png",
            estimated_duration="2 weeks",
            status=CourseStatus.DRAFT,
            roles=["Cloud & DevOps Engineer"],
            phase="Intermediate",
            course_order=6,
            skills=["Docker", "Containers"],
            path_slug="cloud-devops",
            last_updated=date(2025, 1, 31),
            created_at=date(2025, 1, 30),
        ),
    ]


def initial_assignments() -> list[Assignment]:
    return [
        Assignment(
            id="1",
            title="Build REST API for User Management",
            course="REST API Development",
            course_id="rest-api",
            path_slug="fullstack",
            module="API Design & CRUD",
            module_id="m1",
            role="Full Stack",
            type="Coding",
            due_date="31 Jan 2025",
            due_date_iso="2025-01-31",
            status=AssignmentStatus.ASSIGNED,
            description="Create REST APIs to manage users with CRUD operations.",
            instructions=[
                "Implement GET, POST, PUT, PATCH, DELETE endpoints",
                "Add request validation",
                "Include proper error handling",
            ],
            deliverables=["GitHub repository", "API documentation"],
            rubrics=[
                Rubric(criterion="API Design", points=25),
                Rubric(criterion="Code Quality", points=25),
                Rubric(criterion="Documentation", points=25),
                Rubric(criterion="Error Handling", points=25),
            ],
            reference_materials=[
                ReferenceMaterial(label="REST API Best Practices"),
                ReferenceMaterial(label="OpenAPI Specification"),
            ],
            submission_guidelines=(
                "Submit GitHub repo URL. Include README with setup instructions."
            ),
            late_penalty="-10% per day",
        ),
        Assignment(
            id="2",
            title="Binary Tree Traversal Implementation",
            course="Programming Basics",
            course_id="prog-basics",
            path_slug="fullstack",
            module="Data Structures",
            module_id="m2",
            role="Full Stack",
            type="Coding",
            due_date="28 Jan 2025",
            due_date_iso="2025-01-28",
            status=AssignmentStatus.REVIEWED,
            description="Implement in-order, pre-order, and post-order traversal.",
            deliverables=["GitHub repository with working code"],
        ),
        Assignment(
            id="7",
            title="Dockerize Node.js Application",
            course="Docker & Containerization",
            course_id="new-course-draft",
            path_slug="cloud-devops",
            module="Container Basics",
            module_id="m1",
            role="Cloud",
            type="Deployment",
            due_date="3 Feb 2025",
            due_date_iso="2025-02-03",
            status=AssignmentStatus.ASSIGNED,
            deliverables=["Dockerfile", "docker-compose.yml", "GitHub repo"],
        ),
        Assignment(
            id="13",
            title="Module Quiz: REST API Concepts",
            course="REST API Development",
            course_id="rest-api",
            path_slug="fullstack",
            module="API Fundamentals",
            module_id="m0",
            role="Full Stack",
            type="Quiz",
            due_date="31 Jan 2025",
            due_date_iso="2025-01-31",
            status=AssignmentStatus.ASSIGNED,
            attempt_limit=2,
            time_limit_minutes=15,
        ),
    ]


def _single_choice(
    question_id: str,
    question: str,
    options: list[tuple[str, str, bool]],
    explanation: str,
    points: int = 1,
    question_type: QuestionType = QuestionType.SINGLE,
    **extra: str,
) -> QuizQuestion:
    return QuizQuestion(
        id=question_id,
        type=question_type,
        question=question,
        options=[
            QuizOption(id=option_id, text=text, is_correct=is_correct)
            for option_id, text, is_correct in options
        ],
        explanation=explanation,
        points=points,
        **extra,
    )


def initial_quiz_configs() -> dict[str, QuizConfig]:
    rest_quiz = QuizConfig(
        id="13",
        assignment_id="13",
        title="Module Quiz: REST API Concepts",
        course="REST API Development",
        module="API Fundamentals",
        question_count=4,
        time_limit_minutes=15,
        passing_score=70,
        attempt_limit=2,
        instructions=[
            "This quiz contains 4 questions covering REST API fundamentals.",
            "You have 15 minutes to complete the quiz.",
            "The quiz will auto-submit when time expires.",
        ],
        questions=[
            _single_choice(
                "q1",
                "Which HTTP method is used to retrieve a resource without modifying it?",
                [("a", "GET", True), ("b", "POST", False), ("c", "PUT", False), ("d", "DELETE", False)],
                "GET is the standard HTTP method for retrieving data.",
            ),
            _single_choice(
                "q2",
                "What does REST stand for?",
                [
                    ("a", "Representational State Transfer", True),
                    ("b", "Remote Execution State Transfer", False),
                    ("c", "Resource Endpoint Service Technology", False),
                ],
                "REST is an architectural style for distributed systems.",
            ),
            _single_choice(
                "q3",
                "Which of the following are valid HTTP status codes for success?",
                [
                    ("a", "200 OK", True),
                    ("b", "201 Created", True),
                    ("c", "204 No Content", True),
                    ("d", "301 Moved Permanently", False),
                ],
                "200, 201, and 204 indicate success. 301 is a redirect.",
                points=2,
                question_type=QuestionType.MULTI,
            ),
            _single_choice(
                "q4",
                "What does the following code snippet represent?",
                [
                    ("a", "A route that retrieves a user by ID", True),
                    ("b", "A route that creates a new user", False),
                ],
                "GET with an :id parameter retrieves one resource.",
                points=2,
                question_type=QuestionType.CODE,
                code_snippet=(
                    "app.get('/users/:id', (req, res) => {\n"
                    "  res.json(findUser(req.params.id));\n"
                    "});"
                ),
            ),
        ],
    )
    return {rest_quiz.id: rest_quiz}


def load_initial_state() -> StoreState:
    return StoreState(
        courses=initial_courses(),
        assignments=initial_assignments(),
        quiz_configs=initial_quiz_configs(),
    )
