"""Demo-content workarounds for the built-in sample catalog.

None of this is a property of courses in general: it only protects the
shipped sample courses from stale persisted snapshots and hides retired
sample titles from learners.
"""

from dataclasses import dataclass, field

PINNED_SAMPLE_COURSE_IDS = frozenset({"prog-basics", "rest-api"})

RETIRED_SAMPLE_TITLES = frozenset(
    {
        "Web Fundamentals",
        "Introduction to Programming (Legacy)",
        "JavaScript Essentials (Legacy)",
    },
)


@dataclass(frozen=True, slots=True)
class SampleContentPolicy:
    pinned_course_ids: frozenset[str] = field(
        default=PINNED_SAMPLE_COURSE_IDS,
    )
    retired_titles: frozenset[str] = field(default=RETIRED_SAMPLE_TITLES)

    def is_pinned(self, course_id: str) -> bool:
        return course_id in self.pinned_course_ids

    def is_retired_title(self, title: str) -> bool:
        return title in self.retired_titles
