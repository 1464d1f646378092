from collections.abc import Iterable

DEFAULT_PATH_SLUG = "fullstack"

ROLE_TAG_TO_PATH_SLUG: dict[str, str] = {
    "Full Stack Developer": "fullstack",
    "Full Stack Web Development": "fullstack",
    "UI / UX Designer": "uiux",
    "Data Analyst / Engineer": "data-analyst",
    "Cloud & DevOps Engineer": "cloud-devops",
    "QA Engineer": "qa",
    "Digital Marketing": "digital-marketing",
}


def infer_path_slug(role_tags: Iterable[str]) -> str:
    """First tag with a known path wins"""
    for tag in role_tags:
        path_slug = ROLE_TAG_TO_PATH_SLUG.get(tag.strip())
        if path_slug is not None:
            return path_slug
    return DEFAULT_PATH_SLUG
