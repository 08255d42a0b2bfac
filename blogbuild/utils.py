import math
import posixpath

WORDS_PER_MINUTE = 200


def calculate_reading_time(body: str, words_per_minute: int = WORDS_PER_MINUTE) -> str:
    minutes = math.ceil(len(body.split()) / words_per_minute) or 1
    return f"{minutes} min"


def slug_from_content_id(content_id: str, category: str) -> str:
    """``code/2024/hello.mdx`` in category ``code`` -> ``2024/hello``."""
    relative = content_id.removeprefix(f"{category}/")
    base, _ = posixpath.splitext(relative)
    if base.endswith("/index"):
        base = base[: -len("/index")]
    return base


def is_valid_tag(tag) -> bool:
    """A tag is a non-blank string that is not made only of dots."""
    if not isinstance(tag, str):
        return False
    return bool(tag.strip().strip("."))
