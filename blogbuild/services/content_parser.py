import logging

import frontmatter
from pydantic import ValidationError

from blogbuild.errors import (
    InvalidFrontMatterError,
    MalformedTagsError,
    MissingFieldError,
    UnknownCategoryError,
)
from blogbuild.schemas.post import CONTENT_MODELS, ContentEntry
from blogbuild.utils import calculate_reading_time, is_valid_tag, slug_from_content_id

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "description", "pubDate")


class ContentParser:
    def parse(self, content_id: str, raw: str, category: str) -> ContentEntry:
        """Parse a content file's front matter and body into a typed entry.

        Any problem with the file is fatal: the build must not silently
        drop or patch up a post.
        """
        model = CONTENT_MODELS.get(category)
        if model is None:
            raise UnknownCategoryError(content_id, category)

        try:
            parsed = frontmatter.loads(raw)
        except Exception as e:
            raise InvalidFrontMatterError(content_id, f"unreadable front matter: {e}") from e
        metadata = parsed.metadata or {}
        body = parsed.content.strip()

        for field in REQUIRED_FIELDS:
            if metadata.get(field) in (None, ""):
                raise MissingFieldError(content_id, field)

        tags = metadata.get("tags")
        if tags is not None and not _is_tag_list(tags):
            raise MalformedTagsError(content_id, tags)

        post_data = {
            "id": content_id,
            "slug": slug_from_content_id(content_id, category),
            "title": metadata["title"],
            "description": metadata["description"],
            "pubDate": metadata["pubDate"],
            "updatedDate": metadata.get("updatedDate"),
            "tags": tags or [],
            "heroImage": metadata.get("heroImage"),
            "externalUrl": metadata.get("url"),
            "draft": metadata.get("draft", False),
            "readingTime": calculate_reading_time(body),
            "body": body,
        }

        try:
            entry = model(**post_data)
        except ValidationError as e:
            raise InvalidFrontMatterError(content_id, _describe(e)) from e

        logger.debug(f"Parsed {content_id} as {category} entry '{entry.slug}'")
        return entry


def _is_tag_list(value) -> bool:
    if not isinstance(value, list):
        return False
    return all(is_valid_tag(tag) for tag in value)


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}"
        for item in error.errors()
    )
