import datetime
from typing import Annotated, Dict, List, Literal, Optional, Type, Union

from dateutil import parser as dateutil_parser
from pydantic import BaseModel, ConfigDict, Field, field_validator

from blogbuild.utils import is_valid_tag


def to_aware_datetime(value) -> Optional[datetime.datetime]:
    """Normalise a front-matter date to a timezone-aware datetime (naive -> UTC).

    Strings go through ``dateutil`` so both ISO-8601 and ``Jul 08 2022``
    style dates are accepted.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime.combine(value, datetime.datetime.min.time())
    elif isinstance(value, str):
        try:
            parsed = dateutil_parser.parse(value.strip())
        except OverflowError as e:
            raise ValueError(f"date out of range: {value!r}") from e
    else:
        raise ValueError(f"unsupported date value {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


class PostFields(BaseModel):
    """Fields shared by every content category."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    title: str
    description: str
    pubDate: datetime.datetime
    updatedDate: Optional[datetime.datetime] = None
    tags: List[str] = Field(default_factory=list)
    heroImage: Optional[str] = None
    externalUrl: Optional[str] = None
    draft: bool = False
    readingTime: Optional[str] = None
    body: str = ""

    @field_validator("pubDate", "updatedDate", mode="before")
    @classmethod
    def normalize_dates(cls, value):
        return to_aware_datetime(value)

    @field_validator("tags", mode="before")
    @classmethod
    def check_tags(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise ValueError("tags must be a list")
        for tag in value:
            if not is_valid_tag(tag):
                raise ValueError(f"invalid tag {tag!r}")
        return list(value)


class BlogPost(PostFields):
    category: Literal["blog"] = "blog"


class CodeSample(PostFields):
    category: Literal["code"] = "code"


ContentEntry = Annotated[Union[BlogPost, CodeSample], Field(discriminator="category")]

CONTENT_MODELS: Dict[str, Type[PostFields]] = {
    "blog": BlogPost,
    "code": CodeSample,
}
