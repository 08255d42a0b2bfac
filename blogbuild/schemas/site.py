from enum import Enum
from typing import Dict, List, Optional, Set, Union

from pydantic import BaseModel, ConfigDict, Field

from blogbuild.schemas.post import BlogPost, CodeSample, ContentEntry


class RouteKind(str, Enum):
    POST = "post"
    TAG = "tag"


class TagListing(BaseModel):
    model_config = ConfigDict(frozen=True)

    tag: str
    posts: List[ContentEntry] = Field(default_factory=list)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    kind: RouteKind
    payload: Union[BlogPost, CodeSample, TagListing]

    @property
    def source(self) -> str:
        """Human readable origin of the route, used in collision reports."""
        if isinstance(self.payload, TagListing):
            return f"tag '{self.payload.tag}'"
        return self.payload.id


class SitePlan(BaseModel):
    posts: List[ContentEntry] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    tag_index: Dict[str, Set[str]] = Field(default_factory=dict)
    routes: List[Route] = Field(default_factory=list)


class ManifestEntry(BaseModel):
    path: str
    kind: RouteKind
    title: str
    source: Optional[str] = None
    external: bool = False
    posts: List[str] = Field(default_factory=list)

    @classmethod
    def from_route(cls, route: Route) -> "ManifestEntry":
        payload = route.payload
        if isinstance(payload, TagListing):
            return cls(
                path=route.path,
                kind=route.kind,
                title=payload.tag,
                posts=[post.id for post in payload.posts],
            )
        return cls(
            path=route.path,
            kind=route.kind,
            title=payload.title,
            source=payload.id,
            external=bool(payload.externalUrl),
        )
