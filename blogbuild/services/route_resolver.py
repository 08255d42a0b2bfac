import logging
import urllib.parse
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from blogbuild.errors import InvalidTagError, RouteCollisionError, UnknownCategoryError
from blogbuild.schemas.post import ContentEntry
from blogbuild.schemas.site import Route, RouteKind, TagListing
from blogbuild.services.tag_filter import filter_by_tag
from blogbuild.utils import is_valid_tag

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES: Dict[str, str] = {"blog": "", "code": "code"}


def _join_path(*parts: str) -> str:
    segments = [part.strip("/") for part in parts if part and part.strip("/")]
    return "/" + "/".join(segments) + "/" if segments else "/"


def post_path(entry: ContentEntry, prefixes: Optional[Mapping[str, str]] = None) -> str:
    if entry.externalUrl:
        return entry.externalUrl
    prefixes = DEFAULT_PREFIXES if prefixes is None else prefixes
    if entry.category not in prefixes:
        raise UnknownCategoryError(entry.id, entry.category)
    return _join_path(prefixes[entry.category], entry.slug)


def tag_path(tag: str, tags_prefix: str = "tags") -> str:
    if not is_valid_tag(tag):
        raise InvalidTagError(tag)
    return _join_path(tags_prefix, urllib.parse.quote(tag, safe=""))


def route_key(path: str) -> str:
    """Collision key: site-relative paths compare without their trailing slash."""
    if path.startswith("/") and not path.startswith("//"):
        return path.rstrip("/") or "/"
    return path


def resolve_routes(
    entries: Sequence[ContentEntry],
    tags: Iterable[str],
    prefixes: Optional[Mapping[str, str]] = None,
    tags_prefix: str = "tags",
) -> List[Route]:
    """Every static path the site has to generate.

    ``entries`` should already be ordered by ``build_index``; tag listings
    reuse that order. Two routes on the same path abort the build.
    """
    routes: List[Route] = []
    seen: Dict[str, Route] = {}

    def add(route: Route) -> None:
        key = route_key(route.path)
        existing = seen.get(key)
        if existing is not None:
            raise RouteCollisionError(route.path, existing.source, route.source)
        seen[key] = route
        routes.append(route)

    for entry in entries:
        add(Route(path=post_path(entry, prefixes), kind=RouteKind.POST, payload=entry))

    for tag in tags:
        listing = TagListing(tag=tag, posts=filter_by_tag(entries, tag))
        if not listing.posts:
            logger.info(f"Tag '{tag}' has no posts, listing will be empty")
        add(Route(path=tag_path(tag, tags_prefix), kind=RouteKind.TAG, payload=listing))

    logger.debug(f"Resolved {len(routes)} routes")
    return routes
