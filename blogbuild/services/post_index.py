import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set

from blogbuild.errors import MissingFieldError
from blogbuild.schemas.post import ContentEntry

logger = logging.getLogger(__name__)


def build_index(entries: Iterable[ContentEntry]) -> List[ContentEntry]:
    """Return entries newest first.

    ``sorted`` is stable, so posts published at the same instant keep the
    order they were given in. An entry without a publish date is rejected
    instead of being pushed to either end of the listing.
    """
    entries = list(entries)
    for entry in entries:
        if getattr(entry, "pubDate", None) is None:
            raise MissingFieldError(entry.id, "pubDate")
    return sorted(entries, key=lambda entry: entry.pubDate, reverse=True)


def collect_tags(entries: Iterable[ContentEntry]) -> Set[str]:
    return {tag for entry in entries for tag in entry.tags}


def build_tag_index(entries: Iterable[ContentEntry]) -> Dict[str, Set[str]]:
    """Map each tag to the ids of the entries carrying it."""
    index: Dict[str, Set[str]] = {}
    for entry in entries:
        for tag in entry.tags:
            index.setdefault(tag, set()).add(entry.id)
    return index


def select_tags(
    entries: Sequence[ContentEntry], declared: Optional[Sequence[str]] = None
) -> List[str]:
    """Tags that get a listing page.

    Without a declared list the tags are derived from the content and sorted
    for display. A declared list is used as given (duplicates dropped).
    """
    used = collect_tags(entries)
    if declared is None:
        return sorted(used)

    selected = list(dict.fromkeys(declared))
    undeclared = used.difference(selected)
    if undeclared:
        logger.warning(
            f"Tags used in content but not declared, no listing pages: {sorted(undeclared)}"
        )
    return selected
