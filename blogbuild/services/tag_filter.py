from typing import Iterable, List

from blogbuild.schemas.post import ContentEntry


def filter_by_tag(ordered_entries: Iterable[ContentEntry], tag: str) -> List[ContentEntry]:
    """Entries tagged exactly ``tag``, in the order they were given.

    An unknown tag yields an empty list so the listing page can show its
    empty state.
    """
    return [entry for entry in ordered_entries if tag in entry.tags]
