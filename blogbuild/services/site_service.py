import logging
from typing import List

from blogbuild.schemas.post import ContentEntry
from blogbuild.schemas.site import SitePlan
from blogbuild.services.post_index import build_index, build_tag_index, select_tags
from blogbuild.services.route_resolver import resolve_routes
from blogbuild.settings import Settings

logger = logging.getLogger(__name__)


class SiteService:
    def __init__(self, repo, parser, settings: Settings):
        self.repo = repo
        self.parser = parser
        self.settings = settings

    def load_entries(self) -> List[ContentEntry]:
        """Parse every content file of every configured category, in order."""
        entries = []
        for category in self.settings.CATEGORY_PREFIXES:
            content_ids = self.repo.list_files(category)
            logger.info(f"Found {len(content_ids)} {category} files")
            for content_id in content_ids:
                raw = self.repo.read(content_id)
                entries.append(self.parser.parse(content_id, raw, category))
        return entries

    def build(self) -> SitePlan:
        entries = self.load_entries()

        if not self.settings.INCLUDE_DRAFTS:
            drafts = [entry.id for entry in entries if entry.draft]
            if drafts:
                logger.info(f"Skipping {len(drafts)} drafts: {drafts}")
            entries = [entry for entry in entries if not entry.draft]

        posts = build_index(entries)
        tags = select_tags(posts, self.settings.DECLARED_TAGS)
        routes = resolve_routes(
            posts,
            tags,
            prefixes=self.settings.CATEGORY_PREFIXES,
            tags_prefix=self.settings.TAGS_PREFIX,
        )

        logger.info(f"Planned {len(routes)} routes for {len(posts)} posts and {len(tags)} tags")
        return SitePlan(
            posts=posts,
            tags=tags,
            tag_index=build_tag_index(posts),
            routes=routes,
        )
