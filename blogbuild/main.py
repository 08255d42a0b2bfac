import json
import logging
import sys
from pathlib import Path
from typing import Optional

from blogbuild.errors import BuildError
from blogbuild.repos.content_repo import FileContentRepo
from blogbuild.schemas.site import ManifestEntry, SitePlan
from blogbuild.services.content_parser import ContentParser
from blogbuild.services.site_service import SiteService
from blogbuild.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_site(settings: Settings) -> SitePlan:
    service = SiteService(
        repo=FileContentRepo(settings.content_root),
        parser=ContentParser(),
        settings=settings,
    )
    return service.build()


def write_manifest(plan: SitePlan, path: Path) -> None:
    rows = [ManifestEntry.from_route(route).model_dump(mode="json") for route in plan.routes]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(rows, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info(f"Wrote {len(rows)} routes -> {path}")


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or get_settings()
    configure_logging(settings)

    try:
        plan = build_site(settings)
    except BuildError as e:
        logger.error(f"Build failed: {e}")
        return 1

    write_manifest(plan, settings.manifest_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())
