import logging
from pathlib import Path
from typing import List

from blogbuild.errors import ContentError

logger = logging.getLogger(__name__)

CONTENT_SUFFIXES = (".md", ".mdx")


class FileContentRepo:
    """Read-only view over a content directory with one folder per category."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def list_files(self, category: str) -> List[str]:
        """Content ids (``<category>/<relative path>``) in a stable order."""
        category_dir = self.root / category
        if not category_dir.is_dir():
            logger.warning(f"No content directory for category {category}: {category_dir}")
            return []

        files = [
            path
            for path in category_dir.rglob("*")
            if path.is_file() and path.suffix in CONTENT_SUFFIXES
        ]
        return sorted(path.relative_to(self.root).as_posix() for path in files)

    def read(self, content_id: str) -> str:
        try:
            return (self.root / content_id).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ContentError(content_id, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise ContentError(content_id, f"cannot read file: {e}") from e
