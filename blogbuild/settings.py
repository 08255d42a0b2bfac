from pathlib import Path
from typing import Dict, List, Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from blogbuild.utils import is_valid_tag

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "src/content"
    # Category name -> route prefix, in build order
    CATEGORY_PREFIXES: Dict[str, str] = {"blog": "", "code": "code"}
    INCLUDE_DRAFTS: bool = False

    # Tags (unset means derive from content)
    DECLARED_TAGS: Optional[List[str]] = None
    TAGS_PREFIX: str = "tags"

    # Output
    MANIFEST_PATH: str = "dist/routes.json"

    # Logging
    LOG_LEVEL: LogLevel = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @field_validator("DECLARED_TAGS")
    @classmethod
    def check_declared_tags(cls, value):
        if value is not None:
            for tag in value:
                if not is_valid_tag(tag):
                    raise ValueError(f"invalid declared tag {tag!r}")
        return value

    @property
    def content_root(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def manifest_file(self) -> Path:
        return Path(self.MANIFEST_PATH)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()


def get_settings() -> Settings:
    """Small wrapper to allow overrides in tests."""
    return settings
