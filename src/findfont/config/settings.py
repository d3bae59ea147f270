"""Configuration settings for findfont."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from findfont.core.classifier import DEFAULT_SUFFIXES
from findfont.core.directories import font_directories, unique_directories


class SearchConfig(BaseModel):
    """Where to look for fonts and which files count as fonts."""

    suffixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SUFFIXES),
        description="File suffixes treated as font files",
    )
    extra_directories: list[Path] = Field(
        default_factory=list,
        description="Directories searched after the platform font directories",
    )
    include_current_directory: bool = Field(
        default=True,
        description="Search the current directory first",
    )
    platform: str | None = Field(
        default=None,
        description="Platform whose font directories are used (None = running platform)",
    )

    @field_validator("suffixes")
    @classmethod
    def normalize_suffixes(cls, value: list[str]) -> list[str]:
        """Lower-case each suffix and give it a leading dot."""
        normalized = []
        for suffix in value:
            suffix = suffix.strip().lower()
            if not suffix:
                continue
            if not suffix.startswith("."):
                suffix = "." + suffix
            if suffix not in normalized:
                normalized.append(suffix)
        return normalized


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class FindFontSettings(BaseModel):
    """Main application settings."""

    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def search_directories(self) -> list[str]:
        """Platform font directories followed by the extra directories."""
        directories = font_directories(
            system=self.search.platform,
            include_current=self.search.include_current_directory,
        )
        directories.extend(str(path) for path in self.search.extra_directories)
        return unique_directories(directories)


def get_default_settings() -> FindFontSettings:
    """Get default application settings."""
    return FindFontSettings()
