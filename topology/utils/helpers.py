"""Utility functions and helpers."""
from datetime import date
from pathlib import Path


class DirectoryManager:

    @staticmethod
    def ensure_exists(directory: Path) -> Path:
        """Ensure directory exists."""
        directory.mkdir(parents=True, exist_ok=True)
        return directory

    @staticmethod
    def dated_filename(prefix: str, suffix: str, day: date = None) -> str:
        """Build a '<prefix>-YYYY-MM-DD<suffix>' file name (today by default)."""
        day = day or date.today()
        return f"{prefix}-{day.isoformat()}{suffix}"
