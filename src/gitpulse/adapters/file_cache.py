"""File-based contribution cache adapter."""

import json
import logging
import shutil
import time
from pathlib import Path
from typing import Callable

from gitpulse.core.cache import CacheInfo, CacheLookup, CacheState, is_fresh, is_valid_username
from gitpulse.core.contributions import ContributionDay
from gitpulse.ports.contribution_cache import CacheError

logger = logging.getLogger(__name__)


class FileContributionCache:
    """
    File-based contribution cache.

    Implements ContributionCache protocol. Each user gets one pretty-printed
    JSON array at <cache_dir>/<username>_contributions.json; freshness is
    judged from the file's modification time.
    """

    def __init__(
        self,
        cache_dir: Path | str,
        ttl_seconds: int = 300,
        clock: Callable[[], float] = time.time,
    ):
        self.cache_dir = Path(cache_dir).expanduser()
        self.ttl_seconds = ttl_seconds
        self._clock = clock

    def path_for_user(self, username: str) -> Path:
        """Get the cache file path for a given username."""
        if not is_valid_username(username):
            raise ValueError(f"Invalid username: {username!r}")
        return self.cache_dir / f"{username}_contributions.json"

    def _read_days(self, path: Path) -> list[ContributionDay]:
        data = json.loads(path.read_text())
        if not isinstance(data, list):
            raise ValueError("Cache file does not hold a JSON array")
        return [ContributionDay.from_dict(item) for item in data]

    def lookup(self, username: str) -> CacheLookup:
        """Classify the user's cache entry, returning its days when fresh."""
        path = self.path_for_user(username)
        try:
            stat = path.stat()
        except FileNotFoundError:
            return CacheLookup(CacheState.ABSENT)
        except OSError as e:
            logger.warning(f"Cannot stat cache file {path}: {e}")
            return CacheLookup(CacheState.CORRUPT)

        age = self._clock() - stat.st_mtime
        if not is_fresh(age, self.ttl_seconds):
            logger.debug(f"Cache for {username} expired ({int(age)}s old)")
            return CacheLookup(CacheState.STALE)

        try:
            days = self._read_days(path)
        except (OSError, ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting raises RecursionError
            logger.warning(f"Ignoring unreadable cache file {path}: {e}")
            return CacheLookup(CacheState.CORRUPT)

        logger.debug(f"Cache hit for {username} ({len(days)} days)")
        return CacheLookup(CacheState.FRESH, days)

    def store(self, username: str, days: list[ContributionDay]) -> None:
        """Write the user's entry, creating the cache directory as needed."""
        path = self.path_for_user(username)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps([d.to_dict() for d in days], indent=2))

    def clear(self) -> None:
        """Delete the cache directory and recreate it empty."""
        try:
            if self.cache_dir.exists():
                shutil.rmtree(self.cache_dir)
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CacheError(str(e)) from e
        logger.info(f"Cleared cache directory {self.cache_dir}")

    def clear_user(self, username: str) -> None:
        """Delete one user's cache file if present."""
        path = self.path_for_user(username)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CacheError(str(e)) from e

    def info(self, username: str) -> CacheInfo:
        """Describe the user's cache file."""
        path = self.path_for_user(username)
        try:
            stat = path.stat()
        except FileNotFoundError:
            return CacheInfo(exists=False)
        except OSError as e:
            logger.warning(f"Cannot stat cache file {path}: {e}")
            return CacheInfo(exists=False)

        age = self._clock() - stat.st_mtime
        try:
            days_count = len(self._read_days(path))
        except (OSError, ValueError, RecursionError):
            days_count = None

        return CacheInfo(
            exists=True,
            age_seconds=age,
            size_bytes=stat.st_size,
            days_count=days_count,
            is_fresh=days_count is not None and is_fresh(age, self.ttl_seconds),
        )
