"""Line-delimited exclusion list adapter.

Some RWS locations only publish stale data (months or years old). Since data
that is not from today is rejected, those locations would always fail to
produce conditions. They are listed in a text file, one identifier per line,
and skipped during matching.
"""

import logging
from pathlib import Path

from seaswim.domain.ports.exclusion_list import ExclusionList

logger = logging.getLogger(__name__)


class FileExclusionList(ExclusionList):
    """Exclusion list loaded once from a text file.

    Blank lines and lines starting with ``#`` are ignored and surrounding
    whitespace is trimmed. A missing or unreadable file yields an empty list.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize by loading the exclusion file. A missing file gives an empty list."""
        self._path = Path(path)
        # dict keeps file order and drops duplicates
        self._excluded: dict[str, None] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.debug(f"Exclusion list not found at {self._path}, nothing excluded")
            return

        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read exclusion list {self._path}: {e}")
            return

        for line in content.splitlines():
            entry = line.strip()
            if not entry or entry.startswith("#"):
                continue
            self._excluded[entry] = None

        logger.debug(f"Loaded {len(self._excluded)} excluded location(s) from {self._path}")

    def contains(self, location_id: str) -> bool:
        """Check whether the identifier is excluded (exact, case-sensitive)."""
        return location_id in self._excluded

    def all(self) -> list[str]:
        """Return the excluded identifiers in file order."""
        return list(self._excluded)
