"""Shared reading and writing of JSON catalog files."""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)


class JsonCatalogFile(Generic[R]):
    """A JSON array of catalog records stored in one file.

    A missing file, malformed JSON or a non-array document reads as an empty
    catalog. Records that fail validation are skipped.
    """

    def __init__(self, path: str | Path, record_type: type[R]) -> None:
        """Initialize with a file path and the pydantic record model of its entries."""
        self.path = Path(path)
        self._record_type = record_type

    def read(self) -> list[R]:
        """Read and validate all records."""
        if not self.path.exists():
            logger.debug(f"Catalog file {self.path} does not exist")
            return []

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read catalog file {self.path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Catalog file {self.path} does not contain a JSON array")
            return []

        records: list[R] = []
        for index, item in enumerate(data):
            try:
                records.append(self._record_type.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping invalid record #{index} in {self.path}: {e}")
        return records

    def write(self, records: Sequence[R]) -> None:
        """Replace the file content with the given records."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [record.model_dump() for record in records]
        self.path.write_text(json.dumps(payload, indent=4, ensure_ascii=False), encoding="utf-8")
