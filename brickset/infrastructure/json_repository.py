"""Read-only repository backed by a bundled JSON document."""

import logging
import os
from typing import Generic, List, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from brickset.domain.lego_set import LegoSet

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Directory holding the bundled datasets
DEFAULT_DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")


class LoadError(Exception):
    """Raised when a dataset cannot be found, read or parsed into records."""
    pass


class JsonRepository(Generic[T]):
    """Loads a JSON array of records once and serves them read-only."""

    def __init__(self, record_type: Type[T], resource_name: str, data_dir: Optional[str] = None):
        """
        Load and validate the whole resource.

        Args:
            record_type: Record class every array element is validated against
            resource_name: File name of the JSON document
            data_dir: Directory to read the resource from. If None, uses the bundled data.

        Raises:
            LoadError: If the resource is missing, unreadable or malformed
        """
        self.record_type = record_type
        self.resource_name = resource_name
        self.path = os.path.join(data_dir or DEFAULT_DATA_DIR, resource_name)
        self._records: tuple = tuple(self._load())

    def _load(self) -> List[T]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Cannot read {self.path}: {e}")
            raise LoadError(f"Cannot read resource '{self.resource_name}': {e}") from e

        try:
            records = TypeAdapter(List[self.record_type]).validate_json(document)
        except ValidationError as e:
            logger.error(f"Invalid {self.record_type.__name__} data in {self.path}: {e.error_count()} error(s)")
            raise LoadError(
                f"Resource '{self.resource_name}' does not match {self.record_type.__name__}: {e}"
            ) from e

        logger.info(f"Loaded {len(records)} {self.record_type.__name__} records from {self.path}")
        return records

    def get_all(self) -> List[T]:
        """Return every record in source order, as a fresh list."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)


class LegoSetRepository(JsonRepository[LegoSet]):
    """Repository of the bundled LEGO sets."""

    RESOURCE_NAME = "brickset.json"

    def __init__(self, data_dir: Optional[str] = None):
        super().__init__(LegoSet, self.RESOURCE_NAME, data_dir=data_dir)
