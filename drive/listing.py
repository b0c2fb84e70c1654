# tmpdrive/drive/listing.py

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from drive.errors import IOFailure, NotFound
from shared.logging_config import setup_logger

logger = setup_logger(__name__)


class EntryRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    is_folder: bool = Field(alias="isFolder")
    size: Optional[int] = None  # only set for files

    def to_json(self) -> dict:
        """Wire form: camelCase keys, no "size" key for folders."""
        return self.model_dump(by_alias=True, exclude_none=True)


def project_entry(item_path: Path) -> EntryRecord:
    stat_info = item_path.stat()
    return EntryRecord(
        name=item_path.name,
        is_folder=item_path.is_dir(),
        size=stat_info.st_size if item_path.is_file() else None,
    )


class ListingProjector:
    """Reads one directory level and projects each entry into an EntryRecord."""

    def list(self, path: Path) -> List[EntryRecord]:
        """
        List the direct children of a directory, in directory iteration order.

        Names are not filtered: whatever is on disk is reported.
        """
        if not path.exists():
            raise NotFound()
        try:
            items = []
            for item_path in path.iterdir():
                try:
                    items.append(project_entry(item_path))
                except FileNotFoundError:
                    # Removed between iterdir() and stat()
                    logger.warning(f"Entry vanished while listing, skipping: {item_path}")
                    continue
            logger.info(f"Listed contents of {path}: {len(items)} items")
            return items
        except FileNotFoundError:
            raise NotFound()
        except OSError as e:
            logger.error(f"Error listing directory '{path}': {e}", exc_info=True)
            raise IOFailure("Error reading the folder") from e
