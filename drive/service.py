# tmpdrive/drive/service.py

from pathlib import Path
from typing import List, Optional

from drive.errors import IOFailure, NotFound, RootNotAvailable
from drive.listing import EntryRecord, ListingProjector
from drive.mutations import MutationExecutor
from drive.paths import EntryRef, PathResolver
from drive.transfer import Download, TransferHandler
from shared.logging_config import setup_logger

logger = setup_logger(__name__)


class DriveService:
    """
    Browse, create, delete and transfer entries under a single root directory.

    The root is shared by every request; only the root and one level of
    child folders are addressable.
    """

    def __init__(self, root: Path):
        root = Path(root)
        if not root.is_dir():
            logger.critical(f"Drive root is missing or not a directory: {root}")
            raise RootNotAvailable(f"Drive root is missing or not a directory: {root}")
        self.root = root.resolve()
        self.resolver = PathResolver(self.root)
        self.projector = ListingProjector()
        self.mutations = MutationExecutor(self.resolver)
        self.transfer = TransferHandler(self.resolver, self.projector)
        logger.info(f"Drive service initialized at {self.root}")

    def list_root(self) -> List[EntryRecord]:
        try:
            return self.projector.list(self.root)
        except NotFound as e:
            # The root vanished after startup
            logger.error(f"Drive root disappeared: {self.root}")
            raise IOFailure("Error reading the drive root") from e

    def browse(self, name: str) -> Download:
        """Listing for a folder at the root, or a byte stream for a file."""
        return self.transfer.download(EntryRef(name=name))

    def create_folder(self, name: Optional[str], parent: Optional[str] = None) -> Path:
        return self.mutations.create_folder(EntryRef(name=name, parent=parent))

    def delete(self, name: str, parent: Optional[str] = None) -> None:
        self.mutations.delete(EntryRef(name=name, parent=parent))

    async def upload(self, file, parent: Optional[str] = None) -> Path:
        return await self.transfer.upload(file, parent)
