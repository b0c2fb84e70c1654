# tmpdrive/drive/transfer.py

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional

from drive.errors import IOFailure, NoFileProvided, NotFound, ParentNotFound
from drive.listing import EntryRecord, ListingProjector
from drive.paths import EntryRef, PathResolver
from shared.logging_config import setup_logger

logger = setup_logger(__name__)

DOWNLOAD_CHUNK_SIZE = 65536  # 64KB
UPLOAD_CHUNK_SIZE = 8192 * 4  # 32KB


def iter_chunks(handle: BinaryIO, chunk_size: int = DOWNLOAD_CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the rest of an open binary file, closing it once exhausted or closed."""
    try:
        while chunk := handle.read(chunk_size):
            yield chunk
    finally:
        handle.close()


@dataclass
class Download:
    """What a GET on a single name resolves to: a folder listing or a file stream."""
    listing: Optional[List[EntryRecord]] = None
    stream: Optional[BinaryIO] = None  # open file, read it with iter_chunks()

    @property
    def is_folder(self) -> bool:
        return self.listing is not None


class TransferHandler:
    """Streams file bytes out to clients and writes uploaded bytes to disk."""

    def __init__(self, resolver: PathResolver, projector: ListingProjector):
        self.resolver = resolver
        self.projector = projector

    def download(self, ref: EntryRef) -> Download:
        path = self.resolver.resolve(ref)
        if not path.exists():
            logger.warning(f"File/folder not found: {path}")
            raise NotFound()

        if path.is_dir():
            return Download(listing=self.projector.list(path))

        try:
            # Opened here so that permission errors surface before the response starts
            handle = open(path, "rb")
        except FileNotFoundError:
            raise NotFound()
        except OSError as e:
            logger.error(f"Error opening {path} for download: {e}", exc_info=True)
            raise IOFailure("Error reading the file") from e

        logger.info(f"File download requested: {path}")
        return Download(stream=handle)

    async def upload(self, file, parent: Optional[str] = None) -> Path:
        """
        Write an uploaded file into the root or into an existing parent folder.

        `file` is anything with a `filename` and an async `read(size)`, such as
        starlette's UploadFile. The original filename is used verbatim as the
        destination name and an existing file of that name is overwritten.
        The parent folder is checked before anything is written.
        """
        if file is None or not getattr(file, "filename", None):
            logger.warning("Upload request without a file part")
            raise NoFileProvided()

        dest_dir = self.resolver.parent_dir(parent)
        if parent is not None and not dest_dir.is_dir():
            logger.warning(f"Upload destination not found: {dest_dir}")
            raise ParentNotFound()

        full_path = self.resolver.resolve(EntryRef(name=file.filename, parent=parent))
        logger.info(f"Uploading file to: {full_path}")

        try:
            total_written = 0
            with open(full_path, "wb") as out_file:
                while chunk := await file.read(UPLOAD_CHUNK_SIZE):
                    out_file.write(chunk)
                    total_written += len(chunk)
        except OSError as e:
            logger.error(f"Error saving file {full_path}: {e}", exc_info=True)
            try:
                if full_path.is_file():
                    full_path.unlink()
            except OSError as cleanup_error:
                logger.error(f"Error cleaning up partial file: {cleanup_error}")
            raise IOFailure("Error saving the file") from e

        logger.info(f"File successfully saved to {full_path} ({total_written} bytes)")
        return full_path
