# tmpdrive/drive/mutations.py

import shutil
from pathlib import Path

from drive.errors import AlreadyExists, IOFailure, NotFound, ParentNotFound
from drive.paths import EntryRef, PathResolver, validate_name
from shared.logging_config import setup_logger

logger = setup_logger(__name__)


class MutationExecutor:
    """Creates and removes entries under the root."""

    def __init__(self, resolver: PathResolver):
        self.resolver = resolver

    def create_folder(self, ref: EntryRef) -> Path:
        """
        Create a single folder at the root or inside an existing parent folder.

        Raises MissingParameter/InvalidName for a bad name, ParentNotFound when
        the parent folder is absent and AlreadyExists when the target is taken.
        """
        validate_name(ref.name)

        if ref.parent is not None:
            parent_path = self.resolver.parent_dir(ref.parent)
            if not parent_path.is_dir():
                logger.warning(f"Parent folder not found: {parent_path}")
                raise ParentNotFound()

        target = self.resolver.resolve(ref)
        if target.exists():
            logger.warning(f"Folder already exists: {target}")
            raise AlreadyExists()

        try:
            target.mkdir()
        except FileExistsError:
            raise AlreadyExists()
        except OSError as e:
            logger.error(f"Error creating folder {target}: {e}", exc_info=True)
            raise IOFailure("Error creating the folder") from e

        logger.info(f"Folder created: {target}")
        return target

    def delete(self, ref: EntryRef) -> None:
        """
        Delete a file, or a folder together with everything inside it.

        A recursive delete that fails midway leaves the remaining tree in place.
        """
        validate_name(ref.name)

        target = self.resolver.resolve(ref)
        if not target.exists() and not target.is_symlink():
            logger.warning(f"Delete target not found: {target}")
            raise NotFound()

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except FileNotFoundError:
            # Removed by a concurrent request
            raise NotFound()
        except OSError as e:
            logger.error(f"Error deleting {target}: {e}", exc_info=True)
            raise IOFailure("Error deleting the file/folder") from e

        logger.info(f"Deleted: {target}")
