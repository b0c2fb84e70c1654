# tmpdrive/drive/paths.py

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from drive.errors import InvalidName, MissingParameter
from shared.logging_config import setup_logger

logger = setup_logger(__name__)

# Names introduced or removed through the API must be plain ASCII letters and digits
NAME_PATTERN = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class EntryRef:
    """
    An entry addressed through the API: a name directly under the root,
    or a name under one parent folder that itself sits directly under the root.
    """
    name: str
    parent: Optional[str] = None

    def segments(self) -> Tuple[str, ...]:
        if self.parent is None:
            return (self.name,)
        return (self.parent, self.name)


def validate_name(name: Optional[str]) -> str:
    """Check a name against the alphanumeric policy and return it unchanged."""
    if not name:
        raise MissingParameter()
    if not NAME_PATTERN.fullmatch(name):
        logger.warning(f"Rejected non-alphanumeric name: {name!r}")
        raise InvalidName()
    return name


def _is_unsafe_segment(segment: str) -> bool:
    if not segment or segment in (".", ".."):
        return True
    if "\0" in segment or os.sep in segment:
        return True
    return bool(os.altsep and os.altsep in segment)


class PathResolver:
    """Turns EntryRefs into absolute paths that cannot leave the root."""

    def __init__(self, root: Path):
        self.root = Path(root).resolve()

    def _join(self, *segments: str) -> Path:
        path = self.root
        for segment in segments:
            if _is_unsafe_segment(segment):
                logger.warning(f"Path traversal attempt rejected: {segment!r}")
                raise InvalidName(f"Invalid path segment: {segment!r}")
            path = path / segment
        # The containing directory must really be inside the root, symlinks followed.
        # The leaf itself is left alone so a symlink at the root can still be listed or removed.
        if not path.parent.resolve().is_relative_to(self.root):
            logger.warning(f"Path escapes the drive root: {path} (resolved parent: {path.parent.resolve()})")
            raise InvalidName(f"Invalid path: {'/'.join(segments)!r}")
        return path

    def resolve(self, ref: EntryRef) -> Path:
        return self._join(*ref.segments())

    def parent_dir(self, parent: Optional[str]) -> Path:
        """Directory that holds entries of the given parent (the root when parent is None)."""
        if parent is None:
            return self.root
        return self._join(parent)
