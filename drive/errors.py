# tmpdrive/drive/errors.py

from typing import Optional


class DriveError(Exception):
    """
    Base error for drive operations.

    Each subclass maps to one HTTP status code and carries a short,
    human-readable message that is sent back as a plain-text body.
    """
    status_code = 500
    default_message = "Server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidName(DriveError):
    """Name is not purely alphanumeric, or would step outside the root."""
    status_code = 400
    default_message = "The name contains non-alphanumeric characters"


class MissingParameter(DriveError):
    status_code = 400
    default_message = 'The "name" parameter is missing'


class NoFileProvided(DriveError):
    status_code = 400
    default_message = "No file found in the request"


class NotFound(DriveError):
    status_code = 404
    default_message = "File/folder not found"


class ParentNotFound(DriveError):
    status_code = 404
    default_message = "The parent folder does not exist"


class AlreadyExists(DriveError):
    status_code = 409
    default_message = "The folder already exists"


class IOFailure(DriveError):
    """Catch-all for unexpected filesystem errors."""
    status_code = 500
    default_message = "Server error"


class RootNotAvailable(DriveError):
    """Raised at construction when the root directory is missing or not a directory."""
    status_code = 500
    default_message = "Drive root directory is not available"
