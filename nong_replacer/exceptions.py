"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class NongReplacerError(Exception):
    """Base exception for all application-specific errors."""


class SongIdError(NongReplacerError):
    """Raised when the song ID is missing, non-numeric or out of range."""


class SongsDirectoryError(NongReplacerError):
    """Raised when the game's songs directory can neither be located nor picked."""


class SourceError(NongReplacerError):
    """Raised when no usable song source was provided."""


class DownloadError(NongReplacerError):
    """
    Raised when a remote song cannot be fetched: connection failures, non-200
    responses, or I/O errors while writing the temporary file.
    """

    def __init__(self, message: str, url: str, status: int | None = None):
        super().__init__(message)
        self.url = url
        self.status = status


class TranscodeError(NongReplacerError):
    """Raised when the song cannot be copied or converted into place."""

    def __init__(self, message: str, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr
