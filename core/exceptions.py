from fastapi import status


class SchemaStudioError(Exception):
    """Base class for errors that map onto an HTTP status and a client-safe message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(SchemaStudioError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(SchemaStudioError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(SchemaStudioError):
    status_code = status.HTTP_409_CONFLICT
