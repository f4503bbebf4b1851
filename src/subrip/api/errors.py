"""API error hierarchy."""

from subrip.formats.srt import InvalidDocumentError


class ApiError(Exception):
    """Base API error with HTTP status code and structured detail."""

    def __init__(
        self,
        *,
        status_code: int,
        code: str,
        message: str,
        detail: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


class InvalidRequestError(ApiError):
    """Raised when the client sends an invalid request."""

    def __init__(self, message: str, *, detail: str | None = None) -> None:
        super().__init__(
            status_code=422,
            code="invalid_request",
            message=message,
            detail=detail,
        )


class InvalidSubtitleError(ApiError):
    """Raised when the submitted SRT content cannot be parsed."""

    def __init__(self, error: InvalidDocumentError) -> None:
        super().__init__(
            status_code=400,
            code="invalid_subtitle",
            message=str(error),
            detail=f"line {error.line_index}: {error.line!r}",
        )
        self.line_index = error.line_index
