"""Exception types surfaced to the pipeline's error interceptors."""

from typing import Any


class FetchWrapperError(RuntimeError):
    """Base class for failures synthesized by the request pipeline."""


class HttpStatusError(FetchWrapperError):
    """Raised for responses whose status code falls outside the 2xx range."""

    def __init__(self, status_code: int, response: Any = None) -> None:
        super().__init__(f"HttpStatusError cause by {status_code}")
        self.status_code = status_code
        self.response = response


class ResponseDecodeError(FetchWrapperError):
    """Raised when a JSON response body cannot be decoded."""
