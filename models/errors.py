from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

UNKNOWN = "Unknown"
NO_DETAILS = "No additional details available"


class AnalysisError(Exception):
    """
    Failure while analyzing an uploaded image.

    Carries optional diagnostics reported by the inference provider. Fields
    left as None are rendered with placeholder values in the HTTP response.
    """

    def __init__(
        self,
        message: str,
        status: Optional[Union[int, str]] = None,
        status_text: Optional[str] = None,
        details: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.status_text = status_text
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "status": self.status if self.status is not None else UNKNOWN,
            "statusText": self.status_text or UNKNOWN,
            "errorDetails": self.details or NO_DETAILS,
        }


class MissingUploadError(Exception):
    """The request carried no `image` file field."""

    def __init__(self, message: str = "Please upload an image"):
        super().__init__(message)
        self.message = message
