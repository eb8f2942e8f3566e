from typing import Optional, TypedDict

from models.errors import AnalysisError


class AnalysisState(TypedDict, total=False):
    """
    Shared state passed between LangGraph nodes for one upload.
    """

    image_path: str  # temp file written from the multipart upload
    mime_type: str  # declared by the client, e.g. "image/jpeg"
    prompt: str
    cleanup_on_error: bool

    # Outputs from reading the upload
    image_bytes: Optional[bytes]
    image_b64: Optional[str]
    size: Optional[int]  # bytes

    # Outputs from the provider
    results: Optional[str]

    # Final payload
    image: Optional[str]  # data URI
    cleaned_up: bool

    # Set by the first node that fails; later nodes are skipped
    error: Optional[AnalysisError]
