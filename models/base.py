from __future__ import annotations

from typing import Optional, Protocol


class VisionProvider(Protocol):
    """Anything that can turn a prompt plus an inline image into text."""

    def analyze(self, prompt: str, mime_type: str, data: bytes) -> Optional[str]:
        """
        Returns the provider's text answer, or None if it produced none.

        Raises:
            AnalysisError: on any provider-side failure.
        """
        ...
