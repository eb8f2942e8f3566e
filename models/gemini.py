from __future__ import annotations

import logging
from http import HTTPStatus
from typing import List, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from models.errors import AnalysisError

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"

_gemini = None


def _status_text(code) -> Optional[str]:
    try:
        return HTTPStatus(int(code)).phrase
    except (TypeError, ValueError):
        return None


def _details(exc: google_exceptions.GoogleAPICallError) -> Optional[List[str]]:
    details = [str(d) for d in (exc.details or [])]
    return details or None


class GeminiProvider:
    """
    Image analysis backed by the Google Generative AI SDK.

    Provider failures are translated into `AnalysisError` so the HTTP layer
    can report the status the API returned.
    """

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL):
        genai.configure(api_key=api_key)
        self.api_key = api_key
        self.model_name = model_name
        self.model = genai.GenerativeModel(model_name)

    def analyze(self, prompt: str, mime_type: str, data: bytes) -> Optional[str]:
        try:
            response = self.model.generate_content(
                [
                    prompt,
                    {"mime_type": mime_type, "data": data},
                ]
            )
        except google_exceptions.GoogleAPICallError as e:
            raise AnalysisError(
                e.message or str(e),
                status=int(e.code) if e.code is not None else None,
                status_text=_status_text(e.code),
                details=_details(e),
            ) from e

        log.debug("[GEMINI] raw response: %s", response)

        if response is None:
            raise AnalysisError(
                "The API response is undefined or missing the expected structure."
            )

        # `.text` raises when the candidate carries no text parts (e.g. blocked).
        try:
            return response.text
        except ValueError as e:
            log.warning("[GEMINI] no text in response: %s", e)
            return None


def get_gemini(api_key: Optional[str], model_name: str = DEFAULT_MODEL) -> GeminiProvider:
    """
    Returns a singleton instance of the Gemini provider.

    The instance is rebuilt if a different API key or model is requested.
    """
    global _gemini

    if not api_key:
        raise AnalysisError("GEMINI_API_KEY is not configured")

    if (
        _gemini is None
        or _gemini.model_name != model_name
        or _gemini.api_key != api_key
    ):
        _gemini = GeminiProvider(api_key, model_name)

    return _gemini
