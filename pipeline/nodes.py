from __future__ import annotations

import logging
import os
from typing import Any, Dict

from langchain_core.runnables import RunnableConfig

from models.base import VisionProvider
from models.errors import AnalysisError
from pipeline.state import AnalysisState
from utils.encoding import encode_base64, to_data_uri

log = logging.getLogger(__name__)

PLANT_PROMPT = (
    "Analyze this plant image and provide detailed analysis of its species, "
    "health, and care recommendations, its characteristics, care instructions, "
    "and any interesting facts. Please provide the response in plain text "
    "without using any markdown formatting."
)

NO_TEXT_PLACEHOLDER = "No text response received."


def _as_analysis_error(e: Exception) -> AnalysisError:
    if isinstance(e, AnalysisError):
        return e
    return AnalysisError(str(e))


def _get_provider(config: RunnableConfig) -> VisionProvider:
    provider = (config or {}).get("configurable", {}).get("provider")
    if provider is None:
        raise AnalysisError("No inference provider configured for the pipeline")
    return provider


def node_read_upload(state: AnalysisState) -> Dict[str, Any]:
    """Reads the uploaded file and base64-encodes it."""
    image_path = state.get("image_path")
    log.info("[READ] image_path='%s'", image_path)

    try:
        with open(image_path, "rb") as f:
            data = f.read()
    except Exception as e:
        log.error("[READ] %s", e)
        return {"error": _as_analysis_error(e)}

    log.info("[READ] Image size (in bytes): %d", len(data))
    return {
        "image_bytes": data,
        "image_b64": encode_base64(data),
        "size": len(data),
        "error": None,
    }


def node_generate(state: AnalysisState, config: RunnableConfig) -> Dict[str, Any]:
    """Node wrapper around the inference provider."""
    mime_type = state.get("mime_type")
    log.info("[GENERATE] mime_type='%s', size=%s", mime_type, state.get("size"))

    try:
        provider = _get_provider(config)
        text = provider.analyze(
            state.get("prompt") or PLANT_PROMPT,
            mime_type,
            state["image_bytes"],
        )
    except Exception as e:
        log.error("[GENERATE] %s", e)
        return {"error": _as_analysis_error(e)}

    if not text:
        log.warning("[GENERATE] provider returned no text")
        text = NO_TEXT_PLACEHOLDER

    log.info("[GENERATE] %d characters", len(text))
    return {"results": text}


def node_cleanup(state: AnalysisState) -> Dict[str, Any]:
    """Removes the temporary upload file."""
    image_path = state.get("image_path")
    try:
        os.unlink(image_path)
    except OSError:
        log.warning("[CLEANUP] Failed to remove temp file %s", image_path)
        return {"cleaned_up": False}

    log.info("[CLEANUP] removed %s", image_path)
    return {"cleaned_up": True}


def format_response(state: AnalysisState) -> Dict[str, Any]:
    """Packs the analysis text and the original image as a data URI."""
    if state.get("error") is not None:
        return {}

    return {
        "results": state.get("results") or NO_TEXT_PLACEHOLDER,
        "image": to_data_uri(state["mime_type"], state["image_b64"]),
    }
