from __future__ import annotations

import logging
import os
import shutil
import tempfile
from typing import Optional, Union

import uvicorn
from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import UploadFile as StarletteUploadFile

from api.config import Settings, get_settings
from api.schemas import (
    AnalysisErrorResponse,
    AnalyzeResponse,
    DownloadResponse,
    UploadErrorResponse,
)
from models.base import VisionProvider
from models.errors import AnalysisError, MissingUploadError
from models.gemini import get_gemini
from pipeline.graph import pipeline
from pipeline.nodes import PLANT_PROMPT
from pipeline.state import AnalysisState

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)

app = FastAPI(
    title="Plant Analysis API",
    version="1.0.0",
    description="Upload a plant photo, get a Gemini-generated analysis back.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(MissingUploadError)
async def missing_upload_handler(request: Request, exc: MissingUploadError):
    return JSONResponse(
        status_code=400,
        content=UploadErrorResponse(error=exc.message).model_dump(),
    )


@app.exception_handler(AnalysisError)
async def analysis_error_handler(request: Request, exc: AnalysisError):
    log.error("Error details: %s (status=%s)", exc.message, exc.status)
    body = AnalysisErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))


async def require_image(
    image: Optional[Union[UploadFile, str]] = File(None),
) -> UploadFile:
    """
    Resolves the `image` form field.

    A plain text field or a file part with an empty filename (what browsers
    send when no file is chosen) counts as no upload.

    Declared ahead of the provider dependency so a missing upload is reported
    as a client error even when the provider is misconfigured.
    """
    # Form values arrive as Starlette upload objects, not the FastAPI subclass
    if not isinstance(image, StarletteUploadFile) or not image.filename:
        raise MissingUploadError()
    return image


def get_provider(settings: Settings = Depends(get_settings)) -> VisionProvider:
    """Inference provider used by `/analyze`. Overridden in tests."""
    return get_gemini(settings.gemini_api_key, settings.gemini_model)


def save_upload(upload: UploadFile, upload_dir: str) -> str:
    """
    Persist an upload under `upload_dir` with a unique generated name.

    Returns the path of the written file.
    """
    os.makedirs(upload_dir, exist_ok=True)
    suffix = os.path.splitext(upload.filename or "")[1]
    with tempfile.NamedTemporaryFile(dir=upload_dir, delete=False, suffix=suffix) as tmp:
        shutil.copyfileobj(upload.file, tmp)
        return tmp.name


@app.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": UploadErrorResponse},
        500: {"model": AnalysisErrorResponse},
    },
)
async def analyze(
    image: UploadFile = Depends(require_image),
    settings: Settings = Depends(get_settings),
    provider: VisionProvider = Depends(get_provider),
):
    """
    Analyze an uploaded plant image.

    Returns the provider's text and the original image as a data URI.
    """
    try:
        image_path = await run_in_threadpool(save_upload, image, settings.upload_dir)
    except OSError as e:
        raise AnalysisError(str(e)) from e

    state: AnalysisState = {
        "image_path": image_path,
        "mime_type": image.content_type or "application/octet-stream",
        "prompt": PLANT_PROMPT,
        "cleanup_on_error": settings.cleanup_on_error,
        "image_bytes": None,
        "image_b64": None,
        "size": None,
        "results": None,
        "image": None,
        "cleaned_up": False,
        "error": None,
    }

    result = await pipeline.ainvoke(
        state,
        config={"configurable": {"provider": provider}},
    )

    if result.get("error") is not None:
        raise result["error"]

    return AnalyzeResponse(results=result["results"], image=result["image"])


@app.post("/download", response_model=DownloadResponse)
async def download():
    """
    Placeholder for PDF export. Always acknowledges.
    """
    return DownloadResponse(success=True)


@app.get("/graph/mermaid")
def graph_mermaid():
    """
    Return Mermaid source for visualizing the pipeline graph.
    """
    return {"mermaid": pipeline.get_graph().draw_mermaid()}


@app.get("/health")
def health():
    """
    Basic health check.
    """
    return {"status": "ok"}


# Mounted last so the API routes above take precedence over static files.
app.mount(
    "/",
    StaticFiles(directory=get_settings().public_dir, html=True, check_dir=False),
    name="public",
)


def main() -> None:
    settings = get_settings()
    log.info("Server starting on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
