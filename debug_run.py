from __future__ import annotations

import logging
import mimetypes
import shutil
import sys
import tempfile

from api.config import get_settings
from models.gemini import get_gemini
from pipeline.graph import pipeline
from pipeline.nodes import PLANT_PROMPT

logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)


def main() -> None:
    """
    Run a sample pass through the pipeline against the real Gemini API.

    Usage: python debug_run.py path/to/plant.jpg

    The image is copied to a scratch file first, since a successful run
    deletes the file it analyzed.
    """
    source = sys.argv[1] if len(sys.argv) > 1 else "test.jpg"
    mime_type = mimetypes.guess_type(source)[0] or "image/jpeg"

    with tempfile.NamedTemporaryFile(delete=False, suffix=".img") as tmp, open(source, "rb") as src:
        shutil.copyfileobj(src, tmp)
        scratch = tmp.name

    settings = get_settings()
    provider = get_gemini(settings.gemini_api_key, settings.gemini_model)

    initial_state = {
        "image_path": scratch,
        "mime_type": mime_type,
        "prompt": PLANT_PROMPT,
        "cleanup_on_error": True,
        "error": None,
    }

    # Stream: see each node's state delta live
    for step in pipeline.stream(initial_state, config={"configurable": {"provider": provider}}):
        node = list(step.keys())[0]
        delta = {k: v for k, v in (step[node] or {}).items() if k not in ("image_bytes", "image_b64", "image")}
        print("\n" + "=" * 40)
        print(f"NODE: {node}")
        print(f"DELTA: {delta}")


if __name__ == "__main__":
    main()
