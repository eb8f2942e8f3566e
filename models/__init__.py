"""
Inference provider package for the plant analysis service.

This module exposes:
- `VisionProvider` protocol (`models.base`)
- Gemini-backed provider and its singleton accessor (`get_gemini`)
- `AnalysisError`, the error type raised by providers and pipeline nodes
"""
