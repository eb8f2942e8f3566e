"""
FastAPI layer for the plant image analysis service.

Exposes:
- `/analyze`        : Multipart image upload, analyzed by the inference provider
- `/download`       : PDF export placeholder
- `/graph/mermaid`  : Mermaid graph source for the analysis pipeline
- `/health`         : Basic health check
- `/`               : Static files from the public directory
"""
