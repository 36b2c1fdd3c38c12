"""
API layer for the inspection backend.

Exposes HTTP endpoints under /api/v1 (inspection image analysis, detections
and their annotation timeline).
"""
