"""
Transformer Inspection Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
the detection lifecycle and timeline logic, and infrastructure (MongoDB,
the detection model client, image storage).
"""
