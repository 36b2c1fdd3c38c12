from .inspection import (
    AnalyzeInspectionImageUseCase,
    DeleteInspectionUseCase,
)

__all__ = [
    "AnalyzeInspectionImageUseCase",
    "DeleteInspectionUseCase",
]
