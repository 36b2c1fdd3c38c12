from .analyze_inspection_image import AnalyzeInspectionImageUseCase
from .delete_inspection import DeleteInspectionUseCase

__all__ = [
    "AnalyzeInspectionImageUseCase",
    "DeleteInspectionUseCase",
]
