"""
Unit tests for detection DTOs and domain models.
"""
import pytest
from pydantic import ValidationError as PydanticValidationError

from inspection_backend.application.dto.detection_dto import DetectionResponse, DetectionWriteRequest
from inspection_backend.application.dto.roboflow_dto import RoboflowPrediction
from inspection_backend.domain.models.detection import Detection, RawDetection


def _write_request(**overrides) -> dict:
    body = {"width": 10, "height": 20, "x": 5, "y": 6, "confidence": 0.4, "class_id": 1, "author": "alice"}
    body.update(overrides)
    return body


class TestDetectionWriteRequest:
    def test_comment_defaults_to_empty(self):
        request = DetectionWriteRequest.model_validate(_write_request())
        assert request.comment == ""

    @pytest.mark.parametrize("field,value", [("confidence", 1.5), ("confidence", -0.1), ("width", -1)])
    def test_out_of_range_values_rejected(self, field, value):
        with pytest.raises(PydanticValidationError):
            DetectionWriteRequest.model_validate(_write_request(**{field: value}))

    def test_geometry_excludes_class_name(self):
        request = DetectionWriteRequest.model_validate(_write_request(class_name="Faulty"))
        geometry = request.to_geometry()
        assert not hasattr(geometry, "class_name")
        assert request.to_raw().class_name == "Faulty"


class TestRoboflowPrediction:
    def test_class_alias(self):
        prediction = RoboflowPrediction.model_validate(
            {"width": 1, "height": 2, "x": 3, "y": 4, "confidence": 0.9, "class_id": 0, "class": "Faulty"}
        )
        assert prediction.class_name == "Faulty"
        assert prediction.to_raw().class_name == "Faulty"


class TestDetection:
    def test_inspection_number_required(self):
        with pytest.raises(ValueError, match="Inspection number is required"):
            Detection.from_raw("", RawDetection(width=1, height=1, x=1, y=1, confidence=0.1, class_id=0))

    def test_response_from_domain(self):
        detection = Detection.from_raw(
            "INS-001", RawDetection(width=1, height=2, x=3, y=4, confidence=0.1, class_id=7, parent_id="image")
        )
        detection.id = "det-1"
        response = DetectionResponse.from_domain(detection)
        assert response.id == "det-1"
        assert response.class_id == 7
        assert response.parent_id == "image"
