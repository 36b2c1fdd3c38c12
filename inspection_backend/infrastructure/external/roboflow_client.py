# Standard library imports
import logging
from typing import Any, Dict, Optional

# External package imports
import httpx
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ...application.dto.roboflow_dto import RoboflowResponse
from ...core.config import get_settings
from ...core.exceptions import ExternalServiceError

logger = logging.getLogger(__name__)

SERVICE_NAME = "roboflow"


class RoboflowClient:
    """
    HTTP client for the Roboflow workflow that detects transformer faults.

    One blocking request per image, no retries: any transport error, non-2xx
    status or unparseable body raises ExternalServiceError.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize Roboflow client.

        Args:
            http_client: Shared async HTTP client
            api_url: Workflow endpoint. If None, reads from settings.
            api_key: Roboflow API key. If None, reads from settings.
            timeout: Request timeout in seconds. If None, reads from settings.
        """
        settings = get_settings()
        self.http_client = http_client
        self.api_url = api_url or settings.roboflow_api_url
        self.api_key = api_key if api_key is not None else settings.roboflow_api_key
        self.timeout = timeout if timeout is not None else settings.roboflow_timeout_seconds

        if not self.api_key:
            logger.warning("ROBOFLOW_API_KEY not configured; image analysis requests will be rejected")

    def _build_payload(self, image_base64: str) -> Dict[str, Any]:
        return {
            "api_key": self.api_key,
            "inputs": {
                "image": {"type": "base64", "value": image_base64},
            },
        }

    async def analyze(self, image_base64: str) -> RoboflowResponse:
        """
        Run the detection workflow on a base64-encoded image.

        Args:
            image_base64: Image bytes, base64-encoded

        Returns:
            Parsed workflow response

        Raises:
            ExternalServiceError: On timeout, HTTP error or malformed response
        """
        try:
            response = await self.http_client.post(
                self.api_url,
                json=self._build_payload(image_base64),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout calling detection model at {self.api_url}")
            raise ExternalServiceError("Detection model request timed out", service=SERVICE_NAME) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"HTTP error from detection model: {e.response.status_code} - {e.response.text}"
            )
            raise ExternalServiceError(
                f"Detection model returned HTTP {e.response.status_code}",
                service=SERVICE_NAME,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Error calling detection model: {e}")
            raise ExternalServiceError(f"Detection model request failed: {e}", service=SERVICE_NAME) from e

        try:
            return RoboflowResponse.model_validate(response.json())
        except (ValueError, PydanticValidationError) as e:
            logger.error(f"Malformed detection model response: {e}")
            raise ExternalServiceError(
                "Detection model returned a malformed response",
                service=SERVICE_NAME,
                status_code=response.status_code,
            ) from e
