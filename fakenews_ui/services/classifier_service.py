import logging
from typing import Optional

import requests
from pydantic import ValidationError

from ..schemas import AnalysisRequest, AnalysisSuccess

logger = logging.getLogger(__name__)

class ServiceError(Exception):
    """The classification service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

class TransportError(Exception):
    """The classification service could not be reached or sent back garbage."""

class ClassificationService:
    def __init__(self, base_url: str, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def predict_url(self) -> str:
        return f"{self.base_url}/predict"

    def predict(self, request: AnalysisRequest) -> AnalysisSuccess:
        """
        Send one classification request and return the parsed verdict.
        Raises ServiceError for non-2xx answers and TransportError for
        connection failures or an unreadable success body.
        """
        payload = request.model_dump()
        logger.debug("Sending request: %s", payload)
        try:
            response = self.session.post(
                self.predict_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(str(e)) from e

        if not 200 <= response.status_code < 300:
            raise ServiceError(response.status_code, _error_message(response))

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Invalid JSON in response: {e}") from e
        if not isinstance(data, dict):
            raise TransportError(f"Unexpected response payload: {data!r}")

        try:
            return AnalysisSuccess(isFake=data.get("isFake"), confidence=data.get("confidence"))
        except ValidationError as e:
            raise TransportError(f"Malformed prediction: {e}") from e

def _error_message(response: requests.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        data = None
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, str) and error:
        return error
    return f"Server Error ({response.status_code})"
