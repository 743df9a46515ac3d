import json

import pytest
import requests

from fakenews_ui.schemas import AnalysisSuccess
from fakenews_ui.services.classifier_service import ServiceError, TransportError

def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response.encoding = "utf-8"
    if body is None:
        response._content = b""
    elif isinstance(body, (bytes, str)):
        response._content = body.encode() if isinstance(body, str) else body
    else:
        response._content = json.dumps(body).encode()
        response.headers["Content-Type"] = "application/json"
    return response

class FakeService:
    """Stands in for ClassificationService and records every request."""

    def __init__(self, result=None, error=None):
        self.result = result or AnalysisSuccess(isFake=True, confidence=87)
        self.error = error
        self.requests = []

    def predict(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.result

@pytest.fixture
def fake_service():
    return FakeService()

@pytest.fixture
def service_error():
    return ServiceError(500, "model unavailable")

@pytest.fixture
def transport_error():
    return TransportError("Connection refused")
