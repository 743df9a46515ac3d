import logging
import threading
from functools import lru_cache
from typing import Optional

from ..config import Settings
from ..schemas import (
    AnalysisFailure,
    AnalysisInput,
    AnalysisOutcome,
    AnalysisRequest,
    ControllerState,
    ErrorKind,
    RequestState,
)
from ..services.classifier_service import ClassificationService, ServiceError, TransportError

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter news text or title to analyze."
TRANSPORT_ERROR_MESSAGE = "Unable to connect to the backend. Check service availability & endpoint configuration."
BUSY_MESSAGE = "An analysis is already in progress."

class ClassificationController:
    """
    Holds what the page shows: the last submitted input, whether a request
    is in flight, and the outcome of the last attempt.
    """

    def __init__(self, service: ClassificationService):
        self.service = service
        self._state_lock = threading.Lock()
        self._in_flight = threading.Lock()
        self._input = AnalysisInput()
        self._state = RequestState.idle
        self._outcome: Optional[AnalysisOutcome] = None

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def outcome(self) -> Optional[AnalysisOutcome]:
        return self._outcome

    def snapshot(self) -> ControllerState:
        with self._state_lock:
            return ControllerState(state=self._state, input=self._input, outcome=self._outcome)

    def submit(self, analysis_input: AnalysisInput) -> AnalysisOutcome:
        if analysis_input.is_blank():
            outcome = AnalysisFailure(message=EMPTY_INPUT_MESSAGE, kind=ErrorKind.validation)
            # an in-flight request owns the stored state until it finishes
            with self._state_lock:
                if self._state is RequestState.idle:
                    self._input = analysis_input
                    self._outcome = outcome
            return outcome

        # only one request at a time; a second caller is turned away untouched
        if not self._in_flight.acquire(blocking=False):
            logger.warning("Rejected submission while another analysis is in flight")
            return AnalysisFailure(message=BUSY_MESSAGE, kind=ErrorKind.busy)
        try:
            with self._state_lock:
                self._input = analysis_input
                self._state = RequestState.in_flight
                self._outcome = None

            outcome = None
            try:
                outcome = self._classify(analysis_input)
            finally:
                with self._state_lock:
                    self._outcome = outcome
                    self._state = RequestState.idle
            return outcome
        finally:
            self._in_flight.release()

    def clear(self) -> None:
        with self._state_lock:
            self._outcome = None

    def _classify(self, analysis_input: AnalysisInput) -> AnalysisOutcome:
        try:
            result = self.service.predict(AnalysisRequest.from_input(analysis_input))
        except ServiceError as e:
            logger.warning("Classification service returned %s: %s", e.status_code, e.message)
            return AnalysisFailure(message=e.message, kind=ErrorKind.service)
        except TransportError as e:
            logger.warning("Classification service unreachable: %s", e)
            return AnalysisFailure(message=TRANSPORT_ERROR_MESSAGE, kind=ErrorKind.transport)
        logger.info("%s (confidence %s%%)", result.verdict, result.confidence)
        return result

@lru_cache()
def get_controller() -> ClassificationController:
    settings = Settings()
    service = ClassificationService(settings.api_url, timeout=settings.request_timeout)
    return ClassificationController(service)
