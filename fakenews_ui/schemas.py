from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat

class RequestState(str, Enum):
    idle = "idle"
    in_flight = "in_flight"

class ErrorKind(str, Enum):
    validation = "validation"
    service = "service"
    transport = "transport"
    busy = "busy"

class AnalysisInput(BaseModel):
    title: Optional[str] = ""
    body: Optional[str] = ""

    def is_blank(self) -> bool:
        """True when neither title nor body holds anything but whitespace."""
        return not (self.title or "").strip() and not (self.body or "").strip()

class AnalysisRequest(BaseModel):
    """
    Payload sent to the classification service's /predict endpoint.
    Values are forwarded exactly as typed, no trimming.
    """
    text: str
    title: str

    @classmethod
    def from_input(cls, analysis_input: AnalysisInput) -> "AnalysisRequest":
        return cls(text=analysis_input.body or "", title=analysis_input.title or "")

class AnalysisSuccess(BaseModel):
    status: Literal["success"] = "success"
    isFake: StrictBool
    confidence: StrictFloat = Field(ge=0, le=100)

    @property
    def verdict(self) -> str:
        return "Fake News" if self.isFake else "Real News"

class AnalysisFailure(BaseModel):
    status: Literal["failure"] = "failure"
    message: str
    kind: ErrorKind

AnalysisOutcome = Annotated[Union[AnalysisSuccess, AnalysisFailure], Field(discriminator="status")]

class ControllerState(BaseModel):
    state: RequestState = RequestState.idle
    input: AnalysisInput = Field(default_factory=AnalysisInput)
    outcome: Optional[AnalysisOutcome] = None
