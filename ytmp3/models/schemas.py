"""
Data models for the YouTube to MP3 converter.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, field_validator, model_validator


class ConversionRequest(BaseModel):
    """A single request to convert one video."""
    video_id: str

    @field_validator('video_id')
    def validate_video_id(cls, v):
        if not v or not v.strip():
            raise ValueError('video_id must not be empty')
        return v.strip()


class ConversionResult(BaseModel):
    """
    Payload returned by the conversion API for a finished conversion.

    Only ``status``, ``title`` and ``link`` are required. The remaining fields
    are informational; values that cannot be read become None.
    """
    status: str
    title: str
    link: str
    duration: Optional[float] = None
    filesize: Optional[int] = None
    msg: Optional[str] = None

    model_config = {"extra": "ignore", "frozen": True}

    @field_validator('duration', mode='before')
    def lenient_duration(cls, v):
        if v is None or isinstance(v, bool):
            return None
        try:
            return float(v)
        except (TypeError, ValueError):
            return None

    @field_validator('filesize', mode='before')
    def lenient_filesize(cls, v):
        if v is None or isinstance(v, bool):
            return None
        try:
            return int(float(v))
        except (TypeError, ValueError, OverflowError):
            return None

    @field_validator('msg', mode='before')
    def lenient_text(cls, v):
        return None if v is None else str(v)


class Phase(str, Enum):
    """Phases the page can be in."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class UIState(BaseModel):
    """
    What the page currently shows.

    Exactly one phase is active. ``result`` is only set in the success phase
    and ``error`` only in the error phase; use the constructors below rather
    than building instances directly.
    """
    phase: Phase = Phase.IDLE
    result: Optional[ConversionResult] = None
    error: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_payload(self):
        if (self.result is not None) != (self.phase == Phase.SUCCESS):
            raise ValueError("result must be set exactly in the success phase")
        if (self.error is not None) != (self.phase == Phase.ERROR):
            raise ValueError("error must be set exactly in the error phase")
        return self

    @classmethod
    def idle(cls) -> "UIState":
        return cls(phase=Phase.IDLE)

    @classmethod
    def loading(cls) -> "UIState":
        return cls(phase=Phase.LOADING)

    @classmethod
    def success(cls, result: ConversionResult) -> "UIState":
        return cls(phase=Phase.SUCCESS, result=result)

    @classmethod
    def failed(cls, message: str) -> "UIState":
        return cls(phase=Phase.ERROR, error=message)

    @property
    def is_loading(self) -> bool:
        return self.phase == Phase.LOADING


class Outcome(str, Enum):
    """How a conversion task ended."""
    SUCCESS = "success"
    CONVERSION_FAILURE = "conversion_failure"
    NETWORK_FAILURE = "network_failure"


class TaskOutcome(BaseModel):
    """Result of running one conversion task."""
    kind: Outcome
    result: Optional[ConversionResult] = None
    detail: Optional[str] = None
