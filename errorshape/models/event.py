from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Severity(str, Enum):
    FATAL = "fatal"
    ERROR = "error"
    WARNING = "warning"
    LOG = "log"
    INFO = "info"
    DEBUG = "debug"


class EventFrame(BaseModel):
    """전송용 스택트레이스 프레임"""

    filename: str | None = None
    function: str = "?"
    lineno: int | None = None
    colno: int | None = None
    in_app: bool = True


class Stacktrace(BaseModel):
    # 바깥 호출 → 에러 발생 지점 순 (마지막 프레임이 crash site)
    frames: list[EventFrame] = Field(default_factory=list)


class Mechanism(BaseModel):
    """예외가 어떻게 캡처되었는지"""

    type: str = "generic"
    handled: bool = True
    synthetic: bool | None = None
    data: dict[str, Any] | None = None


class ExceptionValue(BaseModel):
    """exception.values[] 항목"""

    type: str | None = None  # TypeError
    value: str | None = None  # Cannot read property 'x' of undefined
    stacktrace: Stacktrace | None = None
    mechanism: Mechanism | None = None


class ExceptionList(BaseModel):
    # 오래된 cause → 실제 에러 순
    values: list[ExceptionValue] = Field(default_factory=list)


class Event(BaseModel):
    """정규화된 이벤트 (transport로 넘기는 단위)"""

    event_id: str | None = None
    message: str | None = None
    level: Severity | None = None
    platform: str | None = None
    exception: ExceptionList | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    def to_payload(self) -> dict:
        """전송용 dict (None 필드 제외)"""
        return self.model_dump(mode="json", exclude_none=True)


class EventHint(BaseModel):
    """캡처 호출 시 함께 넘어오는 부가 정보"""

    event_id: str | None = None
    synthetic_exception: Any = None  # 호출 위치 스택 복구용
    original_exception: Any = None
