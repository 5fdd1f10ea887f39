"""캡처 대상 값 모델

JS 런타임이 캡처 API로 넘기는 값들의 Python 표현.
JSON payload에서 model_validate로 그대로 로드 가능 (camelCase 키 허용).
"""

from typing import Any, ClassVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class JSError(BaseModel):
    """네이티브 Error 객체"""

    name: str | None = "Error"
    message: Any = ""
    stack: str | None = None
    stacktrace: str | None = None  # Opera 전용
    frames_to_pop: int | None = None
    column_number: int | None = None  # Firefox 전용
    cause: Any = None

    model_config = {
        "extra": "allow",
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class DOMError(BaseModel):
    """레거시 DOMError (스택 없음, name/message만)"""

    name: str | None = None
    message: str | None = None

    model_config = {"extra": "allow"}


class DOMException(DOMError):
    pass


class PlatformEvent(BaseModel):
    """Event 계열 객체 (Error가 아님)"""

    constructor_name: ClassVar[str] = "Event"

    type: str = ""

    model_config = {"extra": "allow"}


class ErrorEvent(PlatformEvent):
    """window 'error' 이벤트"""

    constructor_name: ClassVar[str] = "ErrorEvent"

    message: str | None = None
    filename: str | None = None
    lineno: int | None = None
    colno: int | None = None
    error: Any = None


class PromiseRejectionEvent(PlatformEvent):
    constructor_name: ClassVar[str] = "PromiseRejectionEvent"

    reason: Any = None


def is_error(value: Any) -> bool:
    """Error 인스턴스 판별 (Python 예외 포함)"""
    return isinstance(value, (BaseException, JSError, DOMException))


def is_dom_error(value: Any) -> bool:
    return isinstance(value, (DOMError, DOMException))


def is_event(value: Any) -> bool:
    return isinstance(value, PlatformEvent)


def is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def constructor_name(value: Any) -> str:
    return getattr(type(value), "constructor_name", type(value).__name__)


def get_property(value: Any, key: str) -> Any:
    """JS 프로퍼티 접근 흉내 (`value[key]`), 없으면 None

    dict는 키, pydantic 모델은 필드명/alias/extra, Python 예외는
    name → 클래스명, message → str(exc), cause → __cause__ 로 대응.
    """
    if value is None:
        return None

    if isinstance(value, dict):
        return value.get(key)

    if isinstance(value, BaseModel):
        for field_name, field in type(value).model_fields.items():
            if key in (field_name, field.alias):
                return getattr(value, field_name)
        return (value.model_extra or {}).get(key)

    if isinstance(value, BaseException):
        if key == "name":
            return type(value).__name__
        found = getattr(value, key, None)
        if found is None and key == "message":
            return str(value)
        if found is None and key == "cause":
            return value.__cause__
        return found

    return getattr(value, key, None)
