from enum import Enum
from typing import Any

from pydantic import BaseModel

from errorshape.models.captured import ErrorEvent, is_dom_error, is_error, is_event, is_plain_object


class CapturedKind(str, Enum):
    """캡처 값 형태 (판별 우선순위 순)"""

    ERROR_EVENT = "error_event"  # error 필드를 가진 ErrorEvent
    DOM_ERROR = "dom_error"  # DOMError / DOMException
    ERROR = "error"  # 네이티브 Error
    PLAIN_OBJECT = "plain_object"  # dict 또는 Event 계열
    OTHER = "other"  # 문자열 등 나머지


class Classified(BaseModel):
    kind: CapturedKind
    value: Any  # ERROR_EVENT는 안쪽 error로 이미 풀려 있음


def classify(value: Any) -> Classified:
    """캡처 값 판별 (순수 함수, 첫 매칭 규칙 사용)"""
    if isinstance(value, ErrorEvent) and value.error:
        return Classified(kind=CapturedKind.ERROR_EVENT, value=value.error)

    if is_dom_error(value):
        return Classified(kind=CapturedKind.DOM_ERROR, value=value)

    if is_error(value):
        return Classified(kind=CapturedKind.ERROR, value=value)

    if is_plain_object(value) or is_event(value):
        return Classified(kind=CapturedKind.PLAIN_OBJECT, value=value)

    return Classified(kind=CapturedKind.OTHER, value=value)
