"""이벤트 빌더 - 임의의 캡처 값 → Event

판별 규칙 (classify 순서):
  ERROR_EVENT  → 안쪽 error로 스택 계산
  DOM_ERROR    → "name: message" 메시지 이벤트
  ERROR        → 스택 계산 → 예외 1개
  PLAIN_OBJECT → "Non-Error ... captured with keys: ..." + 직렬화
  OTHER        → 문자열 메시지 이벤트
"""

import logging
from typing import Any

from errorshape.models.captured import constructor_name, get_property, is_event
from errorshape.models.event import (
    Event,
    EventFrame,
    EventHint,
    ExceptionList,
    ExceptionValue,
    Mechanism,
    Severity,
    Stacktrace,
)
from errorshape.services.classify import CapturedKind, classify
from errorshape.services.frames import event_from_stacktrace, prepare_frames_for_event
from errorshape.services.serialize import extract_exception_keys_for_message, normalize_to_size
from errorshape.services.tracekit import attempt, compute_stack_trace

logger = logging.getLogger(__name__)


def parse_stack_frames(ex: Any) -> list[EventFrame]:
    """synthetic exception 등에서 전송용 프레임만 뽑기 (실패 시 [])"""
    return attempt(lambda: prepare_frames_for_event(compute_stack_trace(ex).frames), [])


def add_exception_type_value(event: Event, value: str | None = None, type: str | None = None) -> None:
    """첫 번째 예외의 비어있는 type/value 채우기 (없으면 생성)"""
    if event.exception is None:
        event.exception = ExceptionList()
    if not event.exception.values:
        event.exception.values.append(ExceptionValue())

    first = event.exception.values[0]
    if not first.value:
        first.value = value or ""
    if not first.type:
        first.type = type or "Error"


def add_exception_mechanism(event: Event, mechanism: dict[str, Any] | None = None) -> None:
    """첫 번째 예외의 mechanism 병합 (기본값 → 기존값 → 새 값 순으로 덮어씀)"""
    if event.exception is None or not event.exception.values:
        return

    first = event.exception.values[0]
    current = first.mechanism.model_dump(exclude_none=True) if first.mechanism else {}
    merged: dict[str, Any] = {"type": "generic", "handled": True, **current, **(mechanism or {})}

    if mechanism and "data" in mechanism:
        merged["data"] = {**(current.get("data") or {}), **(mechanism["data"] or {})}

    first.mechanism = Mechanism(**merged)


def event_from_string(
    message: str,
    synthetic_exception: Any = None,
    attach_stacktrace: bool = False,
) -> Event:
    event = Event(message=message)

    if attach_stacktrace and synthetic_exception is not None:
        frames = parse_stack_frames(synthetic_exception)
        if frames:
            event.exception = ExceptionList(
                values=[ExceptionValue(value=message, stacktrace=Stacktrace(frames=frames))]
            )

    return event


def event_from_plain_object(
    value: Any,
    synthetic_exception: Any = None,
    is_unhandled_rejection: bool = False,
) -> Event:
    """Non-Error 객체 - 최상위 키로 그룹핑되도록 메시지 구성"""
    if is_event(value):
        exception_type = constructor_name(value)
    else:
        exception_type = "UnhandledRejection" if is_unhandled_rejection else "Error"

    kind = "promise rejection" if is_unhandled_rejection else "exception"
    keys = extract_exception_keys_for_message(value)

    exception = ExceptionValue(
        type=exception_type,
        value=f"Non-Error {kind} captured with keys: {keys}",
    )

    if synthetic_exception is not None:
        frames = parse_stack_frames(synthetic_exception)
        if frames:
            exception.stacktrace = Stacktrace(frames=frames)

    return Event(
        exception=ExceptionList(values=[exception]),
        extra={"__serialized__": normalize_to_size(value)},
    )


def _stringify(value: Any) -> str:
    return attempt(lambda: str(value), f"[object {type(value).__name__}]")


def _dom_error_message(value: Any) -> str:
    name = get_property(value, "name") or type(value).__name__
    message = get_property(value, "message")
    return f"{name}: {message}" if message else str(name)


def _build(
    value: Any,
    synthetic_exception: Any,
    attach_stacktrace: bool,
    is_unhandled_rejection: bool,
) -> Event:
    classified = classify(value)

    if classified.kind in (CapturedKind.ERROR_EVENT, CapturedKind.ERROR):
        return event_from_stacktrace(compute_stack_trace(classified.value))

    if classified.kind == CapturedKind.DOM_ERROR:
        # name/message 외에는 쓸 만한 정보가 없음
        message = _dom_error_message(classified.value)
        event = event_from_string(message, synthetic_exception, attach_stacktrace)
        add_exception_type_value(event, message)
        return event

    if classified.kind == CapturedKind.PLAIN_OBJECT:
        event = event_from_plain_object(classified.value, synthetic_exception, is_unhandled_rejection)
        add_exception_mechanism(event, {"synthetic": True})
        return event

    message = _stringify(classified.value)
    event = event_from_string(message, synthetic_exception, attach_stacktrace)
    add_exception_type_value(event, message)
    add_exception_mechanism(event, {"synthetic": True})
    return event


def event_from_unknown_input(
    value: Any,
    synthetic_exception: Any = None,
    attach_stacktrace: bool = False,
    is_unhandled_rejection: bool = False,
) -> Event:
    """임의의 캡처 값 → Event (절대 raise 하지 않음)"""
    try:
        return _build(value, synthetic_exception, attach_stacktrace, is_unhandled_rejection)
    except Exception:
        logger.warning("Failed to build event from %s, falling back to message", type(value).__name__, exc_info=True)
        message = _stringify(value)
        event = Event(message=message)
        add_exception_type_value(event, message)
        add_exception_mechanism(event, {"synthetic": True})
        return event


async def event_from_message(
    message: str,
    level: Severity | str = Severity.INFO,
    hint: EventHint | None = None,
    attach_stacktrace: bool = False,
) -> Event:
    """captureMessage 경로"""
    hint = hint or EventHint()
    event = event_from_string(message, hint.synthetic_exception, attach_stacktrace)
    event.level = Severity(level)
    if hint.event_id:
        event.event_id = hint.event_id
    return event


async def event_from_exception(
    exception: Any,
    hint: EventHint | None = None,
    attach_stacktrace: bool = False,
) -> Event:
    """captureException 경로"""
    hint = hint or EventHint()
    event = event_from_unknown_input(exception, hint.synthetic_exception, attach_stacktrace)
    add_exception_mechanism(event)  # 기본 {type: generic, handled: true}
    event.level = Severity.ERROR
    if hint.event_id:
        event.event_id = hint.event_id
    return event
