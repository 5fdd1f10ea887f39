from errorshape.core.config import settings
from errorshape.models.event import Event, EventFrame, ExceptionList, ExceptionValue, Stacktrace
from errorshape.models.frame import UNKNOWN_FUNCTION, StackFrame, StackTrace

UNRECOVERABLE_ERROR = "Unrecoverable error caught"


def prepare_frames_for_event(
    frames: list[StackFrame],
    *,
    limit: int | None = None,
    capture_markers: tuple[str, ...] | None = None,
    wrapper_marker: str | None = None,
) -> list[EventFrame]:
    """
    StackTrace.frames → 전송용 프레임

    - 맨 위(가장 안쪽) 프레임이 SDK capture 호출이면 제거
    - 맨 아래(가장 바깥) 프레임이 SDK 래퍼면 제거
    - 안쪽부터 limit개만 남기고 뒤집음 (crash 프레임이 마지막)
    """
    if not frames:
        return []

    limit = settings.stacktrace_limit if limit is None else limit
    capture_markers = settings.capture_markers if capture_markers is None else capture_markers
    wrapper_marker = settings.wrapper_marker if wrapper_marker is None else wrapper_marker

    local = list(frames)

    first_function = local[0].function_name or ""
    if any(marker in first_function for marker in capture_markers):
        local = local[1:]

    if local:
        last_function = local[-1].function_name or ""
        if wrapper_marker and wrapper_marker in last_function:
            local = local[:-1]

    if not local:
        return []

    # url 없는 프레임은 첫 프레임 url로 근사
    fallback_url = local[0].source_url

    prepared = [
        EventFrame(
            filename=frame.source_url or fallback_url,
            function=frame.function_name or UNKNOWN_FUNCTION,
            lineno=frame.line,
            colno=frame.column,
            in_app=True,
        )
        for frame in local[:limit]
    ]
    prepared.reverse()
    return prepared


def exception_from_stacktrace(stacktrace: StackTrace) -> ExceptionValue:
    """StackTrace → ExceptionValue (프레임이 없으면 stacktrace 필드 생략)"""
    frames = prepare_frames_for_event(stacktrace.frames)

    exception = ExceptionValue(
        type=stacktrace.exception_name,
        value=stacktrace.exception_message,
    )

    if frames:
        exception.stacktrace = Stacktrace(frames=frames)

    if exception.type is None and exception.value == "":
        exception.value = UNRECOVERABLE_ERROR

    return exception


def event_from_stacktrace(stacktrace: StackTrace) -> Event:
    return Event(exception=ExceptionList(values=[exception_from_stacktrace(stacktrace)]))
