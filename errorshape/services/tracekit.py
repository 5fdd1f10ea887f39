"""스택트레이스 계산 - 캡처된 에러 값 → StackTrace

전략 순서:
  `stacktrace` 프로퍼티 (Opera)
    → `stack` 프로퍼티 (V8 / Gecko / WinJS / 미니앱)
      → Python 예외의 __traceback__
        → 실패 (failed=True, frames=[])

어떤 전략도 예외를 밖으로 던지지 않는다.
"""

import logging
import re
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

from errorshape.models.captured import get_property
from errorshape.models.frame import StackFrame, StackTrace
from errorshape.services.parsers import STACK_MATCHERS, STACKTRACE_MATCHERS, FrameMatcher

logger = logging.getLogger(__name__)

NO_ERROR_MESSAGE = "No error message"

# React 프로덕션 빌드 에러는 invariant 프레임 하나를 버린다
REACT_MINIFIED = re.compile(r"Minified React error #\d+;", re.IGNORECASE)

T = TypeVar("T")


def attempt(fn: Callable[[], T], default: T) -> T:
    """fn() 실행, 실패하면 default (파싱 계열 공통 실패 흡수)"""
    try:
        return fn()
    except Exception:
        logger.debug("Degraded: %s", getattr(fn, "__name__", fn), exc_info=True)
        return default


def match_line(
    line: str,
    *,
    index: int = 0,
    column_number: int | None = None,
    matchers: tuple[FrameMatcher, ...] = STACK_MATCHERS,
) -> StackFrame | None:
    """우선순위대로 매처 적용, 첫 매칭 반환"""
    for matcher in matchers:
        frame = matcher.match(line, index=index, column_number=column_number)
        if frame:
            return frame
    return None


def frames_from_stack(stack: str | None, column_number: int | None = None) -> list[StackFrame]:
    """`stack` 텍스트의 모든 줄 매칭 (매칭 안 되는 줄은 건너뜀)"""
    if not stack:
        return []

    frames: list[StackFrame] = []
    for i, line in enumerate(stack.split("\n")):
        frame = match_line(line, index=i, column_number=column_number)
        if frame:
            frames.append(frame)
    return frames


def frames_from_stacktrace(stacktrace: str | None) -> list[StackFrame]:
    """Opera `stacktrace` 텍스트 - 2줄 단위라 짝수 번째 줄만 매칭"""
    if not stacktrace:
        return []

    lines = stacktrace.split("\n")
    frames: list[StackFrame] = []
    for i in range(0, len(lines), 2):
        frame = match_line(lines[i], index=i, matchers=STACKTRACE_MATCHERS)
        if frame:
            frames.append(frame)
    return frames


def frames_from_traceback(ex: Any) -> list[StackFrame]:
    """Python 예외의 __traceback__ (가장 안쪽 호출이 먼저 오도록 뒤집음)"""
    tb = getattr(ex, "__traceback__", None) if isinstance(ex, BaseException) else None
    if tb is None:
        return []

    frames = [
        StackFrame(
            source_url=summary.filename,
            function_name=summary.name,
            line=summary.lineno,
            column=summary.colno + 1 if getattr(summary, "colno", None) is not None else None,
        )
        for summary in traceback.extract_tb(tb)
    ]
    frames.reverse()
    return frames


def extract_message(ex: Any) -> str:
    """message 필드 → message.error.message → 기본 문구"""
    message = get_property(ex, "message")
    if not message:
        return NO_ERROR_MESSAGE

    nested = get_property(get_property(message, "error"), "message")
    if isinstance(nested, str):
        return nested

    return message if isinstance(message, str) else str(message)


def get_pop_size(ex: Any) -> int:
    """앞(가장 안쪽)에서 버릴 프레임 수"""
    frames_to_pop = get_property(ex, "framesToPop")
    if isinstance(frames_to_pop, int) and not isinstance(frames_to_pop, bool):
        return max(frames_to_pop, 0)

    message = get_property(ex, "message")
    if isinstance(message, str) and REACT_MINIFIED.search(message):
        return 1

    return 0


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _name(ex: Any) -> str | None:
    name = get_property(ex, "name")
    if name is None:
        return None
    return name if isinstance(name, str) else str(name)


def compute_stack_trace(ex: Any) -> StackTrace:
    """캡처된 값 → StackTrace (절대 raise 하지 않음)"""
    # 일부 호스트는 stack을 지연 무효화하므로 다른 접근보다 먼저 읽는다
    stacktrace = attempt(lambda: _text(get_property(ex, "stacktrace")), None)
    stack = attempt(lambda: _text(get_property(ex, "stack")), None)
    pop_size = attempt(lambda: get_pop_size(ex), 0)
    column_number = attempt(lambda: get_property(ex, "columnNumber"), None)
    if not isinstance(column_number, int) or isinstance(column_number, bool):
        column_number = None

    strategies: tuple[Callable[[], list[StackFrame]], ...] = (
        lambda: frames_from_stacktrace(stacktrace),
        lambda: frames_from_stack(stack, column_number),
        lambda: frames_from_traceback(ex),
    )

    name = attempt(lambda: _name(ex), None)
    message = attempt(lambda: extract_message(ex), NO_ERROR_MESSAGE)

    for strategy in strategies:
        frames = attempt(strategy, [])
        if frames:
            return StackTrace(
                exception_name=name,
                exception_message=message,
                frames=frames[pop_size:],
            )

    return StackTrace(
        exception_name=name,
        exception_message=message,
        frames=[],
        failed=True,
    )
