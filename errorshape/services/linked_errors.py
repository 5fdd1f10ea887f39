"""연결된 에러 (Error.cause 체인) 처리"""

import logging
from typing import Any

from errorshape.core.config import settings
from errorshape.models.captured import get_property, is_error
from errorshape.models.event import Event, EventHint, ExceptionValue
from errorshape.services.frames import exception_from_stacktrace
from errorshape.services.tracekit import compute_stack_trace

logger = logging.getLogger(__name__)


def walk_error_tree(
    error: Any,
    key: str | None = None,
    limit: int | None = None,
    stack: list[ExceptionValue] | None = None,
) -> list[ExceptionValue]:
    """
    error[key]를 따라가며 예외 목록 생성 (root 제외, 오래된 cause가 먼저)

    순환 참조는 따로 추적하지 않고 limit으로만 끊는다.
    """
    key = key or settings.linked_errors_key
    limit = limit or settings.linked_errors_limit
    stack = stack or []

    linked = get_property(error, key)
    if not is_error(linked) or len(stack) + 1 >= limit:
        return stack

    exception = exception_from_stacktrace(compute_stack_trace(linked))
    return walk_error_tree(linked, key, limit, [exception, *stack])


class LinkedErrors:
    """이벤트 프로세서 - 원본 예외의 cause 체인을 exception.values 앞에 붙임"""

    name = "LinkedErrors"

    def __init__(self, key: str | None = None, limit: int | None = None):
        self.key = key or settings.linked_errors_key
        self.limit = limit or settings.linked_errors_limit

    def process(self, event: Event, hint: EventHint | None = None) -> Event | None:
        if event.exception is None or not event.exception.values:
            return event
        if hint is None or not is_error(hint.original_exception):
            return event

        linked = walk_error_tree(hint.original_exception, self.key, self.limit)
        if linked:
            logger.debug("Linked %d cause(s) via %r", len(linked), self.key)
        event.exception.values = [*linked, *event.exception.values]
        return event
