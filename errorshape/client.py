"""Client - 캡처 API가 쓰는 이벤트 생성 진입점

transport/scope는 외부 협력자 몫이고, 여기서는 Event를 만들어 processor를 거친 뒤 돌려준다.
"""

import logging
from collections.abc import Callable
from typing import Any

from errorshape.core.config import Settings, settings as default_settings
from errorshape.models.event import Event, EventHint, Severity
from errorshape.services.event_builder import event_from_exception, event_from_message
from errorshape.services.linked_errors import LinkedErrors

logger = logging.getLogger(__name__)

EventProcessor = Callable[[Event, EventHint | None], Event | None]


class Client:
    def __init__(
        self,
        settings: Settings | None = None,
        processors: list[EventProcessor] | None = None,
    ):
        self.settings = settings or default_settings
        if processors is None:
            linked_errors = LinkedErrors(
                key=self.settings.linked_errors_key,
                limit=self.settings.linked_errors_limit,
            )
            processors = [linked_errors.process]
        self.processors = processors

    async def event_from_exception(self, exception: Any, hint: EventHint | None = None) -> Event:
        return await event_from_exception(exception, hint, self.settings.attach_stacktrace)

    async def event_from_message(
        self,
        message: str,
        level: Severity | str = Severity.INFO,
        hint: EventHint | None = None,
    ) -> Event:
        return await event_from_message(message, level, hint, self.settings.attach_stacktrace)

    async def prepare_event(self, event: Event, hint: EventHint | None = None) -> Event | None:
        """platform 기본값 설정 후 processor 순서대로 적용 (None 반환 시 이벤트 폐기)"""
        event.platform = event.platform or self.settings.platform

        for processor in self.processors:
            try:
                processed = processor(event, hint)
            except Exception:
                logger.warning("Event processor %r failed, skipping", processor, exc_info=True)
                continue

            if processed is None:
                logger.debug("Event dropped by processor %r", processor)
                return None
            event = processed

        return event

    async def capture_exception(self, exception: Any, hint: EventHint | None = None) -> Event | None:
        """event_from_exception → prepare_event (전송은 호출자 몫)"""
        hint = hint or EventHint()
        if hint.original_exception is None:
            hint = hint.model_copy(update={"original_exception": exception})

        event = await self.event_from_exception(exception, hint)
        return await self.prepare_event(event, hint)

    async def capture_message(
        self,
        message: str,
        level: Severity | str = Severity.INFO,
        hint: EventHint | None = None,
    ) -> Event | None:
        event = await self.event_from_message(message, level, hint)
        return await self.prepare_event(event, hint)
