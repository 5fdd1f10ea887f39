import re

from errorshape.models.frame import StackFrame
from errorshape.services.parsers.base import FrameMatcher

# 미니앱 런타임: at name (app-service.js:1:2  (닫는 괄호가 없을 수 있음)
MINIAPP_LINE = re.compile(r"^\s*at (\w.*) \((\w*.js):(\d*):(\d*)", re.IGNORECASE)


class MiniappMatcher(FrameMatcher):
    """미니앱 호스트 (WeChat, Alipay 등)"""

    @property
    def name(self) -> str:
        return "miniapp"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = MINIAPP_LINE.search(line)
        if not parts:
            return None

        func, url, lineno, colno = parts.groups()
        return self._build_frame(url=url, func=func, line=lineno, column=colno)
