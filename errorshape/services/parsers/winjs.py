import re

from errorshape.models.frame import StackFrame
from errorshape.services.parsers.base import FrameMatcher

WINJS_LINE = re.compile(
    r"^\s*at (?:((?:\[object object\])?.+) )?\(?"
    r"((?:file|ms-appx|https?|webpack|blob):.*?):(\d+)(?::(\d+))?\)?\s*$",
    re.IGNORECASE,
)


class WinJSMatcher(FrameMatcher):
    """Chakra (IE10+, WinJS) - 컬럼 없는 줄이 있음"""

    @property
    def name(self) -> str:
        return "winjs"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = WINJS_LINE.search(line)
        if not parts:
            return None

        func, url, lineno, colno = parts.groups()
        return self._build_frame(url=url, func=func, line=lineno, column=colno)
