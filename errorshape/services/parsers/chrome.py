import re

from errorshape.models.frame import StackFrame
from errorshape.services.parsers.base import FrameMatcher

# at name (url:line:col) / at url:line:col
CHROME_LINE = re.compile(
    r"^\s*at (?:(.*?) ?\()?"
    r"((?:file|https?|blob|chrome-extension|native|eval|webpack|<anonymous>|[-a-z]+:|/).*?)"
    r"(?::(\d+))?(?::(\d+))?\)?\s*$",
    re.IGNORECASE,
)

# eval at name (eval at outer (url:1:2), <anonymous>:3:4) 안쪽 위치
CHROME_EVAL = re.compile(r"\((\S*)(?::(\d+))(?::(\d+))\)")


class ChromeMatcher(FrameMatcher):
    """V8 (Chrome, Node, Edge Chromium)"""

    @property
    def name(self) -> str:
        return "chrome"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = CHROME_LINE.search(line)
        if not parts:
            return None

        func, url, lineno, colno = parts.groups()
        is_native = url.startswith("native")

        if url.startswith("eval"):
            inner = CHROME_EVAL.search(url)
            if inner:
                url, lineno, colno = inner.groups()

        return self._build_frame(
            url=url,
            func=func,
            args=[url] if is_native else [],
            line=lineno,
            column=colno,
        )
