import re

from errorshape.models.frame import StackFrame
from errorshape.services.parsers.base import FrameMatcher, split_args

# name(args)@url:line:col
GECKO_LINE = re.compile(
    r"^\s*(.*?)(?:\((.*?)\))?(?:^|@)?"
    r"((?:file|https?|blob|chrome|webpack|resource|moz-extension).*?:/.*?"
    r"|\[native code\]|[^@]*(?:bundle|\d+\.js))"
    r"(?::(\d+))?(?::(\d+))?\s*$",
    re.IGNORECASE,
)

# url line 10 > eval line 2 > eval
GECKO_EVAL = re.compile(r"(\S+) line (\d+)(?: > eval line \d+)* > eval", re.IGNORECASE)


class GeckoMatcher(FrameMatcher):
    """SpiderMonkey (Firefox), Safari/JavaScriptCore"""

    @property
    def name(self) -> str:
        return "gecko"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = GECKO_LINE.search(line)
        if not parts:
            return None

        func, args, url, lineno, colno = parts.groups()

        inner = GECKO_EVAL.search(url) if " > eval" in url else None
        if inner:
            func = func or "eval"
            url, lineno = inner.groups()
            colno = None
        elif index == 0 and not colno and column_number is not None:
            # 맨 위 줄에 컬럼이 없으면 예외 객체의 columnNumber (0-based) 사용
            colno = column_number + 1

        return self._build_frame(
            url=url,
            func=func,
            args=split_args(args),
            line=lineno,
            column=colno,
        )
