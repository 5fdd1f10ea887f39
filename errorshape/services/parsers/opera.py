"""Opera 10/11 `stacktrace` 프로퍼티 매처

stacktrace 텍스트는 2줄 단위 (메시지 줄 + 상세 줄) 이고 짝수 번째 줄만 매칭한다.
"""

import re

from errorshape.models.frame import StackFrame
from errorshape.services.parsers.base import FrameMatcher, split_args

OPERA10_LINE = re.compile(
    r" line (\d+).*script (?:in )?(\S+)(?:: in function (\S+))?$",
    re.IGNORECASE,
)

OPERA11_LINE = re.compile(
    r" line (\d+), column (\d+)\s*"
    r"(?:in (?:<anonymous function: ([^>]+)>|([^\)]+))\((.*)\))? in (.*):\s*$",
    re.IGNORECASE,
)


class Opera10Matcher(FrameMatcher):
    @property
    def name(self) -> str:
        return "opera10"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = OPERA10_LINE.search(line)
        if not parts:
            return None

        lineno, url, func = parts.groups()
        return self._build_frame(url=url, func=func, line=lineno)


class Opera11Matcher(FrameMatcher):
    @property
    def name(self) -> str:
        return "opera11"

    def match(self, line, *, index=0, column_number=None) -> StackFrame | None:
        parts = OPERA11_LINE.search(line)
        if not parts:
            return None

        lineno, colno, anonymous, func, args, url = parts.groups()
        return self._build_frame(
            url=url,
            func=anonymous or func,
            args=split_args(args),
            line=lineno,
            column=colno,
        )
