from errorshape.services.parsers.base import FrameMatcher
from errorshape.services.parsers.chrome import ChromeMatcher
from errorshape.services.parsers.gecko import GeckoMatcher
from errorshape.services.parsers.miniapp import MiniappMatcher
from errorshape.services.parsers.opera import Opera10Matcher, Opera11Matcher
from errorshape.services.parsers.winjs import WinJSMatcher

# `stack` 프로퍼티 매처 (우선순위 순, 첫 매칭 사용)
STACK_MATCHERS: tuple[FrameMatcher, ...] = (
    ChromeMatcher(),
    WinJSMatcher(),
    GeckoMatcher(),
    MiniappMatcher(),
)

# `stacktrace` 프로퍼티 매처 (Opera)
STACKTRACE_MATCHERS: tuple[FrameMatcher, ...] = (
    Opera10Matcher(),
    Opera11Matcher(),
)

_MATCHERS: dict[str, FrameMatcher] = {m.name: m for m in STACK_MATCHERS + STACKTRACE_MATCHERS}


def get_matcher(name: str) -> FrameMatcher:
    """이름별 매처 반환"""
    matcher = _MATCHERS.get(name)
    if not matcher:
        raise ValueError(f"Unknown stack format: {name}")
    return matcher
