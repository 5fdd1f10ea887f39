from abc import ABC, abstractmethod

from errorshape.models.frame import UNKNOWN_FUNCTION, StackFrame


class FrameMatcher(ABC):
    """스택 텍스트 한 줄 → StackFrame 매처 추상 클래스

    매처는 상태가 없고 패턴은 import 시점에 한 번만 컴파일된다.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """런타임 포맷 이름"""
        pass

    @abstractmethod
    def match(
        self,
        line: str,
        *,
        index: int = 0,
        column_number: int | None = None,
    ) -> StackFrame | None:
        """
        한 줄 매칭

        Args:
            line: 스택 텍스트 한 줄
            index: 전체 텍스트에서의 줄 번호 (0 = 맨 위)
            column_number: 예외 객체가 따로 노출하는 컬럼 (Firefox columnNumber)

        Returns:
            StackFrame | None: 매칭 실패 시 None
        """
        pass

    def _build_frame(
        self,
        url: str,
        func: str | None,
        args: list[str] | None = None,
        line: str | int | None = None,
        column: str | int | None = None,
    ) -> StackFrame:
        return StackFrame(
            source_url=url,
            function_name=func or UNKNOWN_FUNCTION,
            arguments=args or [],
            line=to_int(line),
            column=to_int(column),
        )


def to_int(value: str | int | None) -> int | None:
    """정수로 읽을 수 없으면 None"""
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def split_args(raw: str | None) -> list[str]:
    return raw.split(",") if raw else []
