from pydantic import BaseModel, Field

# 함수명을 알 수 없을 때
UNKNOWN_FUNCTION = "?"


class StackFrame(BaseModel):
    """스택 텍스트 한 줄에서 추출한 프레임"""

    source_url: str
    function_name: str = UNKNOWN_FUNCTION
    arguments: list[str] = Field(default_factory=list)
    line: int | None = None
    column: int | None = None
    is_application_code: bool = True  # vendor/library 구분은 하지 않음

    model_config = {"frozen": True}


class StackTrace(BaseModel):
    """추출 결과 (트리밍/정렬 전)

    frames 순서 = 원본 텍스트 순서 (가장 안쪽 호출이 먼저)
    """

    exception_name: str | None = None
    exception_message: str
    frames: list[StackFrame] = Field(default_factory=list)
    failed: bool = False
