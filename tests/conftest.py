import pytest

from errorshape.models.captured import JSError

CHROME_STACK = (
    "TypeError: Cannot read property 'length' of undefined\n"
    "    at captureException (https://cdn.example.com/sdk.js:10:3)\n"
    "    at render (https://example.com/static/app.js:52:17)\n"
    "    at Object.onClick (https://example.com/static/app.js:120:9)\n"
    "    at sentryWrapped (https://cdn.example.com/sdk.js:88:1)"
)

GECKO_STACK = (
    "render@https://example.com/static/app.js:52:17\n"
    "onClick@https://example.com/static/app.js:120:9\n"
    "@https://example.com/static/app.js:3:1"
)


@pytest.fixture
def chrome_error() -> JSError:
    """Chrome 스타일 stack을 가진 Error (SDK 진입점/래퍼 프레임 포함)"""
    return JSError(
        name="TypeError",
        message="Cannot read property 'length' of undefined",
        stack=CHROME_STACK,
    )


@pytest.fixture
def gecko_error() -> JSError:
    return JSError(name="TypeError", message="x is undefined", stack=GECKO_STACK)


@pytest.fixture
def synthetic_exception() -> JSError:
    """호출 위치 스택 복구용 synthetic exception"""
    return JSError(
        message="synthetic",
        stack=(
            "Error: synthetic\n"
            "    at captureMessage (https://cdn.example.com/sdk.js:20:5)\n"
            "    at onLoad (https://example.com/static/page.js:7:11)"
        ),
    )


def _make_stack(count: int) -> str:
    lines = ["Error: deep"]
    lines += [f"    at fn{i} (https://example.com/app.js:{i + 1}:1)" for i in range(count)]
    return "\n".join(lines)


@pytest.fixture
def make_stack():
    """count개 프레임을 가진 chrome stack 생성기 (fn0이 가장 안쪽)"""
    return _make_stack
