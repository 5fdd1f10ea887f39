import pytest
from pydantic import ValidationError

from errorshape.models.captured import ErrorEvent, JSError, get_property
from errorshape.models.event import Event, ExceptionList, ExceptionValue, Severity
from errorshape.models.frame import StackFrame, StackTrace


class TestStackFrame:
    """StackFrame 모델 테스트"""

    def test_defaults(self):
        frame = StackFrame(source_url="https://example.com/app.js")

        assert frame.function_name == "?"
        assert frame.arguments == []
        assert frame.line is None
        assert frame.column is None
        assert frame.is_application_code is True

    def test_frozen(self):
        frame = StackFrame(source_url="a.js")

        with pytest.raises(ValidationError):
            frame.line = 3

    def test_stack_trace_defaults(self):
        trace = StackTrace(exception_message="boom")

        assert trace.frames == []
        assert trace.failed is False


class TestJSError:
    def test_camel_case_payload(self):
        error = JSError.model_validate(
            {"name": "TypeError", "message": "x", "stack": "s", "framesToPop": 1, "columnNumber": 4, "fileName": "a.js"}
        )

        assert error.frames_to_pop == 1
        assert error.column_number == 4
        assert get_property(error, "framesToPop") == 1
        assert get_property(error, "fileName") == "a.js"

    def test_defaults(self):
        error = JSError()

        assert error.name == "Error"
        assert error.message == ""


class TestGetProperty:
    def test_dict(self):
        assert get_property({"a": 1}, "a") == 1
        assert get_property({"a": 1}, "b") is None

    def test_python_exception(self):
        try:
            try:
                raise KeyError("k")
            except KeyError as inner:
                raise ValueError("v") from inner
        except ValueError as e:
            error = e

        assert get_property(error, "name") == "ValueError"
        assert get_property(error, "message") == "v"
        assert isinstance(get_property(error, "cause"), KeyError)

    def test_event_fields(self):
        event = ErrorEvent(type="error", lineno=3)

        assert get_property(event, "lineno") == 3
        assert get_property(event, "missing") is None

    def test_none(self):
        assert get_property(None, "stack") is None


class TestEvent:
    def test_payload_excludes_none(self):
        event = Event(
            message="boom",
            level=Severity.WARNING,
            exception=ExceptionList(values=[ExceptionValue(type="Error", value="boom")]),
        )

        assert event.to_payload() == {
            "message": "boom",
            "level": "warning",
            "exception": {"values": [{"type": "Error", "value": "boom"}]},
            "extra": {},
        }

    def test_severity_values(self):
        assert [s.value for s in Severity] == ["fatal", "error", "warning", "log", "info", "debug"]
