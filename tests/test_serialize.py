from errorshape.models.captured import PlatformEvent
from errorshape.services.serialize import (
    extract_exception_keys_for_message,
    json_size,
    normalize,
    normalize_to_size,
    truncate,
)


class TestExtractKeys:
    """Non-Error 메시지용 키 목록"""

    def test_sorted_keys(self):
        assert extract_exception_keys_for_message({"b": 2, "a": 1}) == "a, b"

    def test_no_keys(self):
        assert extract_exception_keys_for_message({}) == "[object has no keys]"

    def test_truncates_to_fitting_prefix(self):
        value = {"alpha": 1, "bravo": 2, "charlie": 3, "delta": 4}
        assert extract_exception_keys_for_message(value, max_length=20) == "alpha, bravo"

    def test_long_first_key(self):
        assert extract_exception_keys_for_message({"x" * 50: 1}, max_length=10) == "x" * 10 + "..."

    def test_event_model_keys(self):
        event = PlatformEvent(type="unhandledrejection", isTrusted=True)
        assert extract_exception_keys_for_message(event) == "isTrusted, type"


class TestNormalize:
    def test_primitives(self):
        assert normalize({"a": 1, "b": "x", "c": None, "d": True}) == {"a": 1, "b": "x", "c": None, "d": True}

    def test_depth_limit(self):
        value = {"a": {"b": {"c": {"d": 1}}, "list": [[1]]}}
        assert normalize(value, depth=2) == {"a": {"b": "[Object]", "list": "[Array]"}}

    def test_circular(self):
        value: dict = {"name": "loop"}
        value["self"] = value

        assert normalize(value) == {"name": "loop", "self": "[Circular ~]"}

    def test_shared_reference_is_not_circular(self):
        shared = {"x": 1}
        assert normalize({"a": shared, "b": shared}) == {"a": {"x": 1}, "b": {"x": 1}}

    def test_exception(self):
        assert normalize(ValueError("bad")) == {"name": "ValueError", "message": "bad", "stack": None}

    def test_function_and_object(self):
        class Widget:
            pass

        normalized = normalize({"fn": len, "obj": Widget()})
        assert normalized == {"fn": "[Function: len]", "obj": "[object Widget]"}

    def test_max_properties(self):
        normalized = normalize({str(i): i for i in range(5)}, max_properties=2)
        assert normalized == {"0": 0, "1": 1, "2": "[MaxProperties ~]"}


class TestNormalizeToSize:
    def test_fits(self):
        assert normalize_to_size({"a": 1}) == {"a": 1}

    def test_shrinks_depth_until_fits(self):
        value = {"a": {"b": "x" * 500}}
        normalized = normalize_to_size(value, depth=3, max_size=100)

        assert normalized == {"a": "[Object]"}
        assert json_size(normalized) <= 100

    def test_truncate(self):
        assert truncate("abcdef", 3) == "abc..."
        assert truncate("abc", 3) == "abc"
