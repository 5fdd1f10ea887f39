"""Non-Error 캡처 값 직렬화 (크기 제한)

순환 참조/깊은 객체 그래프는 끝까지 따라가지 않고 잘라낸다.
"""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from errorshape.core.config import settings
from errorshape.models.captured import get_property

MAX_PROPERTIES = 1000


def truncate(text: str, max_length: int) -> str:
    if max_length <= 0 or len(text) <= max_length:
        return text
    return f"{text[:max_length]}..."


def shallow_dump(model: BaseModel) -> dict[str, Any]:
    """모델 최상위 필드만 (alias 기준, 하위 값은 그대로)"""
    fields = {field.alias or name: getattr(model, name) for name, field in type(model).model_fields.items()}
    return {**fields, **(model.model_extra or {})}


def object_keys(value: Any) -> list[str]:
    """최상위 키 목록 (dict / pydantic 모델)"""
    if isinstance(value, Mapping):
        return [str(key) for key in value.keys()]
    if isinstance(value, BaseModel):
        return list(shallow_dump(value).keys())
    return []


def extract_exception_keys_for_message(value: Any, max_length: int | None = None) -> str:
    """
    정렬된 최상위 키를 ", "로 이어 max_length 안에 들어가는 만큼만

    예: {"b": 1, "a": 2} → "a, b"
    """
    max_length = settings.keys_max_length if max_length is None else max_length

    keys = sorted(object_keys(value))
    if not keys:
        return "[object has no keys]"

    if len(keys[0]) >= max_length:
        return truncate(keys[0], max_length)

    for included in range(len(keys), 0, -1):
        serialized = ", ".join(keys[:included])
        if len(serialized) > max_length:
            continue
        if included == len(keys):
            return serialized
        return truncate(serialized, max_length)

    return ""


def normalize(value: Any, depth: int | None = None, max_properties: int = MAX_PROPERTIES) -> Any:
    """임의 값 → JSON 호환 값 (depth 이후는 "[Object]" / "[Array]")"""
    depth = settings.serialize_depth if depth is None else depth
    return _visit(value, depth, max_properties, set())


def _visit(value: Any, depth: int, max_properties: int, memo: set[int]) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    # 변환 전 원본 기준으로 순환 판별
    ref = id(value)

    if isinstance(value, BaseModel):
        value = shallow_dump(value)
    elif isinstance(value, BaseException):
        value = {
            "name": get_property(value, "name"),
            "message": get_property(value, "message"),
            "stack": get_property(value, "stack"),
        }
    elif callable(value):
        return f"[Function: {getattr(value, '__name__', '<anonymous>')}]"

    is_mapping = isinstance(value, Mapping)
    is_sequence = isinstance(value, (list, tuple, set, frozenset))
    if not is_mapping and not is_sequence:
        return f"[object {type(value).__name__}]"

    if depth <= 0:
        return "[Object]" if is_mapping else "[Array]"

    if ref in memo:
        return "[Circular ~]"
    memo.add(ref)

    try:
        if is_mapping:
            normalized: dict[str, Any] = {}
            for count, (key, item) in enumerate(value.items()):
                if count >= max_properties:
                    normalized[str(key)] = "[MaxProperties ~]"
                    break
                normalized[str(key)] = _visit(item, depth - 1, max_properties, memo)
            return normalized

        normalized_items: list[Any] = []
        for count, item in enumerate(value):
            if count >= max_properties:
                normalized_items.append("[MaxProperties ~]")
                break
            normalized_items.append(_visit(item, depth - 1, max_properties, memo))
        return normalized_items
    finally:
        memo.discard(ref)


def json_size(value: Any) -> int:
    return len(json.dumps(value, ensure_ascii=False, default=str).encode("utf-8"))


def normalize_to_size(value: Any, depth: int | None = None, max_size: int | None = None) -> Any:
    """직렬화 결과가 max_size(bytes)를 넘으면 depth를 줄여 다시 시도"""
    depth = settings.serialize_depth if depth is None else depth
    max_size = settings.serialize_max_size if max_size is None else max_size

    normalized = normalize(value, depth)
    if depth <= 0 or json_size(normalized) <= max_size:
        return normalized

    return normalize_to_size(value, depth - 1, max_size)
