"""
JSON Decoder

Decodes a JSON object onto an existing record, merging by presence:
- keys present in the payload overwrite the matching record attribute
- attributes whose key is absent keep their current value
- keys that are not mapped columns are ignored

Each value is validated against the column's Python type with pydantic in
strict JSON mode: an ISO string lands in a DateTime column as a datetime,
while "5", true or "abc" never land in an Integer column. All keys are
validated before any attribute is assigned, so a failed decode leaves the
record untouched.
"""

import functools
import json
from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, TypeAdapter, ValidationError
from sqlalchemy import Column, inspect

from autocrud.errors import DecodeError


@functools.lru_cache(maxsize=None)
def _adapter(python_type: type) -> TypeAdapter:
    return TypeAdapter(python_type, config=ConfigDict(strict=True))


def _coerce(key: str, column: Column, value: Any) -> Any:
    if value is None:
        # nullability is the store's business
        return None
    try:
        python_type = column.type.python_type
    except NotImplementedError:
        return value

    try:
        raw = json.dumps(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"invalid value for {key}: {e}") from e

    try:
        return _adapter(python_type).validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"invalid value for {key}: {e.errors()[0]['msg']}") from e


def _columns_by_key(model: type) -> dict[str, Column]:
    return {attr.key: attr.columns[0] for attr in inspect(model).column_attrs}


class JsonDecoder:
    """Decoder bound to one JSON payload (bytes, str, or an already parsed mapping)."""

    def __init__(self, payload: bytes | str | Mapping[str, Any]):
        self.payload = payload

    def _load(self) -> Any:
        if isinstance(self.payload, Mapping):
            return self.payload
        try:
            return json.loads(self.payload)
        except ValueError as e:
            raise DecodeError(f"malformed JSON payload: {e}") from e

    def decode(self, target: Any) -> None:
        data = self._load()
        if not isinstance(data, Mapping):
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

        columns = _columns_by_key(type(target))
        values = {
            key: _coerce(key, columns[key], value)
            for key, value in data.items()
            if key in columns
        }

        for key, value in values.items():
            setattr(target, key, value)
