# utils/payload_codec.py - JSON encoding of payloads, typed decoding of results
import math
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from api_errors import DecodingError, EncodingError

T = TypeVar("T")

_any_adapter = TypeAdapter(Any)


def _reject_non_finite(value: Any) -> None:
    # JSON has no NaN/Infinity; pydantic would silently write null
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Out of range float value {value!r} is not JSON compliant")
    if isinstance(value, dict):
        for item in value.values():
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)


def encode_payload(payload: Any) -> bytes:
    """Serialize a payload (plain JSON values, pydantic models, dataclasses) to JSON bytes."""
    try:
        _reject_non_finite(_any_adapter.dump_python(payload))
        return _any_adapter.dump_json(payload)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(f"Could not encode payload of type {type(payload).__name__}: {e}") from e


def decode_result(body: bytes, result_type: Type[T]) -> T:
    """Parse a JSON body and validate it into ``result_type``."""
    try:
        return TypeAdapter(result_type).validate_json(body)
    except ValidationError as e:
        raise DecodingError(f"Could not decode response into {result_type!r}: {e}") from e
