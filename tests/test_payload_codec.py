import json
from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from api_errors import DecodingError, EncodingError
from utils.payload_codec import decode_result, encode_payload


class User(BaseModel):
    id: int
    name: str


@dataclass
class NewUser:
    name: str


def test_encode_plain_dict():
    assert json.loads(encode_payload({"name": "John Doe", "tags": [1, 2]})) == {
        "name": "John Doe",
        "tags": [1, 2],
    }


def test_encode_model_and_dataclass():
    assert json.loads(encode_payload(User(id=1, name="a"))) == {"id": 1, "name": "a"}
    assert json.loads(encode_payload(NewUser(name="b"))) == {"name": "b"}


def test_encode_unserializable_raises():
    with pytest.raises(EncodingError) as exc:
        encode_payload({"handle": object()})
    assert exc.value.__cause__ is not None


def test_decode_into_model():
    user = decode_result(b'{"id": 1, "name": "John Doe"}', User)
    assert user == User(id=1, name="John Doe")


def test_decode_into_typed_list():
    assert decode_result(b"[1, 2, 3]", list[int]) == [1, 2, 3]


def test_decode_invalid_json_raises():
    with pytest.raises(DecodingError):
        decode_result(b"not json", User)


def test_decode_empty_body_raises():
    with pytest.raises(DecodingError):
        decode_result(b"", User)


def test_decode_wrong_shape_raises():
    with pytest.raises(DecodingError):
        decode_result(b'{"id": "abc"}', User)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_encode_non_finite_float_raises(value):
    with pytest.raises(EncodingError):
        encode_payload({"v": value})


def test_encode_non_finite_float_nested_in_model_raises():
    class Reading(BaseModel):
        values: list[float]

    with pytest.raises(EncodingError):
        encode_payload([Reading(values=[1.0, float("nan")])])
