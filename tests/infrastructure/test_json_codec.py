import json

import pytest

from daocore.domain.entities.quote import Quote
from daocore.domain.entities.status import Coordinates, Status
from daocore.domain.exceptions import CodecError
from daocore.infrastructure.codec.json_codec import JsonCodec


def test_decode_status_with_numeric_id_and_extra_fields(codec):
    text = json.dumps(
        {
            "id": 1097607853932564480,
            "id_str": "1097607853932564480",
            "text": "test with loc223",
            "created_at": "Mon Feb 18 21:24:39 +0000 2019",
            "coordinates": {"type": "Point", "coordinates": [1.0, -1.0]},
            "retweet_count": 0,
            "favorite_count": 0,
            "favorited": False,
            "retweeted": False,
            "entities": {"hashtags": []},
        }
    )

    status = codec.decode(text, Status)

    assert status.id == "1097607853932564480"
    assert status.coordinates == Coordinates((1.0, -1.0))
    assert status.favorited is False


def test_decode_status_keeps_id_and_id_str_apart(codec):
    status = codec.decode('{"id_str": "99", "text": "hi"}', Status)
    assert status.id is None
    assert status.id_str == "99"
    assert status.coordinates is None


@pytest.mark.parametrize(
    "text",
    [
        "",
        "{not json",
        '{"id": "1"}',
        '{"text": "hi", "coordinates": {"coordinates": [1.0]}}',
        '{"text": "hi", "coordinates": {"coordinates": ["a", "b"]}}',
    ],
)
def test_decode_malformed_status_is_codec_error(codec, text):
    with pytest.raises(CodecError):
        codec.decode(text, Status)


def test_decode_unknown_shape_is_codec_error(codec):
    with pytest.raises(CodecError):
        codec.decode("{}", dict)


def test_status_survives_encode_then_decode(codec):
    original = Status(
        text="hello",
        coordinates=Coordinates((-73.9, 40.7)),
        id="42",
        created_at="Mon Feb 18 21:24:39 +0000 2019",
        retweet_count=3,
    )
    assert codec.decode(codec.encode(original), Status) == original


def test_encoded_status_omits_absent_fields(codec):
    payload = json.loads(codec.encode(Status(text="hello")))
    assert payload == {"text": "hello"}


def test_quote_survives_encode_then_decode():
    codec = JsonCodec()
    quote = Quote("MSFT", 410.5, 410.4, 300, 410.6, 120)
    assert codec.decode(codec.encode(quote), Quote) == quote


def test_encode_unknown_entity_is_codec_error(codec):
    with pytest.raises(CodecError):
        codec.encode(object())


@pytest.mark.parametrize(
    "original",
    [
        Status(text="x", id_str="99"),
        Status(text="x", id="42", id_str="42"),
        Status(text="x", id="42"),
    ],
)
def test_status_ids_survive_encode_then_decode(codec, original):
    assert codec.decode(codec.encode(original), Status) == original


@pytest.mark.parametrize(
    "entity",
    [
        Status(text="hi", coordinates=Coordinates((1.0,))),
        Status(text="hi", coordinates=Coordinates(("a", "b"))),
        Quote("AAPL", 1.0, 1.0, 1.5, 1.0, 1),
    ],
)
def test_encode_malformed_entity_is_codec_error(codec, entity):
    with pytest.raises(CodecError) as exc_info:
        codec.encode(entity)
    assert exc_info.value.__cause__ is not None
