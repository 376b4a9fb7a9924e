"""Tests for the default JSON transforms and callable adaptation."""

import json
from datetime import date

import pytest
from pydantic import BaseModel

from attrcodec.codecs import (
    CallableTransformer,
    JsonDeserializer,
    JsonSerializer,
    as_transformer,
)
from attrcodec.config import JsonCodecSettings
from attrcodec.core.interfaces import Transformer


class Point(BaseModel):
    x: int
    y: int


@pytest.mark.unit
class TestJsonSerializer:
    """Test JsonSerializer encoding."""

    def test_compact_by_default(self):
        """Test that output has no whitespace after separators."""
        assert JsonSerializer().transform({"a": 1, "b": [1, 2]}) == '{"a":1,"b":[1,2]}'

    def test_non_compact(self):
        """Test that compact can be turned off."""
        assert JsonSerializer(compact=False).transform({"a": 1}) == '{"a": 1}'

    def test_unicode_kept(self):
        """Test that non-ASCII text is not escaped by default."""
        assert JsonSerializer().transform({"name": "Zürich"}) == '{"name":"Zürich"}'
        assert (
            JsonSerializer(ensure_ascii=True).transform("Š") == '"\\u0160"'
        )

    def test_sort_keys(self):
        """Test that keys are sorted when requested."""
        assert JsonSerializer(sort_keys=True).transform({"b": 1, "a": 2}) == (
            '{"a":2,"b":1}'
        )

    def test_pydantic_model_encoded(self):
        """Test that pydantic models are dumped in JSON mode."""
        assert JsonSerializer().transform({"p": Point(x=1, y=2)}) == (
            '{"p":{"x":1,"y":2}}'
        )

    def test_unsupported_object_raises(self):
        """Test that values JSON cannot represent raise TypeError."""
        with pytest.raises(TypeError, match="date"):
            JsonSerializer().transform({"when": date(2024, 1, 1)})

    def test_from_settings(self):
        """Test construction from codec settings."""
        serializer = JsonSerializer.from_settings(
            JsonCodecSettings(ensure_ascii=True, sort_keys=True, compact=False)
        )
        assert serializer.ensure_ascii is True
        assert serializer.sort_keys is True
        assert serializer.compact is False


@pytest.mark.unit
class TestJsonDeserializer:
    """Test JsonDeserializer decoding."""

    def test_decodes_text(self):
        """Test that JSON text decodes to Python values."""
        assert JsonDeserializer().transform('{"a":1}') == {"a": 1}

    def test_decodes_bytes(self):
        """Test that bytes input is accepted."""
        assert JsonDeserializer().transform(b"[1,2]") == [1, 2]

    def test_empty_string_is_none(self):
        """Test that an empty string decodes to None by default."""
        assert JsonDeserializer().transform("") is None

    def test_empty_string_strict(self):
        """Test that an empty string fails when empty_as_none is off."""
        with pytest.raises(json.JSONDecodeError):
            JsonDeserializer(empty_as_none=False).transform("")

    def test_malformed_text_raises(self):
        """Test that invalid JSON raises a decode error."""
        with pytest.raises(json.JSONDecodeError):
            JsonDeserializer().transform("{not json")

    def test_non_text_raises(self):
        """Test that already decoded values are rejected."""
        with pytest.raises(TypeError):
            JsonDeserializer().transform({"a": 1})

    @pytest.mark.parametrize(
        "value",
        [
            {"a": 1},
            [1, "two", 3.5, None, True],
            "text",
            42,
            {"nested": {"list": [{"k": "v"}]}, "unicode": "Zürich"},
        ],
    )
    def test_round_trip(self, value):
        """Test that decode(encode(v)) == v for JSON-representable values."""
        assert JsonDeserializer().transform(JsonSerializer().transform(value)) == value


@pytest.mark.unit
class TestTransformerAdaptation:
    """Test adapting callables to the Transformer interface."""

    def test_callable_wrapped(self):
        """Test that a plain function is wrapped."""
        transformer = as_transformer(str.upper)
        assert isinstance(transformer, CallableTransformer)
        assert transformer.transform("abc") == "ABC"

    def test_transformer_returned_unchanged(self):
        """Test that objects with transform() are used directly."""
        serializer = JsonSerializer()
        assert as_transformer(serializer) is serializer
        assert isinstance(serializer, Transformer)

    def test_transformer_class_is_wrapped_as_callable(self):
        """Test that a Transformer class is treated as a factory callable."""
        transformer = as_transformer(JsonSerializer)
        assert isinstance(transformer, CallableTransformer)

    @pytest.mark.parametrize("candidate", [None, "json.dumps", 3])
    def test_non_callable_rejected(self, candidate):
        """Test that non-callables are rejected."""
        with pytest.raises(TypeError):
            as_transformer(candidate)

    def test_callable_transformer_requires_callable(self):
        """Test that CallableTransformer rejects non-callables."""
        with pytest.raises(TypeError, match="not callable"):
            CallableTransformer("nope")  # type: ignore[arg-type]

    def test_callable_transformer_repr(self):
        """Test the repr names the wrapped function."""
        assert repr(CallableTransformer(json.dumps)) == "CallableTransformer(dumps)"
