"""
Tests for groqkit.json_utils
"""
import pytest

from groqkit.exceptions import DecodingError, EncodingError
from groqkit.json_utils import from_wire, strip_none, to_json
from groqkit.models import Model, Usage


class TestEncoding:
    def test_strip_none_is_recursive(self):
        assert strip_none({"a": None, "b": {"c": None, "d": 1}, "e": [{"f": None}]}) == {"b": {"d": 1}, "e": [{}]}

    def test_to_json_is_compact(self):
        assert to_json(Usage(prompt_tokens=1, total_tokens=3)) == '{"prompt_tokens":1,"total_tokens":3}'

    def test_to_json_none(self):
        assert to_json(None) is None

    def test_to_json_keeps_unicode(self):
        assert to_json({"text": "héllo"}) == '{"text":"héllo"}'

    @pytest.mark.parametrize("payload", [{"bad": object()}, {"nan": float("nan")}])
    def test_unserializable(self, payload):
        with pytest.raises(EncodingError):
            to_json(payload)


class TestDecoding:
    def test_from_wire(self):
        model = from_wire({"id": "m", "context_window": 8192, "unknown": True}, Model)

        assert model.id == "m"
        assert model.context_window == 8192
        assert model.owned_by is None

    def test_from_wire_requires_object(self):
        with pytest.raises(DecodingError, match="Expected a JSON object"):
            from_wire(["m"], Model)
