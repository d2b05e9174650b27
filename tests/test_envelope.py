import json

import pytest
from pydantic import ValidationError

from oneworkloc.errors import FormatError
from oneworkloc.models.envelope import CURRENT_VERSION, Envelope, Metadata, deserialize, new_metadata, serialize


def make_envelope(data="hello", **meta):
    fields = {"type": "text", "timestamp": 1700000000000, "version": 3, **meta}
    return Envelope(meta=Metadata(**fields), data=data)


class TestMetadata:
    def test_language_required_for_code(self):
        with pytest.raises(ValidationError):
            Metadata(type="code", timestamp=1, version=3)

    def test_language_rejected_for_other_types(self):
        with pytest.raises(ValidationError):
            Metadata(type="text", language="python", timestamp=1, version=3)

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            Metadata(type="video", timestamp=1, version=3)

    def test_version_must_be_positive(self):
        with pytest.raises(ValidationError):
            Metadata(type="text", timestamp=1, version=0)

    def test_new_metadata_stamps_milliseconds(self):
        meta = new_metadata("code", language="python")
        assert meta.version == CURRENT_VERSION
        assert meta.language == "python"
        assert meta.timestamp > 1_600_000_000_000


class TestSerialize:
    def test_canonical_form(self):
        raw = serialize(make_envelope())
        assert raw == b'{"meta":{"type":"text","timestamp":1700000000000,"version":3},"data":"hello"}'

    def test_language_follows_type(self):
        raw = serialize(make_envelope(data="x", type="code", language="rust"))
        assert raw.startswith(b'{"meta":{"type":"code","language":"rust","timestamp":')

    def test_non_ascii_kept_literal(self):
        raw = serialize(make_envelope(data="日本"))
        assert "日本".encode("utf-8") in raw

    def test_reserialize_is_byte_identical(self):
        for envelope in (make_envelope(), make_envelope(data="a\n\t\"b\"", type="code", language="go")):
            raw = serialize(envelope)
            assert serialize(deserialize(raw)) == raw
            assert deserialize(raw) == envelope


class TestDeserialize:
    @pytest.mark.parametrize("raw", [
        b"not json",
        b"[]",
        b'{"data":"x"}',
        b'{"meta":{"type":"text","timestamp":1,"version":3}}',
        b'{"meta":{"type":"text","timestamp":"1","version":3},"data":"x"}',
        b'{"meta":{"type":"text","timestamp":1,"version":3},"data":5}',
        b'{"meta":{"type":"text","timestamp":true,"version":3},"data":"x"}',
        b'{"meta":{"type":"code","timestamp":1,"version":3},"data":"x"}',
        b'{"meta":{"type":"text","timestamp":1,"version":3},"data":"x","extra":1}',
    ])
    def test_invalid_envelopes(self, raw):
        with pytest.raises(FormatError):
            deserialize(raw)

    def test_accepts_str(self):
        payload = {"meta": {"type": "json", "timestamp": 5, "version": 1}, "data": "{}"}
        envelope = deserialize(json.dumps(payload))
        assert envelope.meta.type == "json"
        assert envelope.data == "{}"


def test_lone_surrogate_in_data_rejected():
    with pytest.raises(ValidationError):
        make_envelope(data="x\udc80y")
