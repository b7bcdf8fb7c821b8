from __future__ import annotations

import pytest

from oleum.device import COOKIE_MAX_AGE, BrowserStorage, decode_value, encode_value


def test_values_survive_cookie_encoding():
    text = '{"id": 1, "name": "Rania; \\"Zeit\\" = oil"}'
    raw = encode_value(text)

    assert ";" not in raw and " " not in raw and '"' not in raw
    assert decode_value(raw) == text


def test_garbage_is_rejected():
    with pytest.raises(ValueError):
        decode_value("é")


def test_writes_are_queued_until_flushed():
    state = {}
    storage = BrowserStorage({}, state)

    storage.set("k", "v")
    script = storage.flush_script()

    assert script.startswith("<script>")
    assert f"k={encode_value('v')}; path=/; max-age={COOKIE_MAX_AGE}" in script
    assert storage.flush_script() is None
    assert storage.get("k") == "v"


def test_removal_shadows_request_cookie():
    storage = BrowserStorage({"k": encode_value("old")}, {})

    assert storage.get("k") == "old"
    storage.remove("k")

    assert storage.get("k") is None
    assert "k=; path=/; max-age=0" in storage.flush_script()


def test_nothing_to_flush():
    assert BrowserStorage({"k": encode_value("v")}, {}).flush_script() is None
