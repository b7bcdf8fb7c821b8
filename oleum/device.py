from __future__ import annotations

import base64
import json
from typing import Mapping, MutableMapping, Optional

import streamlit as st

# Browsers cap cookie lifetime at 400 days.
COOKIE_MAX_AGE = 400 * 24 * 60 * 60

OVERRIDES_KEY = "device_overrides"
PENDING_KEY = "device_pending"


def encode_value(value: str) -> str:
    return base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")


def decode_value(raw: str) -> str:
    """Inverse of ``encode_value``. Raises ValueError on anything it did not produce."""
    return base64.urlsafe_b64decode(raw.encode("ascii")).decode("utf-8")


class BrowserStorage:
    """
    Key/value storage kept in the visitor's own browser as cookies.

    Reads come from the cookies the browser sent when it opened the page.
    Writes are queued in ``state`` and reach the browser through
    ``flush_script()``, which the shell renders on its next pass. Until the
    page is reloaded, writes made in this session shadow the request cookies.
    """

    def __init__(self, cookies: Mapping[str, str], state: MutableMapping) -> None:
        self.cookies = cookies
        self.state = state

    def _overrides(self) -> dict:
        return self.state.setdefault(OVERRIDES_KEY, {})

    def _pending(self) -> dict:
        return self.state.setdefault(PENDING_KEY, {})

    def get(self, key: str) -> Optional[str]:
        overrides = self._overrides()
        if key in overrides:
            raw = overrides[key]
        else:
            raw = self.cookies.get(key)
        if raw is None:
            return None
        return decode_value(raw)

    def set(self, key: str, value: str) -> None:
        raw = encode_value(value)
        self._overrides()[key] = raw
        self._pending()[key] = raw

    def remove(self, key: str) -> None:
        self._overrides()[key] = None
        self._pending()[key] = None

    def flush_script(self) -> Optional[str]:
        pending = self.state.pop(PENDING_KEY, None)
        if not pending:
            return None

        lines = []
        for key, raw in pending.items():
            if raw is None:
                cookie = f"{key}=; path=/; max-age=0; SameSite=Strict"
            else:
                cookie = f"{key}={raw}; path=/; max-age={COOKIE_MAX_AGE}; SameSite=Strict"
            lines.append(f"document.cookie = {json.dumps(cookie)};")
        return "<script>\n" + "\n".join(lines) + "\n</script>"


def browser_storage(state: MutableMapping) -> BrowserStorage:
    return BrowserStorage(st.context.cookies, state)


def flush(storage: BrowserStorage) -> None:
    script = storage.flush_script()
    if script:
        st.html(script, unsafe_allow_javascript=True)
