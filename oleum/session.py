from __future__ import annotations

import json
import logging
from typing import MutableMapping, Optional, Protocol

from oleum.config import SESSION_NAMESPACE
from oleum.errors import ValidationFailure
from oleum.models import User
from oleum.shell import reset_tabs

logger = logging.getLogger(__name__)

USER_KEY = "oleum_user"


class DeviceStorage(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class SessionStore:
    """
    Owns the logged-in user for the lifetime of the app.

    The in-memory copy lives in ``state`` (``st.session_state`` in the app) and is
    mirrored to ``storage``, which belongs to one browser, so a refresh keeps the
    user signed in. Lifecycle is none -> active -> none; there is no expiry.
    """

    def __init__(self, storage: DeviceStorage, state: MutableMapping) -> None:
        self.storage = storage
        self.state = state

    @property
    def user(self) -> Optional[User]:
        return current_user(self.state)

    @property
    def active(self) -> bool:
        return self.user is not None

    def save(self, user: User) -> None:
        self.storage.set(SESSION_NAMESPACE, json.dumps(user.to_dict()))
        self.state[USER_KEY] = user

    def restore(self) -> Optional[User]:
        if self.active:
            return self.user

        try:
            raw = self.storage.get(SESSION_NAMESPACE)
            if raw is None:
                return None
            payload = json.loads(raw)
            if not isinstance(payload, dict):
                raise ValidationFailure("Stored session is not an object.")
            user = User.from_row(payload)
        except (ValueError, TypeError) as e:
            logger.warning("Discarding unreadable stored session: %s", e)
            self.storage.remove(SESSION_NAMESPACE)
            return None

        self.state[USER_KEY] = user
        return user

    def clear(self) -> None:
        self.storage.remove(SESSION_NAMESPACE)
        self.state.pop(USER_KEY, None)
        reset_tabs(self.state)


def current_user(state: MutableMapping) -> Optional[User]:
    return state.get(USER_KEY)
