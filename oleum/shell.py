from __future__ import annotations

from enum import Enum
from typing import Any, Callable, MutableMapping, TypeVar

T = TypeVar("T")


class Tab(str, Enum):
    ORDER = "order"
    NETWORK = "network"
    TRIPS = "trips"


TAB_KEY = "active_tab"
MOUNTED_KEY = "mounted_tab"
DEFAULT_TAB = Tab.ORDER

TAB_TITLES = {
    Tab.ORDER: "New Order",
    Tab.NETWORK: "Network",
    Tab.TRIPS: "Trips",
}


def _screen_prefix(tab: Tab) -> str:
    return f"{tab.value}__"


def screen_key(tab: Tab, name: str) -> str:
    """Session-state key for data owned by one screen."""
    return f"{_screen_prefix(tab)}{name}"


def active_tab(state: MutableMapping) -> Tab:
    return Tab(state.get(TAB_KEY, DEFAULT_TAB))


def route(state: MutableMapping, requested: Tab) -> Tab:
    """
    Tab to show for a request of ``requested``.

    Until a screen has been mounted (a fresh session, or right after sign-out)
    the recorded active tab wins; there are no deep links.
    """
    if MOUNTED_KEY not in state:
        return active_tab(state)
    return requested


def enter_screen(state: MutableMapping, tab: Tab) -> bool:
    """
    Record ``tab`` as the active tab.

    Coming from another tab counts as a fresh mount: whatever the screen fetched
    last time is dropped so it loads again. Returns True on a fresh mount.
    """
    state[TAB_KEY] = tab
    if state.get(MOUNTED_KEY) == tab:
        return False

    prefix = _screen_prefix(tab)
    for key in [k for k in list(state.keys()) if str(k).startswith(prefix)]:
        del state[key]
    state[MOUNTED_KEY] = tab
    return True


def reset_tabs(state: MutableMapping) -> None:
    state[TAB_KEY] = DEFAULT_TAB
    state.pop(MOUNTED_KEY, None)


def screen_cache(state: MutableMapping, tab: Tab, name: str, loader: Callable[[], T]) -> T:
    """Load once per mount; later reruns of the same screen reuse the result."""
    key = screen_key(tab, name)
    if key not in state:
        state[key] = loader()
    return state[key]


def forget(state: MutableMapping, tab: Tab, name: str) -> Any:
    return state.pop(screen_key(tab, name), None)
