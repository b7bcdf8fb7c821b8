from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx
import streamlit as st
from postgrest.exceptions import APIError
from supabase import Client, create_client

from oleum.config import Settings
from oleum.errors import TransportFailure

logger = logging.getLogger(__name__)

# PostgREST answers an empty maybe_single() with this code on older clients.
_NO_CONTENT = "204"


def _connect(url: Optional[str], key: Optional[str]) -> Client:
    if not url or not key:
        raise TransportFailure("Backend is not configured. Set SUPABASE_URL and SUPABASE_KEY.")
    try:
        client = create_client(url, key)
    except Exception as e:  # supabase raises bare exceptions for malformed URLs/keys
        raise TransportFailure(f"Could not connect to backend: {e}") from e
    logger.info("Connected to backend at %s", url)
    return client


@st.cache_resource
def _cached_client(url: Optional[str], key: Optional[str]) -> Client:
    return _connect(url, key)


def get_client(settings: Settings) -> Client:
    return _cached_client(settings.supabase_url, settings.supabase_key)


def _execute(query, table: str):
    try:
        return query.execute()
    except APIError as e:
        logger.warning("Backend rejected request on %s: %s", table, e.message)
        raise TransportFailure(e.message or "Backend request failed") from e
    except httpx.HTTPError as e:
        logger.warning("Backend unreachable for %s: %s", table, e)
        raise TransportFailure(str(e) or "Network error") from e


def _filtered(client: Client, table: str, columns: str, eq: Optional[Mapping[str, Any]]):
    query = client.table(table).select(columns)
    for column, value in (eq or {}).items():
        query = query.eq(column, value)
    return query


def select(
    client: Client,
    table: str,
    *,
    columns: str = "*",
    eq: Optional[Mapping[str, Any]] = None,
    order: Optional[str] = None,
    desc: bool = False,
) -> list[dict]:
    query = _filtered(client, table, columns, eq)
    if order:
        query = query.order(order, desc=desc)
    res = _execute(query, table)
    return list(res.data or [])


def select_maybe_single(
    client: Client,
    table: str,
    *,
    columns: str = "*",
    eq: Optional[Mapping[str, Any]] = None,
) -> Optional[dict]:
    """Zero or one row matching ``eq``; None when nothing matches."""
    query = _filtered(client, table, columns, eq).maybe_single()
    try:
        res = _execute(query, table)
    except TransportFailure as e:
        cause = e.__cause__
        if isinstance(cause, APIError) and str(cause.code) == _NO_CONTENT:
            return None
        raise
    if res is None:
        return None
    return res.data or None


def insert(client: Client, table: str, row: Mapping[str, Any]) -> dict:
    """Insert one row and return it as stored by the backend."""
    res = _execute(client.table(table).insert(dict(row)), table)
    data = res.data or []
    if not data:
        raise TransportFailure(f"Insert into {table} returned no row.")
    return data[0]
