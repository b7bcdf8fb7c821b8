from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import streamlit as st
from dotenv import load_dotenv

CONFIG_FILE_NAME = "settings.json"
SESSION_NAMESPACE = "oleum_user"

ENV_CONFIG_DIR = "OLEUM_CONFIG_DIR"
ENV_SUPABASE_URL = "SUPABASE_URL"
ENV_SUPABASE_KEY = "SUPABASE_KEY"
ENV_LOG_LEVEL = "OLEUM_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    config_dir: Path
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    log_level: str = "INFO"


def _default_config_dir() -> Path:
    return Path.home() / ".oleum"


def _load_persisted_settings(config_dir: Path) -> dict:
    cfg = config_dir / CONFIG_FILE_NAME
    if cfg.exists():
        try:
            return json.loads(cfg.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return {}
    return {}


def load_settings() -> Settings:
    # Priority order:
    # 1) Environment variables (a .env file in the working directory counts)
    # 2) Persisted settings.json in the config folder
    # 3) Defaults
    load_dotenv()

    if os.getenv(ENV_CONFIG_DIR):
        config_dir = Path(os.getenv(ENV_CONFIG_DIR, "")).expanduser().resolve()
    else:
        config_dir = _default_config_dir().expanduser().resolve()
    persisted = _load_persisted_settings(config_dir)

    return Settings(
        config_dir=config_dir,
        supabase_url=os.getenv(ENV_SUPABASE_URL) or persisted.get("supabase_url"),
        supabase_key=os.getenv(ENV_SUPABASE_KEY) or persisted.get("supabase_key"),
        log_level=(os.getenv(ENV_LOG_LEVEL) or persisted.get("log_level") or "INFO").upper(),
    )


@st.cache_resource
def get_settings() -> Settings:
    return load_settings()
