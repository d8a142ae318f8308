"""Ensure project root is on sys.path for test imports."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cmdargs.config import get_runtime_config  # noqa: E402


@pytest.fixture(autouse=True)
def _cmdargs_env_defaults(monkeypatch, tmp_path):
    """Isolate tests from config files and overrides on the host."""

    for name in (
        "CMDARGS_CONFIG",
        "CMDARGS_OPTION_PREFIX",
        "CMDARGS_VALUE_SEPARATOR",
        "CMDARGS_NON_OPTION_ARGS_PROPERTY",
        "FORCE_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)
    get_runtime_config.cache_clear()
    yield
    get_runtime_config.cache_clear()
    logging.getLogger("cmdargs").setLevel(logging.NOTSET)
