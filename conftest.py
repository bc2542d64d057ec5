"""Configuración compartida de pytest.

English: Shared pytest configuration.
"""

from __future__ import annotations

import os
from pathlib import Path
import socket
import sys
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parent
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def block_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Impide conexiones de red reales en tests.

    English:
        Prevents real network connections in tests.
    """

    def guarded_connect(*args: Any, **kwargs: Any) -> None:
        raise RuntimeError("Network access is disabled during tests.")

    def guarded_create_connection(*args: Any, **kwargs: Any) -> None:
        raise RuntimeError("Network access is disabled during tests.")

    monkeypatch.setattr(socket.socket, "connect", guarded_connect, raising=True)
    monkeypatch.setattr(socket, "create_connection", guarded_create_connection, raising=True)


@pytest.fixture(autouse=True)
def clean_benford_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Elimina variables BENFORD_* heredadas del entorno.

    English: Drops BENFORD_* variables inherited from the environment.
    """
    for name in list(os.environ):
        if name.startswith("BENFORD_"):
            monkeypatch.delenv(name, raising=False)
