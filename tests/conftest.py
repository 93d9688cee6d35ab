from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class DummyLogger:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.infos.append(message % args if args else message)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.warnings.append(message % args if args else message)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.errors.append(message % args if args else message)


@pytest.fixture
def dummy_logger() -> DummyLogger:
    return DummyLogger()
