from __future__ import annotations

from collections.abc import Sequence

import pytest
from loguru import logger


class FakeLauncher:
    def __init__(self, statuses: Sequence[int] = ()) -> None:
        self.statuses = list(statuses)
        self.calls: list[tuple[str, str, list[str]]] = []

    def _next_status(self) -> int:
        return self.statuses.pop(0) if self.statuses else 0

    def replace(self, path: str, argv: Sequence[str]) -> int:
        self.calls.append(("replace", path, list(argv)))
        return self._next_status()

    def run(self, path: str, args: Sequence[str]) -> int:
        self.calls.append(("run", path, list(args)))
        return self._next_status()


@pytest.fixture(autouse=True)
def _clean_dsp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DSP_DEBUG", "DSP_VMTOOLSD", "DSP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    logger.remove()
