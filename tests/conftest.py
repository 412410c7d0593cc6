"""テスト共通フィクスチャ"""

import os

import pytest
from k1s0_observations.env import ENV_PREFIX


@pytest.fixture(autouse=True)
def clear_observations_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """ホスト環境の CLUSTER_OBSERVATIONS_* 変数がテストに影響しないようにする。"""
    for name in list(os.environ):
        if name.upper().startswith(ENV_PREFIX):
            monkeypatch.delenv(name)


class RecordingLogger:
    """呼び出されたイベント名を記録するだけのロガー。"""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.debugs: list[str] = []

    def error(self, event: str, **kw: object) -> None:
        self.errors.append(event)

    def debug(self, event: str, **kw: object) -> None:
        self.debugs.append(event)


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()
