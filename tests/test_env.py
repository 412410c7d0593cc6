"""環境変数上書きのユニットテスト"""

import pytest
from k1s0_observations.env import read_env_overrides
from k1s0_observations.exceptions import ConfigError, ConfigErrorCodes
from k1s0_observations.models import MetricsEnvOverrides, TracingEnvOverrides


def test_no_env_returns_empty() -> None:
    """環境変数がなければ上書きは空であること。"""
    assert read_env_overrides(MetricsEnvOverrides) == {}
    assert read_env_overrides(TracingEnvOverrides) == {}


def test_metrics_overrides_use_document_keys(monkeypatch: pytest.MonkeyPatch) -> None:
    """上書き値が JSON ドキュメントのキーで返ること。"""
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_ENABLESTATS", "true")
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_STATSREPORTINGINTERVAL", "10s")
    assert read_env_overrides(MetricsEnvOverrides) == {
        "enable_stats": True,
        "reporting_interval": "10s",
    }


def test_tracing_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """tracing の上書き値が型変換されること。"""
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_TRACINGSAMPLINGPROB", "0.75")
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_TRACINGSERVICENAME", "peer-1")
    assert read_env_overrides(TracingEnvOverrides) == {
        "sampling_prob": 0.75,
        "service_name": "peer-1",
    }


def test_unrelated_prefix_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    """接頭辞のない変数は無視されること。"""
    monkeypatch.setenv("ENABLESTATS", "true")
    monkeypatch.setenv("ENABLE_STATS", "true")
    assert read_env_overrides(MetricsEnvOverrides) == {}


def test_malformed_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """不正な値で ConfigError(ENV_OVERRIDE_ERROR) が発生すること。"""
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_ENABLETRACING", "maybe")
    with pytest.raises(ConfigError) as exc_info:
        read_env_overrides(TracingEnvOverrides)
    assert exc_info.value.code == ConfigErrorCodes.ENV_OVERRIDE


@pytest.mark.parametrize("value", ["inf", "-inf", "nan"])
def test_non_finite_probability_override(
    monkeypatch: pytest.MonkeyPatch, value: str
) -> None:
    """有限でないサンプリング確率で ConfigError(ENV_OVERRIDE_ERROR) が発生すること。"""
    monkeypatch.setenv("CLUSTER_OBSERVATIONS_TRACINGSAMPLINGPROB", value)
    with pytest.raises(ConfigError) as exc_info:
        read_env_overrides(TracingEnvOverrides)
    assert exc_info.value.code == ConfigErrorCodes.ENV_OVERRIDE
