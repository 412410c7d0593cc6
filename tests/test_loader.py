"""ホスト設定ドキュメント読み込みのユニットテスト"""

import json
from datetime import timedelta

import pytest
from k1s0_observations.exceptions import ConfigError, ConfigErrorCodes
from k1s0_observations.loader import dump_sections, load_sections
from k1s0_observations.metrics import MetricsConfig
from k1s0_observations.tracing import TracingConfig


def test_load_sections() -> None:
    """各セクションが自分のキーから読み込まれること。"""
    raw = json.dumps(
        {
            "metrics": {"enable_stats": True, "reporting_interval": "10s"},
            "tracing": {"service_name": "peer-b"},
            "other": {"ignored": True},
        }
    )
    metrics, tracing = MetricsConfig(), TracingConfig()
    load_sections(raw, metrics, tracing)
    assert metrics.enable_stats is True
    assert metrics.stats_reporting_interval == timedelta(seconds=10)
    assert tracing.tracing_service_name == "peer-b"


def test_load_sections_missing_key_uses_defaults() -> None:
    """キーがないセクションはデフォルト値になること。"""
    tracing = TracingConfig()
    load_sections("{}", tracing)
    assert str(tracing.jaeger_agent_endpoint) == "/ip4/0.0.0.0/udp/6831"


def test_load_sections_not_an_object() -> None:
    """オブジェクト以外で ConfigError(DECODE_ERROR) が発生すること。"""
    with pytest.raises(ConfigError) as exc_info:
        load_sections("[1, 2]", MetricsConfig())
    assert exc_info.value.code == ConfigErrorCodes.DECODE


def test_load_sections_malformed() -> None:
    """不正な JSON で ConfigError(DECODE_ERROR) が発生すること。"""
    with pytest.raises(ConfigError) as exc_info:
        load_sections("{", MetricsConfig())
    assert exc_info.value.code == ConfigErrorCodes.DECODE


def test_load_sections_section_error_propagates() -> None:
    """セクションのエラーがそのまま伝播すること。"""
    raw = '{"metrics": {"prometheus_endpoint": "not-a-multiaddr"}}'
    with pytest.raises(ConfigError) as exc_info:
        load_sections(raw, MetricsConfig())
    assert exc_info.value.code == ConfigErrorCodes.INVALID_ENDPOINT


def test_dump_then_load() -> None:
    """dump_sections の出力を読み込むと同じ設定になること。"""
    metrics, tracing = MetricsConfig(), TracingConfig()
    metrics.default()
    tracing.default()
    metrics.enable_stats = True

    raw = dump_sections(metrics, tracing)
    assert set(json.loads(raw)) == {"metrics", "tracing"}

    loaded_metrics, loaded_tracing = MetricsConfig(), TracingConfig()
    load_sections(raw, loaded_metrics, loaded_tracing)
    assert loaded_metrics == metrics
    assert loaded_tracing == tracing


def test_load_sections_invalid_utf8() -> None:
    """UTF-8 として不正なバイト列で ConfigError(DECODE_ERROR) が発生すること。"""
    with pytest.raises(ConfigError) as exc_info:
        load_sections(b'{"metrics": "\xff"}', MetricsConfig())
    assert exc_info.value.code == ConfigErrorCodes.DECODE
