"""メトリクス収集の設定"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import ClassVar

from multiaddr import Multiaddr

from .durations import format_duration, parse_duration
from .endpoints import format_endpoint, parse_endpoint
from .exceptions import ConfigError, ConfigErrorCodes
from .models import MetricsDocument, MetricsEnvOverrides, PartialMetricsDocument
from .section import Section

METRICS_CONFIG_KEY = "metrics"

DEFAULT_ENABLE_STATS = False
DEFAULT_PROMETHEUS_ENDPOINT = "/ip4/0.0.0.0/tcp/8888"
DEFAULT_STATS_REPORTING_INTERVAL = timedelta(seconds=2)


@dataclass
class MetricsConfig(Section[MetricsDocument]):
    """メトリクス収集の設定。

    生成直後はゼロ値。default() か load_json() で値を設定する。
    """

    CONFIG_KEY: ClassVar[str] = METRICS_CONFIG_KEY
    document_model: ClassVar[type[MetricsDocument]] = MetricsDocument
    partial_model: ClassVar[type[PartialMetricsDocument]] = PartialMetricsDocument
    env_model: ClassVar[type[MetricsEnvOverrides]] = MetricsEnvOverrides

    enable_stats: bool = False
    prometheus_endpoint: Multiaddr | None = None
    stats_reporting_interval: timedelta = field(default_factory=timedelta)

    def default(self) -> None:
        self.enable_stats = DEFAULT_ENABLE_STATS
        self.prometheus_endpoint = Multiaddr(DEFAULT_PROMETHEUS_ENDPOINT)
        self.stats_reporting_interval = DEFAULT_STATS_REPORTING_INTERVAL

    def validate(self) -> None:
        """無効化されている場合は何も検証しない。"""
        if not self.enable_stats:
            return
        if self.prometheus_endpoint is None:
            raise ConfigError(
                code=ConfigErrorCodes.INVALID_CONFIG,
                message="metrics.prometheus_endpoint is undefined",
                field="metrics.prometheus_endpoint",
            )
        if self.stats_reporting_interval < timedelta(0):
            raise ConfigError(
                code=ConfigErrorCodes.INVALID_CONFIG,
                message="metrics.reporting_interval is invalid",
                field="metrics.reporting_interval",
            )

    def to_document(self) -> MetricsDocument:
        return MetricsDocument(
            enable_stats=self.enable_stats,
            prometheus_endpoint=format_endpoint(self.prometheus_endpoint),
            reporting_interval=format_duration(self.stats_reporting_interval),
        )

    def _apply(self, document: MetricsDocument) -> None:
        self.enable_stats = document.enable_stats
        self.prometheus_endpoint = parse_endpoint(
            document.prometheus_endpoint, field="metrics.prometheus_endpoint"
        )
        # 空文字列はデフォルト値のまま
        if document.reporting_interval:
            self.stats_reporting_interval = parse_duration(
                document.reporting_interval, field="metrics.reporting_interval"
            )
