"""分散トレーシングの設定"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from multiaddr import Multiaddr

from .endpoints import format_endpoint, parse_endpoint
from .exceptions import ConfigError, ConfigErrorCodes
from .models import PartialTracingDocument, TracingDocument, TracingEnvOverrides
from .section import Section

TRACING_CONFIG_KEY = "tracing"

DEFAULT_ENABLE_TRACING = False
DEFAULT_JAEGER_AGENT_ENDPOINT = "/ip4/0.0.0.0/udp/6831"
DEFAULT_TRACING_SAMPLING_PROB = 0.3
DEFAULT_TRACING_SERVICE_NAME = "cluster-daemon"


@dataclass
class TracingConfig(Section[TracingDocument]):
    """分散トレーシングの設定。"""

    CONFIG_KEY: ClassVar[str] = TRACING_CONFIG_KEY
    document_model: ClassVar[type[TracingDocument]] = TracingDocument
    partial_model: ClassVar[type[PartialTracingDocument]] = PartialTracingDocument
    env_model: ClassVar[type[TracingEnvOverrides]] = TracingEnvOverrides

    enable_tracing: bool = False
    jaeger_agent_endpoint: Multiaddr | None = None
    tracing_sampling_prob: float = 0.0
    tracing_service_name: str = ""

    def default(self) -> None:
        self.enable_tracing = DEFAULT_ENABLE_TRACING
        self.jaeger_agent_endpoint = Multiaddr(DEFAULT_JAEGER_AGENT_ENDPOINT)
        self.tracing_sampling_prob = DEFAULT_TRACING_SAMPLING_PROB
        self.tracing_service_name = DEFAULT_TRACING_SERVICE_NAME

    def validate(self) -> None:
        """サンプリング確率は下限 0 のみ検証する（上限はトレーサー側で丸められる）。"""
        if not self.enable_tracing:
            return
        if self.jaeger_agent_endpoint is None:
            raise ConfigError(
                code=ConfigErrorCodes.INVALID_CONFIG,
                message="tracing.jaeger_agent_endpoint is undefined",
                field="tracing.jaeger_agent_endpoint",
            )
        if not self.tracing_sampling_prob >= 0:
            raise ConfigError(
                code=ConfigErrorCodes.INVALID_CONFIG,
                message="tracing.sampling_prob is invalid",
                field="tracing.sampling_prob",
            )

    def to_document(self) -> TracingDocument:
        return TracingDocument(
            enable_tracing=self.enable_tracing,
            jaeger_agent_endpoint=format_endpoint(self.jaeger_agent_endpoint),
            sampling_prob=self.tracing_sampling_prob,
            service_name=self.tracing_service_name,
        )

    def _apply(self, document: TracingDocument) -> None:
        self.enable_tracing = document.enable_tracing
        self.jaeger_agent_endpoint = parse_endpoint(
            document.jaeger_agent_endpoint, field="tracing.jaeger_agent_endpoint"
        )
        self.tracing_sampling_prob = document.sampling_prob
        self.tracing_service_name = document.service_name
