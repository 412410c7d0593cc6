"""JSON ドキュメントと環境変数上書きのモデル定義"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .env import EnvOverrides


class SectionDocument(BaseModel):
    """セクションの JSON 表現の基底クラス。未知のキーは無視する。"""

    model_config = ConfigDict(strict=True, extra="ignore")


class MetricsDocument(SectionDocument):
    """metrics セクションの JSON 表現（全キーが揃ったもの）。"""

    enable_stats: bool = False
    prometheus_endpoint: str = ""
    reporting_interval: str = ""


class TracingDocument(SectionDocument):
    """tracing セクションの JSON 表現（全キーが揃ったもの）。"""

    enable_tracing: bool = False
    jaeger_agent_endpoint: str = ""
    sampling_prob: float = Field(default=0.0, allow_inf_nan=False)
    service_name: str = ""


class PartialMetricsDocument(SectionDocument):
    """入力された metrics セクション。null のキーは指定なしとして扱う。"""

    enable_stats: bool | None = None
    prometheus_endpoint: str | None = None
    reporting_interval: str | None = None


class PartialTracingDocument(SectionDocument):
    """入力された tracing セクション。null のキーは指定なしとして扱う。"""

    enable_tracing: bool | None = None
    jaeger_agent_endpoint: str | None = None
    sampling_prob: float | None = Field(default=None, allow_inf_nan=False)
    service_name: str | None = None


class MetricsEnvOverrides(EnvOverrides):
    """metrics セクションの環境変数上書き。"""

    enablestats: bool | None = Field(default=None, serialization_alias="enable_stats")
    prometheusendpoint: str | None = Field(
        default=None, serialization_alias="prometheus_endpoint"
    )
    statsreportinginterval: str | None = Field(
        default=None, serialization_alias="reporting_interval"
    )


class TracingEnvOverrides(EnvOverrides):
    """tracing セクションの環境変数上書き。"""

    enabletracing: bool | None = Field(default=None, serialization_alias="enable_tracing")
    jaegeragentendpoint: str | None = Field(
        default=None, serialization_alias="jaeger_agent_endpoint"
    )
    tracingsamplingprob: float | None = Field(
        default=None, serialization_alias="sampling_prob", allow_inf_nan=False
    )
    tracingservicename: str | None = Field(
        default=None, serialization_alias="service_name"
    )
