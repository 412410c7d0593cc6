"""k1s0 observations config library."""

from .durations import format_duration, parse_duration
from .endpoints import format_endpoint, parse_endpoint
from .env import ENV_PREFIX, EnvOverrides, read_env_overrides
from .exceptions import ConfigError, ConfigErrorCodes
from .loader import dump_sections, load_sections
from .merger import merge_layers
from .metrics import (
    DEFAULT_ENABLE_STATS,
    DEFAULT_PROMETHEUS_ENDPOINT,
    DEFAULT_STATS_REPORTING_INTERVAL,
    METRICS_CONFIG_KEY,
    MetricsConfig,
)
from .models import (
    MetricsDocument,
    MetricsEnvOverrides,
    PartialMetricsDocument,
    PartialTracingDocument,
    SectionDocument,
    TracingDocument,
    TracingEnvOverrides,
)
from .section import Section
from .tracing import (
    DEFAULT_ENABLE_TRACING,
    DEFAULT_JAEGER_AGENT_ENDPOINT,
    DEFAULT_TRACING_SAMPLING_PROB,
    DEFAULT_TRACING_SERVICE_NAME,
    TRACING_CONFIG_KEY,
    TracingConfig,
)

__all__ = [
    "Section",
    "MetricsConfig",
    "TracingConfig",
    "METRICS_CONFIG_KEY",
    "TRACING_CONFIG_KEY",
    "DEFAULT_ENABLE_STATS",
    "DEFAULT_PROMETHEUS_ENDPOINT",
    "DEFAULT_STATS_REPORTING_INTERVAL",
    "DEFAULT_ENABLE_TRACING",
    "DEFAULT_JAEGER_AGENT_ENDPOINT",
    "DEFAULT_TRACING_SAMPLING_PROB",
    "DEFAULT_TRACING_SERVICE_NAME",
    "SectionDocument",
    "MetricsDocument",
    "TracingDocument",
    "PartialMetricsDocument",
    "PartialTracingDocument",
    "EnvOverrides",
    "MetricsEnvOverrides",
    "TracingEnvOverrides",
    "ENV_PREFIX",
    "read_env_overrides",
    "load_sections",
    "dump_sections",
    "merge_layers",
    "parse_duration",
    "format_duration",
    "parse_endpoint",
    "format_endpoint",
    "ConfigError",
    "ConfigErrorCodes",
]
