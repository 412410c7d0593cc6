"""期間文字列（"2s", "1m30s", "500ms" 形式）の解析と整形"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

from .exceptions import ConfigError, ConfigErrorCodes

# 単位ごとのナノ秒数
_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # µs (micro sign)
    "μs": 1_000,  # μs (greek mu)
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}

_COMPONENT = r"([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(ns|us|µs|μs|ms|s|m|h)"
_COMPONENT_RE = re.compile(_COMPONENT)
_DURATION_RE = re.compile(rf"([-+]?)((?:{_COMPONENT})+)")

_MICROS_PER_SECOND = 1_000_000
_MICROS_PER_MINUTE = 60 * _MICROS_PER_SECOND
_MICROS_PER_HOUR = 60 * _MICROS_PER_MINUTE


def parse_duration(value: str, *, field: str | None = None) -> timedelta:
    """期間文字列を timedelta に変換する。

    Args:
        value: "2s", "-5s", "1h30m", "1.5ms" のような文字列。"0" も受け付ける。
        field: エラーメッセージに含める設定項目名

    Raises:
        ConfigError: 形式が不正な場合 (INVALID_DURATION)
    """
    if value in ("0", "+0", "-0"):
        return timedelta(0)
    match = _DURATION_RE.fullmatch(value)
    if match is None:
        label = f"{field}: " if field else ""
        raise ConfigError(
            code=ConfigErrorCodes.INVALID_DURATION,
            message=f"{label}invalid duration {value!r}",
            field=field,
        )
    total_ns = Decimal(0)
    for number, unit in _COMPONENT_RE.findall(match.group(2)):
        total_ns += Decimal(number) * _UNITS[unit]
    micros = int(total_ns / 1_000)
    if match.group(1) == "-":
        micros = -micros
    return timedelta(microseconds=micros)


def format_duration(value: timedelta) -> str:
    """timedelta を "2s", "1m30s", "1h0m0s" 形式の文字列にする。

    parse_duration の逆変換。1 秒未満は "500ms" や "250µs" で表す。
    """
    total = (value.days * 86_400 + value.seconds) * _MICROS_PER_SECOND + value.microseconds
    if total == 0:
        return "0s"
    sign = "-" if total < 0 else ""
    total = abs(total)

    if total < _MICROS_PER_SECOND:
        if total < 1_000:
            return f"{sign}{total}µs"
        return f"{sign}{_decimal(total, 1_000)}ms"

    hours, rest = divmod(total, _MICROS_PER_HOUR)
    minutes, rest = divmod(rest, _MICROS_PER_MINUTE)
    text = f"{_decimal(rest, _MICROS_PER_SECOND)}s"
    if hours:
        text = f"{hours}h{minutes}m{text}"
    elif minutes:
        text = f"{minutes}m{text}"
    return sign + text


def _decimal(value: int, unit: int) -> str:
    whole, fraction = divmod(value, unit)
    if not fraction:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")
