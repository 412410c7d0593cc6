"""マルチアドレス形式のエンドポイント解析"""

from __future__ import annotations

from multiaddr import Multiaddr
from multiaddr import exceptions as multiaddr_exceptions

from .exceptions import ConfigError, ConfigErrorCodes


def parse_endpoint(value: str, *, field: str) -> Multiaddr:
    """"/ip4/127.0.0.1/tcp/9090" のような文字列を Multiaddr に変換する。

    Raises:
        ConfigError: 空文字列または解析に失敗した場合 (INVALID_ENDPOINT)
    """
    if not value:
        raise ConfigError(
            code=ConfigErrorCodes.INVALID_ENDPOINT,
            message=f"{field}: empty multiaddr",
            field=field,
        )
    try:
        return Multiaddr(value)
    except (ValueError, multiaddr_exceptions.Error) as e:
        raise ConfigError(
            code=ConfigErrorCodes.INVALID_ENDPOINT,
            message=f"{field}: invalid multiaddr {value!r}: {e}",
            cause=e,
            field=field,
        ) from e


def format_endpoint(value: Multiaddr | None) -> str:
    """Multiaddr を正規化された文字列にする。未設定なら空文字列。"""
    if value is None:
        return ""
    return str(value)
