"""環境変数による設定の上書き"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError, ConfigErrorCodes

ENV_PREFIX = "CLUSTER_OBSERVATIONS_"


class EnvOverrides(BaseSettings):
    """環境変数から読み取る上書き値の基底クラス。

    フィールド名は接頭辞を除いた環境変数名（大文字小文字は区別しない）、
    serialization_alias は JSON ドキュメントのキーに対応させる。
    未設定の変数は None のまま残る。
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    def to_document(self) -> dict[str, Any]:
        """設定されていた値だけを JSON ドキュメントのキーで返す。"""
        return self.model_dump(by_alias=True, exclude_none=True)


def read_env_overrides(model: type[EnvOverrides]) -> dict[str, Any]:
    """環境変数を読み取り、上書きする値を返す。

    Raises:
        ConfigError: 環境変数の値が不正な場合 (ENV_OVERRIDE_ERROR)
    """
    try:
        overrides = model()
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.ENV_OVERRIDE,
            message=f"Invalid environment override ({ENV_PREFIX}*): {e}",
            cause=e,
        ) from e
    return overrides.to_document()
