"""ホスト設定ドキュメントからの一括読み込み"""

from __future__ import annotations

import json
from typing import Any

from .exceptions import ConfigError, ConfigErrorCodes
from .section import Section


def load_sections(raw: bytes | str, *sections: Section[Any], logger: Any = None) -> None:
    """ホスト設定ドキュメントを読み込み、各セクションに振り分ける。

    各セクションは config_key() のキーにあるオブジェクトから読み込まれる。
    キーが存在しないセクションは空オブジェクトから読み込む（デフォルト値と環境変数）。

    Raises:
        ConfigError: ドキュメントが JSON オブジェクトでない場合、
            またはいずれかのセクションの読み込みに失敗した場合
    """
    # JSONDecodeError と UnicodeDecodeError はどちらも ValueError
    try:
        document = json.loads(raw)
    except ValueError as e:
        raise ConfigError(
            code=ConfigErrorCodes.DECODE,
            message=f"Failed to decode config document: {e}",
            cause=e,
        ) from e
    if not isinstance(document, dict):
        raise ConfigError(
            code=ConfigErrorCodes.DECODE,
            message="Config document must be a JSON object",
        )
    for section in sections:
        sub = document.get(section.config_key(), {})
        section.load_json(json.dumps(sub), logger=logger)


def dump_sections(*sections: Section[Any]) -> bytes:
    """各セクションを config_key() をキーとする 1 つの JSON オブジェクトにする。"""
    document: dict[str, Any] = {
        section.config_key(): section.to_document().model_dump() for section in sections
    }
    return json.dumps(document, indent=2).encode("utf-8")
