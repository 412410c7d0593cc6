"""設定値のレイヤーマージ"""

from __future__ import annotations

from typing import Any


def merge_layers(base: dict[str, Any], *overrides: dict[str, Any]) -> dict[str, Any]:
    """base に overrides を順に重ねた新しい辞書を返す。

    後のレイヤーの値が優先される。セクションのドキュメントはフラットなので
    ネストした辞書は再帰的にマージせず、値ごと置き換える。base は変更しない。
    """
    result: dict[str, Any] = dict(base)
    for override in overrides:
        result.update(override)
    return result
