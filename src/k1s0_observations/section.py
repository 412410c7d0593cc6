"""設定セクションの共通処理"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

import structlog
from pydantic import ValidationError

from .env import EnvOverrides, read_env_overrides
from .exceptions import ConfigError, ConfigErrorCodes
from .merger import merge_layers
from .models import SectionDocument

DocumentT = TypeVar("DocumentT", bound=SectionDocument)


class Section(ABC, Generic[DocumentT]):
    """名前付きで個別に読み込める設定セクション。

    読み込みの優先順位は「組み込みデフォルト < JSON ドキュメント < 環境変数」。
    load_json / default はインスタンスを書き換えるため、読み込みが終わるまで
    他のスレッドと共有しないこと。エラーが発生したインスタンスは破棄すること。
    """

    CONFIG_KEY: ClassVar[str]
    document_model: ClassVar[type[SectionDocument]]
    partial_model: ClassVar[type[SectionDocument]]
    env_model: ClassVar[type[EnvOverrides]]

    def config_key(self) -> str:
        """ホスト設定ドキュメント内でこのセクションを識別するキー。"""
        return self.CONFIG_KEY

    @abstractmethod
    def default(self) -> None:
        """各フィールドにデフォルト値を設定する。"""

    @abstractmethod
    def validate(self) -> None:
        """フィールドの値を検証する。

        Raises:
            ConfigError: 値が不正な場合 (INVALID_CONFIG)
        """

    @abstractmethod
    def to_document(self) -> DocumentT:
        """現在の値を JSON 表現のモデルにする。"""

    @abstractmethod
    def _apply(self, document: DocumentT) -> None:
        """マージ済みのドキュメントをフィールドに反映する。"""

    def load_json(self, raw: bytes | str, logger: Any = None) -> None:
        """JSON 表現（to_json が生成する形式）から値を読み込み、検証する。

        Args:
            raw: セクションの JSON オブジェクト
            logger: デコード失敗時に使うロガー。省略時は structlog のロガー

        Raises:
            ConfigError: デコード・上書き・解析・検証のいずれかに失敗した場合
        """
        log = logger if logger is not None else structlog.get_logger(__name__)
        try:
            decoded = self.partial_model.model_validate_json(raw)
        except ValidationError as e:
            log.error(
                "Error unmarshaling observations config",
                section=self.CONFIG_KEY,
                error=str(e),
            )
            raise ConfigError(
                code=ConfigErrorCodes.DECODE,
                message=f"Failed to decode {self.CONFIG_KEY} config: {e}",
                cause=e,
            ) from e

        self.default()

        values = merge_layers(
            self.to_document().model_dump(),
            decoded.model_dump(exclude_unset=True, exclude_none=True),
            read_env_overrides(self.env_model),
        )
        document = self.document_model.model_validate(values)

        self._apply(document)  # type: ignore[arg-type]
        self.validate()
        log.debug("observations config loaded", section=self.CONFIG_KEY)

    def to_json(self) -> bytes:
        """人が読みやすい JSON 表現を生成する。"""
        return self.to_document().model_dump_json(indent=2).encode("utf-8")
