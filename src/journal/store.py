"""Journal Store

単一のJSON文書（journals.json）を丸ごと読み書きするストア。
読み込んだ文書はメモリ上にキャッシュし、ファイルを永続化先とする。

Related Classes: JournalDocument (models.py), EntryWorkflow (workflow.py)
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from .exceptions import CorruptStateError, PersistenceError
from .models import JournalDocument

logger = logging.getLogger(__name__)


class JournalStore:
    """JSONファイルベースのジャーナル保存領域"""

    def __init__(self, journal_path: Optional[Path] = None):
        root = Path(__file__).resolve().parents[2]
        default_path = root / "journals" / "journals.json"
        env_path = os.getenv("STORY_JOURNAL_DATA_PATH")
        if journal_path:
            self.journal_path = Path(journal_path)
        elif env_path:
            self.journal_path = Path(env_path)
        else:
            self.journal_path = default_path
        self._document: Optional[JournalDocument] = None

    @property
    def cached(self) -> Optional[JournalDocument]:
        """キャッシュ済みの文書（未ロードならNone）"""
        return self._document

    async def load(self, force: bool = False) -> JournalDocument:
        """文書を取得（キャッシュがあればそれを返す）

        Args:
            force: Trueの場合キャッシュを無視してファイルから再読込

        Returns:
            JournalDocument

        Raises:
            CorruptStateError: ファイルが不正なJSONの場合
        """
        if self._document is not None and not force:
            return self._document
        document = await asyncio.to_thread(self._read)
        self._document = document
        return document

    async def save(self, document: JournalDocument) -> None:
        """文書全体をファイルに書き出し、成功したらキャッシュを置き換える

        Raises:
            PersistenceError: 書き込みに失敗した場合（キャッシュは変更されない）
        """
        payload = json.dumps(document.to_dict(), ensure_ascii=False, indent=2)
        await asyncio.to_thread(self._write, payload)
        self._document = document

    def _read(self) -> JournalDocument:
        if not self.journal_path.exists():
            logger.info("Journal file not found, starting empty: %s", self.journal_path)
            return JournalDocument()

        try:
            text = self.journal_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.error("Journal file is not valid UTF-8: %s", exc)
            raise CorruptStateError(f"Invalid UTF-8 in {self.journal_path}: {exc}") from exc
        except OSError as exc:
            raise PersistenceError(f"Failed to read {self.journal_path}: {exc}") from exc

        if not text.strip():
            return JournalDocument()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            logger.error("Journal file is not valid JSON: %s", exc)
            raise CorruptStateError(f"Invalid JSON in {self.journal_path}: {exc}") from exc

        document = JournalDocument.from_dict(data)
        logger.info("Loaded %d entries from %s", len(document.prompts), self.journal_path)
        return document

    def _write(self, payload: str) -> None:
        # 同一ディレクトリの一時ファイルに書いてからos.replaceで差し替える
        directory = self.journal_path.parent
        tmp_name: Optional[str] = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self.journal_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.journal_path)
            tmp_name = None
        except OSError as exc:
            logger.error("Failed to write journal file %s: %s", self.journal_path, exc)
            raise PersistenceError(f"Failed to write {self.journal_path}: {exc}") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.info("Journal saved: %s", self.journal_path)
