"""
StorySummarizer: 日記エントリを三人称の短い「ストーリー」に要約する

設計方針:
- storyを持たないエントリごとに1回だけLLMを呼び出す（一度付いたstoryは再計算しない）
- 呼び出しは並列に発行し、全件が完了するまで待ってから最初の失敗を送出する
- 並列数とタイムアウトで外部呼び出しを制限する

関連:
- src/story_journal/ollama_client.py: LLM推論
- src/journal/workflow.py: 一覧表示時に呼び出し、結果を保存する
"""

import asyncio
import logging
from typing import Iterable, List, Optional

from src.story_journal.ollama_client import OllamaClient

from .exceptions import SummarizationError
from .models import Entry

logger = logging.getLogger(__name__)

STORY_INSTRUCTION = (
    "Using natural conversational language. Summarize this story in third person. "
    "Keep it short, maximum three sentences."
)


class StorySummarizer:
    """LLMベースのストーリー生成器"""

    def __init__(
        self,
        ollama_client: Optional[OllamaClient] = None,
        max_concurrency: int = 4,
        timeout_seconds: Optional[float] = 60.0,
    ):
        """
        初期化

        Args:
            ollama_client: Ollamaクライアント（テスト用にDI可能）
            max_concurrency: 同時に発行する要約リクエストの上限
            timeout_seconds: 1リクエストあたりのタイムアウト（Noneで無制限）
        """
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.ollama_client = ollama_client or OllamaClient()
        self.max_concurrency = max_concurrency
        self.timeout_seconds = timeout_seconds

    @staticmethod
    def needs_story(entry: Entry) -> bool:
        return not entry.story

    async def summarize(self, entries: Iterable[Entry]) -> int:
        """
        storyを持たないエントリにstoryを付与する

        Args:
            entries: 対象エントリ（storyがあるものはそのまま）

        Returns:
            storyが付与されたエントリ数

        Raises:
            SummarizationError: いずれかのリクエストが失敗した場合
                （成功したエントリには既にstoryが設定されている）
        """
        pending: List[Entry] = [entry for entry in entries if self.needs_story(entry)]
        if not pending:
            return 0

        logger.info(f"Summarizing {len(pending)} entries")
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def run(entry: Entry) -> None:
            async with semaphore:
                entry.story = await self._request_story(entry)

        results = await asyncio.gather(
            *(run(entry) for entry in pending), return_exceptions=True
        )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            logger.error(f"{len(failures)} of {len(pending)} story requests failed")
            raise failures[0]

        logger.info("Stories fetched and updated successfully.")
        return len(pending)

    async def _request_story(self, entry: Entry) -> str:
        messages = [
            {"role": "system", "content": STORY_INSTRUCTION},
            {"role": "user", "content": entry.prompt},
        ]
        try:
            response = await asyncio.wait_for(
                self.ollama_client.chat(messages),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            raise SummarizationError(
                f"Story request for entry {entry.id} timed out after {self.timeout_seconds}s"
            ) from exc
        except Exception as exc:
            raise SummarizationError(
                f"Story request for entry {entry.id} failed: {exc}"
            ) from exc

        if not isinstance(response, str) or not response.strip():
            raise SummarizationError(
                f"Malformed story response for entry {entry.id}: {response!r}"
            )
        return response.strip()
