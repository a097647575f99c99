"""
Ollama APIクライアントモジュール（非同期版）

関連クラス:
  - config.OllamaConfig / config.SummarizerConfig: 接続先・生成パラメータを提供
  - journal.summarizer.StorySummarizer: このクライアントを使用

注意: APIキーが設定されている場合は Authorization: Bearer ヘッダーとして送信する
"""

import logging
from typing import Any, Dict, List, Optional

import ollama


class OllamaClient:
    """Ollama APIクライアント（テキスト応答が基本）"""

    def __init__(
        self,
        host: str = "http://localhost:11434",
        model: str = "llama3.1:8b",
        api_key: Optional[str] = None,
        temperature: float = 1.0,
        max_tokens: int = 256,
        top_p: float = 1.0,
        frequency_penalty: float = 0.0,
        presence_penalty: float = 0.0,
    ):
        """
        初期化

        Args:
            host: OllamaサーバーのURL
            model: 使用するモデル名
            api_key: 認証用APIキー（リモートの互換サービス向け、任意）
            temperature: 生成温度
            max_tokens: 最大トークン数
            top_p: nucleus sampling
            frequency_penalty: 頻度ペナルティ
            presence_penalty: 存在ペナルティ
        """
        self.host = host
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.top_p = top_p
        self.frequency_penalty = frequency_penalty
        self.presence_penalty = presence_penalty
        self.logger = logging.getLogger(__name__)

        headers = {"Authorization": f"Bearer {api_key}"} if api_key else None
        self.client = ollama.AsyncClient(host=host, headers=headers)

    @property
    def options(self) -> Dict[str, Any]:
        return {
            "temperature": self.temperature,
            "num_predict": self.max_tokens,
            "top_p": self.top_p,
            "frequency_penalty": self.frequency_penalty,
            "presence_penalty": self.presence_penalty,
        }

    async def chat(self, messages: List[Dict[str, str]]) -> str:
        """
        チャット形式で会話し、応答テキストを返す

        Args:
            messages: メッセージのリスト [{"role": "user", "content": "..."}]

        Returns:
            応答テキスト（そのまま返す。空かどうかの判定は呼び出し側で行う）
        """
        try:
            response = await self.client.chat(
                model=self.model,
                messages=messages,
                options=self.options,
            )
            return response["message"]["content"]

        except Exception as e:
            self.logger.error(f"Ollama chat error: {e}")
            raise
