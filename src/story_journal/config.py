"""
設定管理モジュール

関連クラス:
  - ollama_client.OllamaClient: Ollama API設定を使用
  - journal.summarizer.StorySummarizer: 要約の並列数・タイムアウトを使用
  - server.dependencies: 起動時に load_config() を呼び出す
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "app_config.yaml"


@dataclass
class OllamaConfig:
    """Ollama API設定"""

    host: str = "http://localhost:11434"
    model: str = "llama3.1:8b"
    api_key: Optional[str] = None


@dataclass
class SummarizerConfig:
    """ストーリー要約設定"""

    max_concurrency: int = 4
    timeout_seconds: Optional[float] = 60.0
    temperature: float = 1.0
    max_tokens: int = 256
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0


@dataclass
class Config:
    """アプリケーション設定クラス"""

    ollama: OllamaConfig = None  # type: ignore
    summarizer: SummarizerConfig = None  # type: ignore

    # 保存先（相対パスはプロジェクトルート基準）
    journal_path: str = "journals/journals.json"

    # サーバー設定
    host: str = "0.0.0.0"
    port: int = 3000

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/story_journal.log"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.ollama is None:
            self.ollama = OllamaConfig()
        if self.summarizer is None:
            self.summarizer = SummarizerConfig()

    @property
    def resolved_journal_path(self) -> Path:
        path = Path(self.journal_path).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス（ファイルが無ければデフォルト値）
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if not Path(config_path).exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        ollama_data = yaml_data.get("ollama", {}) or {}
        summarizer_data = yaml_data.get("summarizer", {}) or {}
        storage_data = yaml_data.get("storage", {}) or {}
        server_data = yaml_data.get("server", {}) or {}
        log_data = yaml_data.get("log", {}) or {}

        defaults = SummarizerConfig()
        timeout = summarizer_data.get("timeout_seconds", defaults.timeout_seconds)
        return cls(
            ollama=OllamaConfig(
                host=ollama_data.get("host", "http://localhost:11434"),
                model=ollama_data.get("model", "llama3.1:8b"),
                api_key=ollama_data.get("api_key"),
            ),
            summarizer=SummarizerConfig(
                max_concurrency=int(summarizer_data.get("max_concurrency", defaults.max_concurrency)),
                timeout_seconds=float(timeout) if timeout is not None else None,
                temperature=float(summarizer_data.get("temperature", defaults.temperature)),
                max_tokens=int(summarizer_data.get("max_tokens", defaults.max_tokens)),
                top_p=float(summarizer_data.get("top_p", defaults.top_p)),
                frequency_penalty=float(
                    summarizer_data.get("frequency_penalty", defaults.frequency_penalty)
                ),
                presence_penalty=float(
                    summarizer_data.get("presence_penalty", defaults.presence_penalty)
                ),
            ),
            journal_path=storage_data.get("journal_path", "journals/journals.json"),
            host=server_data.get("host", "0.0.0.0"),
            port=int(server_data.get("port", 3000)),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/story_journal.log"),
        )

    def apply_env(self) -> "Config":
        """環境変数で設定を上書きする（APIキー・ポートなど）"""
        api_key = os.getenv("STORY_JOURNAL_API_KEY")
        if api_key:
            self.ollama.api_key = api_key
        if os.getenv("OLLAMA_HOST"):
            self.ollama.host = os.environ["OLLAMA_HOST"]
        if os.getenv("OLLAMA_MODEL"):
            self.ollama.model = os.environ["OLLAMA_MODEL"]
        if os.getenv("PORT"):
            self.port = int(os.environ["PORT"])
        if os.getenv("STORY_JOURNAL_DATA_PATH"):
            self.journal_path = os.environ["STORY_JOURNAL_DATA_PATH"]
        if os.getenv("LOG_LEVEL"):
            self.log_level = os.environ["LOG_LEVEL"]
        if os.getenv("LOG_FILE"):
            self.log_file = os.environ["LOG_FILE"]
        return self


def load_config(config_path: Optional[Path] = None) -> Config:
    """YAML設定を読み込み、環境変数で上書きした設定を返す"""
    return Config.from_yaml(config_path).apply_env()
