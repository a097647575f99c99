"""
Story Journalのロギング設定

出力されるログ:
  - journal.store: ジャーナルファイルの読み込み・保存と、破損・書き込み失敗
  - journal.summarizer: ストーリー要約の件数と、失敗したリクエスト数
  - journal.workflow: エントリの追加・更新と、適用したストーリー数
  - server.routes.*: ルートで捕捉した例外（スタックトレース付き）

ログはファイルと標準エラーの両方に出す。Ollamaへの通信はhttpx経由のため、
DEBUG以外ではhttpxのリクエストごとのINFOログを抑える。
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(log_level: str = "INFO", log_file: str = "logs/story_journal.log") -> None:
    """
    アプリ全体のロガーを設定する

    Args:
        log_level: ログレベル名（不明な名前はINFO扱い）
        log_file: ログファイルのパス（親ディレクトリは自動作成）
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    logging.getLogger("httpx").setLevel(level if level <= logging.DEBUG else logging.WARNING)
