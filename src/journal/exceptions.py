"""ジャーナル機能のカスタム例外定義

Design Reference: DESIGN.md (error handling)
"""


class JournalError(Exception):
    """ジャーナル基底例外"""

    pass


class ValidationError(JournalError):
    """入力値が不正（ユーザーが修正可能）"""

    pass


class NotFoundError(JournalError):
    """指定IDのエントリが存在しない"""

    pass


class StorageError(JournalError):
    """保存領域に関するエラー"""

    pass


class CorruptStateError(StorageError):
    """保存済みJSONが壊れている"""

    pass


class PersistenceError(StorageError):
    """書き込み失敗（I/Oエラー）"""

    pass


class SummarizationError(JournalError):
    """LLMによるストーリー生成の失敗"""

    pass
