"""Journal Models

日記エントリとジャーナル文書のデータモデル定義。

永続化フォーマット:
    {"prompts": [{"id": "...", "date": "...", "prompt": "...", "story": "..."}, ...]}

Related Classes: JournalStore (store.py), EntryWorkflow (workflow.py)
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .exceptions import CorruptStateError


@dataclass(slots=True)
class Entry:
    """日記エントリ1件の表現

    storyはLLM要約が成功するまで None のまま。
    """

    id: str
    date: str
    prompt: str
    story: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id, "date": self.date, "prompt": self.prompt}
        if self.story:
            data["story"] = self.story
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Entry":
        """JSONオブジェクトからEntryを生成

        Raises:
            CorruptStateError: 必須フィールドが欠けている、または型が不正な場合
        """
        if not isinstance(data, dict):
            raise CorruptStateError(f"Entry must be an object, got {type(data).__name__}")

        entry_id = data.get("id")
        prompt = data.get("prompt")
        if not isinstance(entry_id, str) or not entry_id:
            raise CorruptStateError(f"Entry has no valid id: {data!r}")
        if not isinstance(prompt, str):
            raise CorruptStateError(f"Entry {entry_id} has no valid prompt")

        date = data.get("date")
        if date is not None and not isinstance(date, str):
            raise CorruptStateError(f"Entry {entry_id} has no valid date: {date!r}")
        story = data.get("story")
        return cls(
            id=entry_id,
            date=date or "",
            prompt=prompt,
            story=story if isinstance(story, str) and story else None,
        )

    def copy(self) -> "Entry":
        return replace(self)


@dataclass(slots=True)
class JournalDocument:
    """永続化される唯一の集約。promptsの並び順 = 作成順。"""

    prompts: List[Entry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"prompts": [entry.to_dict() for entry in self.prompts]}

    @classmethod
    def from_dict(cls, data: Any) -> "JournalDocument":
        """JSONオブジェクトから文書を復元

        promptsキーが無いオブジェクト（例: {}）は空の文書として扱う。

        Raises:
            CorruptStateError: 文書の形が不正な場合
        """
        if not isinstance(data, dict):
            raise CorruptStateError(
                f"Journal document must be an object, got {type(data).__name__}"
            )
        prompts = data.get("prompts", [])
        if not isinstance(prompts, list):
            raise CorruptStateError("'prompts' must be a list")
        return cls(prompts=[Entry.from_dict(item) for item in prompts])

    def copy(self) -> "JournalDocument":
        return JournalDocument(prompts=[entry.copy() for entry in self.prompts])

    def find(self, entry_id: str) -> Optional[Entry]:
        for entry in self.prompts:
            if entry.id == entry_id:
                return entry
        return None

    def index_of(self, entry_id: str) -> int:
        for index, entry in enumerate(self.prompts):
            if entry.id == entry_id:
                return index
        return -1

    def most_recent(self) -> Optional[Entry]:
        return self.prompts[-1] if self.prompts else None

    def ids(self) -> set[str]:
        return {entry.id for entry in self.prompts}
