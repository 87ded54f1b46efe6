"""
Entry data models for Smart FAQ Admin Workbench.

Represents knowledge-base question/answer records and the draft entry
being edited in the curation panel.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass
class Entry:
    """
    Represents a single knowledge-base record.
    
    Attributes:
        id: Opaque unique identifier (assigned by the client on create)
        question: Question text
        answer: Answer text
        category: Optional category label
    """
    
    id: str
    question: str
    answer: str
    category: Optional[str] = None
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """
        Build an Entry from a decoded service record.
        
        Missing or null text fields become empty strings.
        
        Raises:
            KeyError: If the id is missing
            TypeError: If data is not a mapping
        """
        if not isinstance(data, dict):
            raise TypeError(f"entry must be an object, got {type(data).__name__}")
        
        category = data.get("category")
        return cls(
            id=str(data["id"]),
            question=str(data.get("question") or ""),
            answer=str(data.get("answer") or ""),
            category=str(category) if category else None
        )
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the create-request payload."""
        payload = asdict(self)
        # 服务端约定：未填写分类时发送空字符串
        payload["category"] = self.category or ""
        return payload


@dataclass
class DraftEntry:
    """
    In-progress entry under operator edit (no id yet).
    
    Attributes:
        question: Question text typed so far
        answer: Answer text typed so far
        category: Optional category text
    """
    
    question: str = ""
    answer: str = ""
    category: str = ""
    
    def is_submittable(self) -> bool:
        """Both question and answer must be non-empty."""
        return bool(self.question) and bool(self.answer)
    
    def reset(self):
        """Clear all fields back to empty."""
        self.question = ""
        self.answer = ""
        self.category = ""
    
    def to_entry(self, entry_id: str) -> Entry:
        """Materialize the draft into an Entry carrying entry_id."""
        return Entry(
            id=entry_id,
            question=self.question,
            answer=self.answer,
            category=self.category or None
        )
