"""
Outcome type for remote service calls.

Every request made by the service client resolves to exactly one Outcome:
either success carrying parsed data, or failure carrying a kind and message.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class FailureKind(Enum):
    """Categories of remote call failure."""
    TRANSPORT = "transport"  # unreachable, timeout, non-2xx status
    MALFORMED = "malformed"  # unparseable or structurally wrong body


@dataclass(frozen=True)
class Outcome:
    """
    Result of a remote call.
    
    Attributes:
        ok: True on success
        data: Parsed payload on success (None for ignored bodies)
        kind: Failure category on failure
        message: Human-readable failure detail
    """
    
    ok: bool
    data: Any = None
    kind: Optional[FailureKind] = None
    message: str = ""
    
    @classmethod
    def success(cls, data: Any = None) -> "Outcome":
        return cls(ok=True, data=data)
    
    @classmethod
    def failure(cls, kind: FailureKind, message: str = "") -> "Outcome":
        return cls(ok=False, kind=kind, message=message)
    
    def describe(self) -> str:
        """Short status text for banners and logs."""
        if self.ok:
            return "成功"
        if self.kind == FailureKind.MALFORMED:
            return f"响应格式错误: {self.message}"
        return f"网络请求失败: {self.message}"
