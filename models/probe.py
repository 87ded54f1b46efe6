"""
Probe result models for Smart FAQ Admin Workbench.

A probe is an ad-hoc query sent to the answer endpoint; the result is kept
exactly as the service returned it.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ProbeSource:
    """
    A supporting entry matched by the service.
    
    Attributes:
        question: Matched question text
        answer: Matched answer text
        similarity: Service-reported relevance in [0, 1]
    """
    
    question: str
    answer: str
    similarity: float
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProbeSource":
        if not isinstance(data, dict):
            raise TypeError("source must be an object")
        return cls(
            question=str(data.get("question") or ""),
            answer=str(data.get("answer") or ""),
            similarity=float(data["similarity"])
        )


@dataclass(frozen=True)
class ProbeResult:
    """
    Answer returned for a probe query.
    
    Sources keep the order delivered by the service (descending similarity);
    no field is transformed on the client.
    
    Attributes:
        answer: Generated answer text
        sources: Ranked supporting entries
        confidence: Service-reported reliability in [0, 1]
        response_time: Server-side latency in milliseconds
    """
    
    answer: str
    sources: List[ProbeSource] = field(default_factory=list)
    confidence: float = 0.0
    response_time: int = 0
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProbeResult":
        """
        Build a ProbeResult from the decoded answer response.
        
        Raises:
            KeyError: If answer, confidence or responseTime is missing
            TypeError: If data is not a mapping or sources is not a list
            ValueError: If a numeric field cannot be converted
        """
        if not isinstance(data, dict):
            raise TypeError(f"answer response must be an object, got {type(data).__name__}")
        
        sources = data.get("sources") or []
        if not isinstance(sources, list):
            raise TypeError(f"sources must be a list, got {type(sources).__name__}")
        
        return cls(
            answer=str(data["answer"]),
            sources=[ProbeSource.from_dict(item) for item in sources],
            confidence=float(data["confidence"]),
            response_time=int(data["responseTime"])
        )
