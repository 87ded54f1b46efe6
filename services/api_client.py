"""
FaqApiClient for the Smart FAQ service.

Issues the five request types the workbench needs and turns every response
into an Outcome. Transport and parse errors never escape this module.
"""

import logging
from typing import Any, Callable, List, Optional
from urllib.parse import quote

import httpx

from models import Entry, ProbeResult, AnalyticsSnapshot, Outcome, FailureKind
from utils.performance import monitor_performance

logger = logging.getLogger(__name__)

FAQS_PATH = "/api/faqs"
ANSWER_PATH = "/api/answer"
ANALYTICS_PATH = "/api/analytics"


def _parse_entries(data: Any) -> List[Entry]:
    if not isinstance(data, list):
        raise TypeError(f"entry list must be an array, got {type(data).__name__}")
    return [Entry.from_dict(item) for item in data]


class FaqApiClient:
    """
    HTTP client for the FAQ service.
    
    Attributes:
        base_url: Service base address without trailing slash
        timeout: Request timeout in seconds, None to wait indefinitely
    """
    
    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize FaqApiClient.
        
        Args:
            base_url: Service base address, e.g. https://faq.example.dev
            timeout: Request timeout in seconds (None disables it)
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"}
        )
        logger.info(f"FaqApiClient initialized for {self.base_url}")
    
    def close(self):
        self._http.close()
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
    
    def _request(
        self,
        method: str,
        path: str,
        json_body: Any = None,
        parse: Optional[Callable[[Any], Any]] = None
    ) -> Outcome:
        """
        Send one request and classify the result.
        
        Args:
            method: HTTP method
            path: Path relative to base_url
            json_body: Payload sent as JSON (sets Content-Type)
            parse: Converts the decoded JSON body; None ignores the body
        
        Returns:
            Outcome.success(parsed) or Outcome.failure(kind, message)
        """
        logger.debug(f"{method} {path}")
        try:
            response = self._http.request(method, path, json=json_body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = f"HTTP {e.response.status_code}"
            logger.warning(f"{method} {path} failed: {message}")
            return Outcome.failure(FailureKind.TRANSPORT, message)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            return Outcome.failure(FailureKind.TRANSPORT, str(e) or type(e).__name__)
        
        if parse is None:
            return Outcome.success()
        
        try:
            return Outcome.success(parse(response.json()))
        except (ValueError, KeyError, TypeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"{method} {path} returned malformed body: {e}")
            return Outcome.failure(FailureKind.MALFORMED, str(e))
    
    @monitor_performance("list_entries")
    def list_entries(self) -> Outcome:
        """GET /api/faqs -> Outcome[List[Entry]]"""
        return self._request("GET", FAQS_PATH, parse=_parse_entries)
    
    @monitor_performance("create_entry")
    def create_entry(self, entry: Entry) -> Outcome:
        """POST /api/faqs with the full entry (client-assigned id). Body ignored."""
        return self._request("POST", FAQS_PATH, json_body=entry.to_dict())
    
    @monitor_performance("delete_entry")
    def delete_entry(self, entry_id: str) -> Outcome:
        """DELETE /api/faqs/{id}. Body ignored."""
        return self._request("DELETE", f"{FAQS_PATH}/{quote(entry_id, safe='')}")
    
    @monitor_performance("answer_query")
    def answer_query(self, query: str) -> Outcome:
        """POST /api/answer {query} -> Outcome[ProbeResult]"""
        return self._request(
            "POST", ANSWER_PATH,
            json_body={"query": query},
            parse=ProbeResult.from_dict
        )
    
    @monitor_performance("fetch_analytics")
    def fetch_analytics(self) -> Outcome:
        """GET /api/analytics -> Outcome[AnalyticsSnapshot]"""
        return self._request("GET", ANALYTICS_PATH, parse=AnalyticsSnapshot.from_dict)


# Process-wide client shared by all sessions
_default_client: Optional[FaqApiClient] = None


def set_client(client: Optional[FaqApiClient]):
    """Install the process-wide client (called once at startup)."""
    global _default_client
    _default_client = client


def get_client() -> FaqApiClient:
    """
    Get the process-wide client.
    
    Raises:
        RuntimeError: If set_client() has not been called
    """
    if _default_client is None:
        raise RuntimeError("FaqApiClient has not been configured")
    return _default_client
