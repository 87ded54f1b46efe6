"""
ProbeSession for interactive answer testing.

Sends one answer request per probe and keeps the last result verbatim.
"""

import logging
from typing import Optional

from models import FlowState, Outcome, ProbeResult
from services.api_client import FaqApiClient, get_client

logger = logging.getLogger(__name__)


class ProbeSession:
    """
    Last probe query and result plus the probe busy flag.
    
    Attributes:
        last_query: Most recently submitted query
        result: Most recent answer, None before the first success
        flow: Busy/idle state of the probe flow
    """
    
    def __init__(self, client: Optional[FaqApiClient] = None):
        self.last_query = ""
        self.result: Optional[ProbeResult] = None
        self.flow = FlowState()
        self._client = client
    
    @property
    def client(self) -> FaqApiClient:
        return self._client or get_client()
    
    def ask(self, query: str) -> Optional[Outcome]:
        """
        Send query to the answer endpoint.
        
        A successful response replaces the previous result in full; a
        failed one leaves it untouched.
        
        Args:
            query: Probe text; empty queries are ignored
        
        Returns:
            Outcome of the answer request, or None if query was empty
        """
        if not query:
            return None
        
        token = self.flow.begin()
        self.last_query = query
        try:
            outcome = self.client.answer_query(query)
            if outcome.ok and self.flow.is_current(token):
                self.result = outcome.data
                logger.info(
                    f"Probe answered: confidence={self.result.confidence} "
                    f"sources={len(self.result.sources)} time={self.result.response_time}ms"
                )
            elif not outcome.ok:
                logger.warning(f"Probe failed: {outcome.describe()}")
        finally:
            self.flow.finish(token)
        
        return outcome
