"""
AnalyticsService for the usage report panel.

Keeps the last successfully fetched snapshot; a failed fetch never
clears it.
"""

import logging
from typing import Optional

from models import AnalyticsSnapshot, FlowState, Outcome
from services.api_client import FaqApiClient, get_client

logger = logging.getLogger(__name__)


class AnalyticsService:
    """
    Last analytics snapshot plus the analytics busy flag.
    
    Attributes:
        snapshot: Last fetched report, None until the first success
        flow: Busy/idle state of the analytics flow
    """
    
    def __init__(self, client: Optional[FaqApiClient] = None):
        self.snapshot: Optional[AnalyticsSnapshot] = None
        self.flow = FlowState()
        self._client = client
    
    @property
    def client(self) -> FaqApiClient:
        return self._client or get_client()
    
    def refresh(self) -> Outcome:
        """
        Fetch the report and replace the snapshot wholesale on success.
        
        Returns:
            Outcome of the analytics request
        """
        token = self.flow.begin()
        try:
            outcome = self.client.fetch_analytics()
            if outcome.ok and self.flow.is_current(token):
                self.snapshot = outcome.data
                logger.info(
                    f"Analytics refreshed: {len(self.snapshot.popular_queries)} popular queries"
                )
            elif not outcome.ok:
                logger.warning(f"Analytics not refreshed: {outcome.describe()}")
        finally:
            self.flow.finish(token)
        
        return outcome
