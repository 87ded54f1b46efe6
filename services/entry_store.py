"""
EntryStore for the knowledge-base curation flow.

Holds the entry list exactly as the service last returned it. Every
mutation (create or delete) is followed by a full reload; the client never
merges, sorts or patches the list itself.
"""

import uuid
import logging
from typing import Callable, List, Optional

from models import Entry, DraftEntry, FlowState, Outcome
from services.api_client import FaqApiClient, get_client
from utils.performance import measure_time

logger = logging.getLogger(__name__)


def new_entry_id() -> str:
    """Client-generated entry id (UUID4 hex)."""
    return uuid.uuid4().hex


class EntryStore:
    """
    In-memory entry list plus the curation busy flag.
    
    Attributes:
        entries: Entries in service order
        flow: Busy/idle state of the curation flow
        last_refresh: Outcome of the most recent list request
    """
    
    def __init__(
        self,
        client: Optional[FaqApiClient] = None,
        id_factory: Callable[[], str] = new_entry_id
    ):
        """
        Initialize EntryStore.
        
        Args:
            client: Service client (defaults to the process-wide client)
            id_factory: Generates ids for new entries
        """
        self.entries: List[Entry] = []
        self.flow = FlowState()
        self.last_refresh: Optional[Outcome] = None
        self._client = client
        self._id_factory = id_factory
    
    @property
    def client(self) -> FaqApiClient:
        return self._client or get_client()
    
    def __len__(self) -> int:
        return len(self.entries)
    
    def find(self, entry_id: str) -> Optional[Entry]:
        """Get entry by id, or None if not loaded."""
        for entry in self.entries:
            if entry.id == entry_id:
                return entry
        return None
    
    def _reload(self, token: int) -> Outcome:
        """Fetch the list and replace entries if token is still current."""
        outcome = self.client.list_entries()
        self.last_refresh = outcome
        
        if not outcome.ok:
            logger.warning(f"Entry list not refreshed: {outcome.describe()}")
        elif self.flow.is_current(token):
            self.entries = list(outcome.data)
            logger.info(f"Entry store refreshed: {len(self.entries)} entries")
        else:
            logger.debug(f"Discarded stale entry list (request {token})")
        
        return outcome
    
    def refresh(self) -> Outcome:
        """
        Replace the store with the service's current list.
        
        On failure the previous entries are kept.
        
        Returns:
            Outcome of the list request
        """
        token = self.flow.begin()
        try:
            return self._reload(token)
        finally:
            self.flow.finish(token)
    
    def submit(self, draft: DraftEntry) -> Optional[Outcome]:
        """
        Create an entry from draft, then reload.
        
        The reload runs and the draft is cleared whatever the create call
        reports.
        
        Args:
            draft: Draft entry; question and answer must be non-empty
        
        Returns:
            Outcome of the create request, or None if draft was not
            submittable (no request issued, nothing changed)
        """
        if not draft.is_submittable():
            return None
        
        with measure_time("submit_cycle"):
            token = self.flow.begin()
            try:
                entry = draft.to_entry(self._id_factory())
                logger.info(f"Creating entry {entry.id}")
                outcome = self.client.create_entry(entry)
                self._reload(token)
            finally:
                self.flow.finish(token)
                draft.reset()
        
        return outcome
    
    def remove(self, entry_id: str) -> Outcome:
        """
        Delete entry_id on the service, then reload.
        
        Args:
            entry_id: Id of the entry to delete
        
        Returns:
            Outcome of the delete request
        """
        with measure_time("remove_cycle"):
            token = self.flow.begin()
            try:
                logger.info(f"Deleting entry {entry_id}")
                outcome = self.client.delete_entry(entry_id)
                self._reload(token)
            finally:
                self.flow.finish(token)
        
        return outcome
