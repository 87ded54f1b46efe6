"""
Application state model for Smart FAQ Admin Workbench.

Holds everything one browser session owns: the active mode, the three
stores, the draft entry, and the last status line.
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from services.mode_controller import ModeController
    from services.entry_store import EntryStore
    from services.probe_session import ProbeSession
    from services.analytics_service import AnalyticsService

from .entry import DraftEntry


@dataclass
class ApplicationState:
    """
    Per-session state container.
    
    Attributes:
        mode_controller: Selects the visible panel
        entry_store: Knowledge-base entries and curation flow
        probe_session: Last probe query/result and probe flow
        analytics: Last analytics snapshot and analytics flow
        draft: Entry being edited in the curation panel
        status_message: Last status line shown under the mode bar
    """
    
    mode_controller: Optional["ModeController"] = None
    entry_store: Optional["EntryStore"] = None
    probe_session: Optional["ProbeSession"] = None
    analytics: Optional["AnalyticsService"] = None
    draft: DraftEntry = field(default_factory=DraftEntry)
    status_message: str = ""
    
    def get_entry_count(self) -> int:
        """Number of entries currently held by the store."""
        if self.entry_store is None:
            return 0
        return len(self.entry_store)
