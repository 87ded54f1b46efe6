"""Business logic services for Smart FAQ Admin Workbench."""

from .api_client import FaqApiClient, get_client, set_client
from .mode_controller import Mode, ModeController
from .entry_store import EntryStore
from .probe_session import ProbeSession
from .analytics_service import AnalyticsService
from .render_engine import RenderEngine

__all__ = [
    "FaqApiClient",
    "get_client",
    "set_client",
    "Mode",
    "ModeController",
    "EntryStore",
    "ProbeSession",
    "AnalyticsService",
    "RenderEngine"
]
