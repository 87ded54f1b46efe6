"""
ModeController for panel selection.

Exactly one of three modes is active at a time. Selecting a mode never
touches any store.
"""

from enum import Enum
from typing import Dict, Union


class Mode(str, Enum):
    """Operating modes of the workbench."""
    CURATION = "curation"
    PROBE = "probe"
    ANALYTICS = "analytics"


class ModeController:
    """
    Holds the active mode.
    
    Attributes:
        mode: Currently selected mode (initially CURATION)
    """
    
    def __init__(self):
        self.mode = Mode.CURATION
    
    def select(self, mode: Union[Mode, str]) -> Mode:
        """
        Switch to mode. All modes are always selectable.
        
        Args:
            mode: Mode member or its string value
        
        Returns:
            The selected Mode
        
        Raises:
            ValueError: If mode is not one of the three known modes
        """
        self.mode = Mode(mode)
        return self.mode
    
    def visibility(self) -> Dict[Mode, bool]:
        """Panel visibility flags; exactly one is True."""
        return {mode: mode == self.mode for mode in Mode}
