"""
Busy/idle state for one asynchronous flow.

Each flow (curation, probe, analytics) owns its own FlowState so that an
in-flight request in one panel never disables the controls of another.
"""

from dataclasses import dataclass


@dataclass
class FlowState:
    """
    Two-state machine {idle, busy} plus a generation counter.
    
    Attributes:
        busy: True while a request issued by this flow is in flight
        generation: Token of the most recently issued request
    """
    
    busy: bool = False
    generation: int = 0
    
    def begin(self) -> int:
        """Enter busy and return the token of the new request."""
        self.generation += 1
        self.busy = True
        return self.generation
    
    def is_current(self, token: int) -> bool:
        return token == self.generation
    
    def finish(self, token: int) -> bool:
        """
        Return to idle if token belongs to the latest request.
        
        Args:
            token: Value returned by begin() for the finished request
        
        Returns:
            True if the response is current and may be applied
        """
        if not self.is_current(token):
            return False
        self.busy = False
        return True
