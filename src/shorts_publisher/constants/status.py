"""Status enums and state constants for the shorts publisher.

AI CONTEXT:
-----------
Every queued file walks this state machine exactly once per run:

  QUEUED -> VALIDATING -> FAILED
                |
                v
            VALIDATED -> CHECKING_DUP -> DUPS
                              |
                              v
                            READY -> PUBLISHING -> SENT
                                          |
                                          v
                                        FAILED

SENT, FAILED and DUPS are terminal and map 1:1 to outcome folders.

MODIFICATION GUIDE:
------------------
- Add new enum values at the END to maintain backwards compatibility
- Keep ALLOWED_TRANSITIONS in sync with the diagram above
"""

from enum import Enum
from typing import Final


# =============================================================================
# OUTCOME
# =============================================================================

class Outcome(str, Enum):
    """Terminal filing location of a processed item."""

    SENT = "sent"
    """Published successfully."""

    FAILED = "failed"
    """Rejected by preflight or publishing failed."""

    DUPS = "dups"
    """Title already used recently on the channel."""

    @property
    def state(self) -> "ItemState":
        """Terminal item state matching this outcome."""
        return ItemState(self.value)


# =============================================================================
# ITEM STATE
# =============================================================================

class ItemState(str, Enum):
    """State of one queue item while the pipeline processes it."""

    QUEUED = "queued"
    VALIDATING = "validating"
    VALIDATED = "validated"
    CHECKING_DUP = "checking_dup"
    READY = "ready"
    PUBLISHING = "publishing"
    SENT = "sent"
    FAILED = "failed"
    DUPS = "dups"

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES: Final[frozenset] = frozenset({
    ItemState.SENT,
    ItemState.FAILED,
    ItemState.DUPS,
})

ALLOWED_TRANSITIONS: Final[dict] = {
    ItemState.QUEUED: frozenset({ItemState.VALIDATING}),
    ItemState.VALIDATING: frozenset({ItemState.VALIDATED, ItemState.FAILED}),
    ItemState.VALIDATED: frozenset({ItemState.CHECKING_DUP}),
    ItemState.CHECKING_DUP: frozenset({ItemState.READY, ItemState.DUPS}),
    ItemState.READY: frozenset({ItemState.PUBLISHING}),
    ItemState.PUBLISHING: frozenset({ItemState.SENT, ItemState.FAILED}),
    ItemState.SENT: frozenset(),
    ItemState.FAILED: frozenset(),
    ItemState.DUPS: frozenset(),
}
"""Legal next states for each state."""


# =============================================================================
# DISPLAY
# =============================================================================

OUTCOME_STYLES: Final[dict] = {
    Outcome.SENT: "green",
    Outcome.FAILED: "red",
    Outcome.DUPS: "yellow",
}
"""Rich styles used when printing outcomes."""
