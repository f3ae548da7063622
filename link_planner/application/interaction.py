"""Two-click link creation: first tower, then second tower."""

from dataclasses import dataclass
from enum import Enum

from link_planner.application.state import PlannerState
from link_planner.domain.exceptions import FrequencyMismatchError
from link_planner.domain.interfaces import BaseTowerHighlighter
from link_planner.domain.models.planner import Link
from link_planner.logging_config import get_logger

logger = get_logger(__name__)


class LinkCreationState(Enum):
    IDLE = "idle"
    AWAITING_SECOND_TOWER = "awaiting_second_tower"


class LinkCreationOutcome(Enum):
    STARTED = "started"
    CANCELLED = "cancelled"
    CREATED = "created"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class LinkCreationResult:
    outcome: LinkCreationOutcome
    link: Link | None = None
    reason: str | None = None


class LinkCreationStateMachine:
    """
    Idle -> AwaitingSecondTower -> Idle.

    A tower click in Idle remembers the tower as the pending first end.
    A click on the same tower or on empty map cancels. A click on another
    tower attempts to create the link and always returns to Idle.
    """

    def __init__(
        self,
        state: PlannerState,
        highlighter: BaseTowerHighlighter | None = None,
    ):
        self.planner_state = state
        self.highlighter = highlighter
        self._pending_tower_id: str | None = None

    @property
    def pending_tower_id(self) -> str | None:
        return self._pending_tower_id

    @property
    def state(self) -> LinkCreationState:
        if self._pending_tower_id is None:
            return LinkCreationState.IDLE
        return LinkCreationState.AWAITING_SECOND_TOWER

    def tower_clicked(self, tower_id: str) -> LinkCreationResult:
        # Unknown IDs are rejected before any state change
        self.planner_state.get_tower(tower_id)

        if self._pending_tower_id is None:
            self._set_pending(tower_id)
            return LinkCreationResult(LinkCreationOutcome.STARTED)

        if self._pending_tower_id == tower_id:
            self._clear_pending()
            return LinkCreationResult(LinkCreationOutcome.CANCELLED)

        first_tower_id = self._pending_tower_id
        self._clear_pending()
        try:
            link = self.planner_state.create_link(first_tower_id, tower_id)
        except FrequencyMismatchError as e:
            logger.warning(str(e))
            return LinkCreationResult(LinkCreationOutcome.REJECTED, reason=str(e))
        return LinkCreationResult(LinkCreationOutcome.CREATED, link=link)

    def map_clicked(self) -> bool:
        """Cancel a pending link. Returns True if one was pending."""
        if self._pending_tower_id is None:
            return False
        self._clear_pending()
        return True

    def _set_pending(self, tower_id: str) -> None:
        self._pending_tower_id = tower_id
        if self.highlighter:
            self.highlighter.set_tower_pending(tower_id, True)

    def _clear_pending(self) -> None:
        tower_id = self._pending_tower_id
        self._pending_tower_id = None
        if tower_id is not None and self.highlighter:
            self.highlighter.set_tower_pending(tower_id, False)
