class PlannerException(Exception):
    """
    Base exception for all link planner errors.
    """


class ValidationError(PlannerException, ValueError):
    """
    Raised when coordinates or a frequency fail validation.
    """


class TowerNotFoundError(PlannerException, KeyError):
    """
    Raised when a tower ID is not known to the planner state.
    """


class LinkNotFoundError(PlannerException, KeyError):
    """
    Raised when a link ID is not known to the planner state.
    """


class FrequencyMismatchError(PlannerException):
    """
    Raised when two towers with different frequencies are linked.
    """

    def __init__(self, tower_a, tower_b):
        self.tower_a = tower_a
        self.tower_b = tower_b
        super().__init__(
            f"Frequencies mismatch! {tower_a.id}: {tower_a.frequency_ghz} GHz "
            f"vs {tower_b.id}: {tower_b.frequency_ghz} GHz."
        )
