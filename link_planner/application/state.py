"""Explicit application state: towers and links of one planning session."""

import math

from link_planner.domain import geo_math
from link_planner.domain.constants import DEFAULT_FREQUENCY_GHZ
from link_planner.domain.exceptions import (
    FrequencyMismatchError,
    LinkNotFoundError,
    TowerNotFoundError,
    ValidationError,
)
from link_planner.domain.models.geo import Coordinates
from link_planner.domain.models.planner import Link, Tower
from link_planner.domain.models.units import Meters
from link_planner.domain.validators import parse_frequency, validate_coordinates
from link_planner.logging_config import get_logger

logger = get_logger(__name__)


class PlannerState:
    """
    Towers and links keyed by ID, in insertion order.

    Towers and links draw their numbers from one shared counter, so IDs
    read T1, T2, L3, T4, ...
    """

    def __init__(self, default_frequency_ghz: float = DEFAULT_FREQUENCY_GHZ):
        self.default_frequency_ghz = parse_frequency(default_frequency_ghz)
        self.towers: dict[str, Tower] = {}
        self.links: dict[str, Link] = {}
        self._next_id = 1

    def _allocate_id(self, prefix: str) -> str:
        new_id = f"{prefix}{self._next_id}"
        self._next_id += 1
        return new_id

    def add_tower(
        self, position: Coordinates, frequency_ghz: float | None = None
    ) -> Tower:
        validate_coordinates(position)
        frequency = parse_frequency(
            self.default_frequency_ghz if frequency_ghz is None else frequency_ghz
        )

        tower = Tower(
            id=self._allocate_id("T"), position=position, frequency_ghz=frequency
        )
        self.towers[tower.id] = tower
        logger.info(f"Placed tower {tower.id} at {position} ({frequency} GHz)")
        return tower

    def edit_frequency(self, tower_id: str, new_frequency_ghz: object) -> Tower:
        """
        Change a tower's operating frequency.

        Existing links are not re-validated, a link may end up joining towers
        with different frequencies.

        Raises:
            TowerNotFoundError: If the tower does not exist
            ValidationError: If the frequency is non-numeric or not positive
        """
        tower = self.get_tower(tower_id)
        tower.frequency_ghz = parse_frequency(new_frequency_ghz)
        logger.info(f"Tower {tower.id} frequency set to {tower.frequency_ghz} GHz")
        return tower

    def create_link(self, tower_a_id: str, tower_b_id: str) -> Link:
        """
        Link two distinct towers operating on the same frequency.

        Raises:
            TowerNotFoundError: If either tower does not exist
            ValidationError: If both IDs name the same tower
            FrequencyMismatchError: If the towers' frequencies differ
        """
        tower_a = self.get_tower(tower_a_id)
        tower_b = self.get_tower(tower_b_id)

        if tower_a.id == tower_b.id:
            raise ValidationError(f"Cannot link tower {tower_a.id} to itself")

        if not math.isclose(tower_a.frequency_ghz, tower_b.frequency_ghz):
            raise FrequencyMismatchError(tower_a, tower_b)

        link = Link(
            id=self._allocate_id("L"), tower_a_id=tower_a.id, tower_b_id=tower_b.id
        )
        self.links[link.id] = link
        logger.info(f"Created link {link.id}: {tower_a.id} <-> {tower_b.id}")
        return link

    def get_tower(self, tower_id: str) -> Tower:
        try:
            return self.towers[tower_id]
        except KeyError:
            raise TowerNotFoundError(f"Unknown tower: {tower_id}") from None

    def find_tower(self, tower_id: str) -> Tower | None:
        return self.towers.get(tower_id)

    def get_link(self, link_id: str) -> Link:
        try:
            return self.links[link_id]
        except KeyError:
            raise LinkNotFoundError(f"Unknown link: {link_id}") from None

    def link_towers(self, link: Link) -> tuple[Tower | None, Tower | None]:
        return self.find_tower(link.tower_a_id), self.find_tower(link.tower_b_id)

    def link_distance(self, link: Link) -> Meters:
        """Great-circle length of a link, 0 if a tower is missing."""
        tower_a, tower_b = self.link_towers(link)
        if tower_a is None or tower_b is None:
            return Meters(0.0)
        return geo_math.distance(tower_a.position, tower_b.position)
