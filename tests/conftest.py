import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from link_planner.adapter import LinkPlannerAPI
from link_planner.application.state import PlannerState
from link_planner.domain.models.geo import Coordinates
from link_planner.infrastructure.map.web_mercator import WebMercatorViewport


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def planner_state() -> PlannerState:
    return PlannerState()


@pytest.fixture
def viewport() -> WebMercatorViewport:
    return WebMercatorViewport(
        center=Coordinates(13.027, 77.545), zoom=15, size=(800, 600)
    )


@pytest.fixture
def link_planner_api(viewport) -> LinkPlannerAPI:
    planner = LinkPlannerAPI(viewport)
    yield planner
    planner.close()
