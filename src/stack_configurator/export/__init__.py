"""Plan image export."""

from stack_configurator.export.floorplan import draw_floor, render_floorplan
from stack_configurator.export.overview import render_overview

__all__ = ["draw_floor", "render_floorplan", "render_overview"]
