"""2D floor plan rendering using matplotlib.

Draws one floor of a layout as a top-down plan:
- South row at the bottom, north (corridor side) row on top
- Each suite as one colored block spanning its modules, with unit code
- Elevator block in the middle of the south row
- Empty slots hatched
- External stairwells at both ends (optional)
"""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # headless rendering
import matplotlib.pyplot as plt
import matplotlib.patches as patches
import matplotlib.patheffects as pe
import numpy as np

from stack_configurator.models.layout import CoreModule, FloorPlan, SuiteInstance
from stack_configurator.models.suites import (
    MODULE_WIDTH,
    NORTH_DEPTH,
    SOUTH_DEPTH,
    STAIR_DEPTH,
    STAIR_INFO,
    STAIR_WIDTH,
    Row,
)

# Halo effect for text readability on any background
_TEXT_HALO = [pe.withStroke(linewidth=3, foreground="white")]

_OUTLINE = "#6B7280"


def _row_origin(row: Row) -> tuple[float, float]:
    """(y0, depth) of a row in plan coordinates."""
    if row is Row.SOUTH:
        return 0.0, SOUTH_DEPTH
    return SOUTH_DEPTH, NORTH_DEPTH


def draw_floor(
    ax: plt.Axes,
    plan: FloorPlan,
    include_stairs: bool = True,
    show_labels: bool = True,
) -> None:
    """Draw a floor plan onto existing axes (plan coordinates in meters)."""
    n = plan.single_side_modules
    width = n * MODULE_WIDTH
    depth = SOUTH_DEPTH + NORTH_DEPTH

    for row in Row:
        y0, row_depth = _row_origin(row)
        drawn: set[str] = set()
        for i, slot in enumerate(plan.row(row)):
            x0 = i * MODULE_WIDTH
            if slot is None:
                ax.add_patch(patches.Rectangle(
                    (x0, y0), MODULE_WIDTH, row_depth,
                    facecolor="#FFFFFF", edgecolor=_OUTLINE,
                    hatch="//", linewidth=0.3, zorder=2,
                ))
                continue
            if slot.instance_id in drawn:
                continue
            drawn.add(slot.instance_id)
            if isinstance(slot, SuiteInstance):
                _draw_suite(ax, slot, y0, row_depth, show_labels)
            elif isinstance(slot, CoreModule):
                _draw_block(
                    ax, x0, y0, MODULE_WIDTH, row_depth,
                    slot.descriptor.color,
                    slot.descriptor.name if show_labels else None,
                )

    # Module grid
    for x in np.arange(0.0, width + MODULE_WIDTH / 2, MODULE_WIDTH):
        ax.plot([x, x], [0, depth], color=_OUTLINE, linewidth=0.2, zorder=1)

    # Corridor line between the rows
    ax.plot([0, width], [SOUTH_DEPTH, SOUTH_DEPTH],
            color="#111827", linewidth=1.5, linestyle="--", zorder=6)

    # Building outline
    ax.add_patch(patches.Rectangle(
        (0, 0), width, depth, fill=False,
        edgecolor="#111827", linewidth=1.5, zorder=7,
    ))

    if include_stairs:
        stair_y = (depth - STAIR_DEPTH) / 2
        for stair_x in (-STAIR_WIDTH, width):
            _draw_block(
                ax, stair_x, stair_y, STAIR_WIDTH, STAIR_DEPTH,
                STAIR_INFO.color, STAIR_INFO.name if show_labels else None,
            )

    margin = 1.0
    x_min = -STAIR_WIDTH if include_stairs else 0.0
    x_max = width + STAIR_WIDTH if include_stairs else width
    ax.set_xlim(x_min - margin, x_max + margin)
    ax.set_ylim(-margin, depth + margin)
    ax.set_aspect("equal")


def _draw_block(
    ax: plt.Axes,
    x: float,
    y: float,
    w: float,
    h: float,
    color: str,
    label: str | None,
) -> None:
    ax.add_patch(patches.Rectangle(
        (x, y), w, h, facecolor=color, edgecolor=_OUTLINE,
        linewidth=0.6, zorder=3,
    ))
    if label:
        ax.text(x + w / 2, y + h / 2, label, fontsize=6, ha="center",
                va="center", path_effects=_TEXT_HALO, zorder=20)


def _draw_suite(
    ax: plt.Axes,
    suite: SuiteInstance,
    y0: float,
    row_depth: float,
    show_labels: bool,
) -> None:
    """Draw a suite as one block over its modules."""
    x0 = suite.start * MODULE_WIDTH
    w = suite.module_count * MODULE_WIDTH
    _draw_block(ax, x0, y0, w, row_depth, suite.descriptor.color, None)
    if show_labels:
        ax.text(
            x0 + w / 2, y0 + row_depth / 2,
            f"{suite.descriptor.name}\n{suite.unit_code}",
            fontsize=6, ha="center", va="center",
            path_effects=_TEXT_HALO, zorder=20,
        )


def render_floorplan(
    plan: FloorPlan,
    output_path: str | Path,
    title: str | None = None,
    dpi: int = 150,
    include_stairs: bool = True,
    show_labels: bool = True,
    show_title: bool = True,
) -> Path:
    """Render one floor plan to PNG.

    Args:
        plan: The floor to render.
        output_path: Output image path.
        title: Plot title (defaults to the physical floor number).
        dpi: Image resolution.
        include_stairs: Draw the external stairwells.
        show_labels: Show suite names and unit codes.
        show_title: Show title bar at top.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(1, 1, figsize=(14, 5))
    fig.patch.set_facecolor("white")
    draw_floor(ax, plan, include_stairs=include_stairs, show_labels=show_labels)

    if show_title:
        ax.set_title(title or f"Floor {plan.index + 1}",
                     fontsize=14, fontweight="bold", pad=12)
    ax.set_xlabel("X (meters)", fontsize=9)
    ax.set_ylabel("Y (meters)", fontsize=9)

    plt.tight_layout()
    fig.savefig(str(output_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return output_path
