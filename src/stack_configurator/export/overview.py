"""Building overview rendering: every floor in one image.

Floors are stacked top to bottom in presentation order, like the floor
thumbnails strip. Each panel is labelled with its physical floor number.
"""

from __future__ import annotations

from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from stack_configurator.export.floorplan import draw_floor
from stack_configurator.generators.ordering import floor_score
from stack_configurator.models.layout import BuildingLayout


def render_overview(
    layout: BuildingLayout,
    output_path: str | Path,
    dpi: int = 120,
    include_stairs: bool = True,
    title: str = "Building Overview",
) -> Path:
    """Render all floor plans stacked in one image.

    Args:
        layout: Layout to render.
        output_path: Output image path.
        dpi: Image resolution.
        include_stairs: Draw the external stairwells.
        title: Figure title.

    Returns:
        Path to the output image.
    """
    output_path = Path(output_path)
    n = layout.floor_count
    if n == 0:
        raise ValueError("Layout has no floors to render")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig, axes = plt.subplots(n, 1, figsize=(12, 3 * n), squeeze=False)
    fig.suptitle(title, fontsize=14, fontweight="bold")

    for ax, plan in zip(axes[:, 0], layout.floors):
        draw_floor(ax, plan, include_stairs=include_stairs, show_labels=False)
        ax.set_title(
            f"Floor {plan.index + 1} ({floor_score(plan)} modules)",
            fontsize=9,
        )
        ax.axis("off")

    plt.tight_layout()
    fig.savefig(str(output_path), dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return output_path
