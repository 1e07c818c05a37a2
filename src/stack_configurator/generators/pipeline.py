"""Layout generation pipeline.

capacity → quotas → bin-packing → per-floor placement → presentation sort

``generate_layout`` always rebuilds the whole layout from scratch.
``LayoutStore`` holds the current result and swaps it in only once a
new layout is complete, so readers never observe a half-built layout.
"""

from __future__ import annotations

import logging

from stack_configurator.generators.capacity import compute_capacity
from stack_configurator.generators.ordering import sort_floors
from stack_configurator.generators.packing import pack_floors
from stack_configurator.generators.placement import place_floor
from stack_configurator.generators.quota import compute_quotas, expand_quotas
from stack_configurator.models.layout import BuildingLayout
from stack_configurator.models.project import ProjectParameters, SuiteMixRequest

logger = logging.getLogger(__name__)


def generate_layout(
    params: ProjectParameters,
    mix: SuiteMixRequest,
) -> BuildingLayout:
    """Generate a complete building layout.

    Never raises for layout outcomes: shortfalls show up as a divergence
    between desired and actual percentages in the summary, and as
    ``FloorPlan.dropped`` entries.
    """
    capacity = compute_capacity(params.width, params.height, params.floor_height)
    quotas = compute_quotas(mix.percentages(), capacity.total_residential_modules)
    suites = expand_quotas(quotas)

    logger.info(
        "Generating layout: %d floors x %d modules/row, %d residential modules, "
        "%d suites requested",
        capacity.floor_count,
        capacity.single_side_modules,
        capacity.total_residential_modules,
        len(suites),
    )

    per_floor = pack_floors(
        suites, capacity.floor_count, capacity.per_floor_capacity
    )
    plans = [
        place_floor(floor_suites, capacity.single_side_modules, floor_index=i)
        for i, floor_suites in enumerate(per_floor)
    ]

    return BuildingLayout(
        single_side_modules=capacity.single_side_modules,
        floors=tuple(sort_floors(plans)),
    )


class LayoutStore:
    """Owns the current layout for one configuration session.

    ``regenerate`` builds the replacement completely before publishing it;
    the previous layout is discarded in a single assignment.
    """

    def __init__(self) -> None:
        self._layout: BuildingLayout | None = None
        self._params: ProjectParameters | None = None
        self._mix: SuiteMixRequest | None = None

    @property
    def layout(self) -> BuildingLayout | None:
        """Last published layout, or None before the first run."""
        return self._layout

    @property
    def parameters(self) -> ProjectParameters | None:
        return self._params

    @property
    def mix(self) -> SuiteMixRequest | None:
        return self._mix

    def regenerate(
        self,
        params: ProjectParameters,
        mix: SuiteMixRequest,
    ) -> BuildingLayout:
        """Rebuild the layout for new inputs and publish it."""
        layout = generate_layout(params, mix)
        self._layout, self._params, self._mix = layout, params, mix
        return layout

    def clear(self) -> None:
        """Discard the current layout (inputs changed, not yet regenerated)."""
        self._layout = None
