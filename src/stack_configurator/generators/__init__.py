"""Layout generation tools.

Pure functions that turn project inputs into a BuildingLayout:
- Capacity model: envelope → modules per row, floors, capacity
- Quota calculator: percentages → suite counts
- Bin-packer: suites → floors, with gap-fill
- Placer: floor suites → row positions around the elevator
- Ordering: presentation sort by floor density
- Pipeline: the whole chain, plus the LayoutStore
"""

from stack_configurator.generators.capacity import (
    Capacity,
    EnvelopeMetrics,
    compute_capacity,
    compute_envelope,
    round_half_away,
    snap_height,
)
from stack_configurator.generators.quota import compute_quotas, expand_quotas
from stack_configurator.generators.packing import first_fit, gap_fill, pack_floors
from stack_configurator.generators.placement import place_floor
from stack_configurator.generators.ordering import floor_score, sort_floors
from stack_configurator.generators.pipeline import LayoutStore, generate_layout

__all__ = [
    "Capacity",
    "EnvelopeMetrics",
    "compute_capacity",
    "compute_envelope",
    "round_half_away",
    "snap_height",
    "compute_quotas",
    "expand_quotas",
    "first_fit",
    "gap_fill",
    "pack_floors",
    "place_floor",
    "floor_score",
    "sort_floors",
    "LayoutStore",
    "generate_layout",
]
