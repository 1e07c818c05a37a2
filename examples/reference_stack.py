"""Reference stack: 13 modules per row, 3 floors, even suite mix.

   N (corridor side)
   ↑
   | north | 0 | 1 | ... | 12 |
   |       ----- corridor -----
   | south | 0 | ... | E | ... | 12 |

Generates the layout, prints the summary table and validation findings,
and renders the floor plans next to this script.
"""

import logging
from pathlib import Path

from stack_configurator.export.floorplan import render_floorplan
from stack_configurator.export.overview import render_overview
from stack_configurator.generators.capacity import compute_capacity
from stack_configurator.generators.pipeline import LayoutStore
from stack_configurator.models import ProjectParameters, SuiteMixRequest
from stack_configurator.queries.summary import summarize_layout
from stack_configurator.validators.layout import validate_layout


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    params = ProjectParameters(width=49.2, height=10, floor_height=3.175)
    mix = SuiteMixRequest(studio=25, one_bed=25, two_bed=25, three_bed=25)

    cap = compute_capacity(params.width, params.height, params.floor_height)
    print(f"{cap.floor_count} floors x {cap.single_side_modules} modules/row, "
          f"{cap.total_residential_modules} residential modules")

    store = LayoutStore()
    layout = store.regenerate(params, mix)

    summary = summarize_layout(layout, mix, params.include_stairs)
    print(f"\n{'Type':<12}{'Count':>6}{'Modules':>9}{'Desired':>9}{'Actual':>8}{'Area m2':>10}")
    for row in summary.rows():
        desired = "" if row.desired_percentage is None else f"{row.desired_percentage:.1f}%"
        actual = "" if row.actual_percentage is None else f"{row.actual_percentage:.1f}%"
        print(f"{row.name:<12}{row.count:>6}{row.module_total:>9}"
              f"{desired:>9}{actual:>8}{row.total_area:>10.0f}")

    findings = validate_layout(layout)
    print(f"\n{len(findings)} findings")
    for f in findings:
        print(f"  [{f.severity}] {f.element_id}: {f.message}")

    out = Path(__file__).parent / "output"
    for plan in layout.physical_order():
        render_floorplan(plan, out / f"floor_{plan.index + 1}.png")
    render_overview(layout, out / "overview.png")
    print(f"\nPlans written to {out}")


if __name__ == "__main__":
    main()
