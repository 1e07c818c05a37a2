"""Stack Configurator CLI.

Usage:
    python -m stack_configurator <command> <project.json> [options]

A project file holds the envelope parameters and the desired suite mix.
'init' writes one; every other command reads it, regenerates the layout
from scratch and prints JSON to stdout.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError as ModelValidationError

from stack_configurator.generators.capacity import compute_capacity, compute_envelope
from stack_configurator.generators.ordering import floor_score
from stack_configurator.generators.pipeline import generate_layout
from stack_configurator.generators.quota import compute_quotas, quota_modules
from stack_configurator.models.layout import BuildingLayout, FloorPlan, SuiteInstance
from stack_configurator.models.project import Project, ProjectParameters, SuiteMixRequest
from stack_configurator.queries.summary import summarize_layout
from stack_configurator.validators.layout import validate_layout

app = typer.Typer(
    name="stack_configurator",
    help="Stack Configurator: suite placement for modular residential buildings.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _output(data: dict) -> None:
    """Print JSON output to stdout."""
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(message: str) -> None:
    _output({"ok": False, "error": message})
    raise typer.Exit(1)


def _load_project(path: Path) -> Project:
    """Load a project file, reporting problems as JSON."""
    if not path.exists():
        _fail(f"Project not found: {path}")
    try:
        return Project.load(path)
    except ModelValidationError as e:
        _fail(f"Invalid project file {path}: {e.errors(include_url=False)}")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _slot_json(slot) -> str | None:
    if slot is None:
        return None
    if isinstance(slot, SuiteInstance):
        return slot.instance_id
    return slot.kind


def _floor_json(plan: FloorPlan) -> dict:
    return {
        "index": plan.index,
        "score": floor_score(plan),
        "north": [_slot_json(s) for s in plan.north],
        "south": [_slot_json(s) for s in plan.south],
        "suites": [
            {
                "id": s.instance_id,
                "type": s.suite_type.value,
                "row": s.row.value,
                "start": s.start,
                "modules": s.module_count,
                "code": s.unit_code,
            }
            for s in plan.suites()
        ],
        "dropped": [s.value for s in plan.dropped],
    }


def _layout_json(layout: BuildingLayout) -> dict:
    return {
        "single_side_modules": layout.single_side_modules,
        "floor_count": layout.floor_count,
        "floors": [_floor_json(f) for f in layout.floors],
    }


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def init(
    project: Path = typer.Argument(..., help="Project file to create"),
    name: str = typer.Option("Untitled Project", "--name", help="Project name"),
    width: float = typer.Option(49.2, "--width", help="Building width (m)"),
    height: float = typer.Option(10.0, "--height", help="Building height (m)"),
    floor_height: float = typer.Option(3.175, "--floor-height", help="Floor-to-floor height (m)"),
    stairs: bool = typer.Option(True, "--stairs/--no-stairs", help="Include external stairwells"),
    studio: float = typer.Option(25.0, "--studio", help="Studio share (%)"),
    one_bed: float = typer.Option(25.0, "--one-bed", help="1 bedroom share (%)"),
    two_bed: float = typer.Option(25.0, "--two-bed", help="2 bedroom share (%)"),
    three_bed: float = typer.Option(25.0, "--three-bed", help="3 bedroom share (%)"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    """Create a project file."""
    if project.exists() and not force:
        _fail(f"Project already exists: {project} (use --force)")
    try:
        proj = Project(
            name=name,
            parameters=ProjectParameters(
                width=width, height=height,
                floor_height=floor_height, include_stairs=stairs,
            ),
            mix=SuiteMixRequest(
                studio=studio, one_bed=one_bed,
                two_bed=two_bed, three_bed=three_bed,
            ),
        )
    except ModelValidationError as e:
        _fail(str(e.errors(include_url=False)))
    path = proj.save(project)
    result: dict = {"ok": True, "project": str(path)}
    if not proj.mix.is_complete:
        result["warning"] = f"Suite mix totals {proj.mix.total:.1f}%, expected 100%"
    _output(result)


@app.command()
def capacity(project: Path = typer.Argument(..., help="Project file")):
    """Envelope and capacity figures, plus the suite quotas they imply."""
    proj = _load_project(project)
    params = proj.parameters
    cap = compute_capacity(params.width, params.height, params.floor_height)
    env = compute_envelope(params)
    quotas = compute_quotas(proj.mix.percentages(), cap.total_residential_modules)

    _output({
        "ok": True,
        "project": proj.name,
        "capacity": {
            "single_side_modules": cap.single_side_modules,
            "floor_count": cap.floor_count,
            "per_floor_capacity": cap.per_floor_capacity,
            "total_residential_modules": cap.total_residential_modules,
        },
        "envelope": {
            "width_m": round(env.width, 2),
            "depth_m": round(env.depth, 2),
            "height_m": round(env.height, 2),
            "modules_per_floor": env.modules_per_floor,
            "total_modules": env.total_modules,
            "footprint_area_m2": round(env.footprint_area, 1),
            "total_area_m2": round(env.total_area, 1),
        },
        "quotas": {t.value: n for t, n in quotas.items()},
        "quota_modules": quota_modules(quotas),
        "mix_total": proj.mix.total,
    })


@app.command()
def generate(
    project: Path = typer.Argument(..., help="Project file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log placement decisions"),
):
    """Generate the building layout."""
    _configure_logging(verbose)
    proj = _load_project(project)
    layout = generate_layout(proj.parameters, proj.mix)
    _output({"ok": True, "project": proj.name, "layout": _layout_json(layout)})


@app.command()
def summary(project: Path = typer.Argument(..., help="Project file")):
    """Desired vs. actual suite mix, module totals and areas."""
    proj = _load_project(project)
    layout = generate_layout(proj.parameters, proj.mix)
    result = summarize_layout(layout, proj.mix, proj.parameters.include_stairs)
    _output({"ok": True, "project": proj.name, "summary": result.to_dict()})


@app.command()
def validate(project: Path = typer.Argument(..., help="Project file")):
    """Run layout validators on the generated layout."""
    proj = _load_project(project)
    layout = generate_layout(proj.parameters, proj.mix)
    errors = validate_layout(layout)
    _output({
        "ok": True,
        "validation": {
            "errors": sum(1 for e in errors if e.severity == "error"),
            "warnings": sum(1 for e in errors if e.severity == "warning"),
            "details": [
                {
                    "severity": e.severity,
                    "element_type": e.element_type,
                    "element_id": e.element_id,
                    "message": e.message,
                }
                for e in errors
            ],
        },
    })


@app.command()
def render(
    project: Path = typer.Argument(..., help="Project file"),
    output_dir: Optional[Path] = typer.Option(None, "--output", "-o", help="Output directory"),
    floor: Optional[int] = typer.Option(None, "--floor", "-f", help="Render one physical floor (1-based)"),
    overview: bool = typer.Option(True, "--overview/--no-overview", help="Also render all floors in one image"),
):
    """Render floor plan(s) to PNG."""
    from stack_configurator.export.floorplan import render_floorplan
    from stack_configurator.export.overview import render_overview

    proj = _load_project(project)
    layout = generate_layout(proj.parameters, proj.mix)
    out = output_dir if output_dir else project.parent / "output"
    out.mkdir(parents=True, exist_ok=True)
    stairs = proj.parameters.include_stairs

    if floor is not None and layout.get_floor(floor - 1) is None:
        _fail(f"Floor {floor} not found (1-{layout.floor_count})")

    rendered = []
    for plan in layout.physical_order():
        if floor is not None and plan.index != floor - 1:
            continue
        img_path = out / f"floor_{plan.index + 1}.png"
        render_floorplan(plan, img_path, include_stairs=stairs)
        rendered.append({"floor": plan.index + 1, "path": str(img_path)})

    result: dict = {"ok": True, "rendered": rendered}
    if overview and floor is None:
        result["overview"] = str(
            render_overview(layout, out / "overview.png",
                            include_stairs=stairs, title=proj.name)
        )
    _output(result)


@app.command()
def version() -> None:
    """Show version."""
    from stack_configurator import __version__

    typer.echo(f"stack-configurator v{__version__}")


if __name__ == "__main__":
    app()
