"""Project inputs: envelope parameters and the desired suite mix.

These models are the caller-side validation boundary. The placement
engine itself takes plain numbers and assumes they are sanitized.
"""

from __future__ import annotations

import math
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from stack_configurator.models.suites import (
    FLOOR_HEIGHTS,
    MAX_HEIGHT,
    MAX_WIDTH,
    MODULE_WIDTH,
    SuiteType,
)


class ProjectParameters(BaseModel):
    """Building envelope. Drives the capacity model."""

    width: float = Field(
        default=13 * MODULE_WIDTH,
        gt=0,
        le=MAX_WIDTH,
        allow_inf_nan=False,
        description="Building width along the rows (m)",
    )
    height: float = Field(
        default=10.0,
        gt=0,
        le=MAX_HEIGHT,
        allow_inf_nan=False,
        description="Overall building height (m)",
    )
    floor_height: float = Field(
        default=FLOOR_HEIGHTS[0], description="Floor-to-floor height (m)"
    )
    include_stairs: bool = True

    @field_validator("floor_height")
    @classmethod
    def allowed_floor_height(cls, v: float) -> float:
        if not any(math.isclose(v, h, abs_tol=1e-6) for h in FLOOR_HEIGHTS):
            raise ValueError(
                f"Floor height {v}m not supported. Allowed: {list(FLOOR_HEIGHTS)}"
            )
        return v


class SuiteMixRequest(BaseModel):
    """Desired percentage of each suite type.

    The percentages are expected to sum to 100 but that is not enforced;
    use ``is_complete`` to check before running the engine.
    """

    studio: float = Field(default=25.0, ge=0, le=100)
    one_bed: float = Field(default=25.0, ge=0, le=100)
    two_bed: float = Field(default=25.0, ge=0, le=100)
    three_bed: float = Field(default=25.0, ge=0, le=100)

    @classmethod
    def from_percentages(cls, percentages: dict[SuiteType, float]) -> SuiteMixRequest:
        """Build a request from a suite-type mapping; missing types are 0%."""
        return cls(
            studio=percentages.get(SuiteType.STUDIO, 0.0),
            one_bed=percentages.get(SuiteType.ONE_BED, 0.0),
            two_bed=percentages.get(SuiteType.TWO_BED, 0.0),
            three_bed=percentages.get(SuiteType.THREE_BED, 0.0),
        )

    def percentages(self) -> dict[SuiteType, float]:
        return {
            SuiteType.STUDIO: self.studio,
            SuiteType.ONE_BED: self.one_bed,
            SuiteType.TWO_BED: self.two_bed,
            SuiteType.THREE_BED: self.three_bed,
        }

    @property
    def total(self) -> float:
        return self.studio + self.one_bed + self.two_bed + self.three_bed

    @property
    def is_complete(self) -> bool:
        """True when the mix adds up to 100% (after rounding)."""
        return round(self.total) == 100


class Project(BaseModel):
    """A saved configuration: envelope + suite mix."""

    name: str = Field(default="Untitled Project", description="Project name")
    parameters: ProjectParameters = Field(default_factory=ProjectParameters)
    mix: SuiteMixRequest = Field(default_factory=SuiteMixRequest)

    # ── File I/O ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, path: str | Path) -> Project:
        """Load a project from a JSON file."""
        path = Path(path)
        return cls.model_validate_json(path.read_text())

    def save(self, path: str | Path) -> Path:
        """Save the project to a JSON file. Creates parent dirs if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path
