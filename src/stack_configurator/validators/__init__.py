"""Layout validators."""

from stack_configurator.validators.layout import (
    ValidationError,
    validate_floor,
    validate_layout,
)

__all__ = ["ValidationError", "validate_floor", "validate_layout"]
