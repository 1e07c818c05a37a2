"""Read-only queries over a generated layout."""

from stack_configurator.queries.summary import (
    LayoutSummary,
    SummaryRow,
    summarize_layout,
)

__all__ = [
    "LayoutSummary",
    "SummaryRow",
    "summarize_layout",
]
