"""Errors raised by the planning engine."""

from __future__ import annotations


class ScenarioValidationError(ValueError):
    """A scenario lacks fields its project type requires.

    Raised before any computation; no partial results are produced.
    """

    def __init__(self, project_type: str | None, missing_fields: list[str]):
        self.project_type = project_type
        self.missing_fields = list(missing_fields)
        label = project_type or "unknown"
        super().__init__(
            f"{label} scenario is missing required field(s): "
            + ", ".join(self.missing_fields)
        )
