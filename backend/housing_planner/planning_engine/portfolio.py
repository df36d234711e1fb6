"""
Portfolio roll-up across projects.

Totals units, people housed and project cost over every scenario that has
computed results.  Scenarios without results (``None``) are skipped but
their project still counts towards the per-project average.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional

from housing_planner.models.schemas import PortfolioSummary, ScenarioResults
from housing_planner.planning_engine.numeric import round_half_up

logger = logging.getLogger(__name__)


def summarize_portfolio(
    results_by_project: Mapping[str, Iterable[Optional[ScenarioResults]]],
) -> PortfolioSummary:
    """Aggregate scenario results keyed by project id.

    avg_units_per_project divides by every project in the mapping, with or
    without computed scenarios, and rounds half-up; it is 0 for an empty
    portfolio.
    """
    computed = [
        r
        for results in results_by_project.values()
        for r in results
        if r is not None
    ]
    project_count = len(results_by_project)

    total_units = sum(r.total_units for r in computed)
    summary = PortfolioSummary(
        project_count=project_count,
        scenario_count=len(computed),
        total_units=total_units,
        total_people_housed=sum(r.estimated_population for r in computed),
        total_budget=sum(r.total_project_cost for r in computed),
        avg_units_per_project=round_half_up(total_units / project_count) if project_count else 0,
    )
    logger.debug(
        "Portfolio: %d projects, %d computed scenarios, %d units",
        project_count, summary.scenario_count, total_units,
    )
    return summary
