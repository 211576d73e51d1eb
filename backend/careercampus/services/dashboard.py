"""Dashboard presentation state over a RecommendationResponse.

Selection is a pure function of the career list and the requested id,
so it never fails on an unknown or stale id.
"""

import re
from dataclasses import dataclass
from enum import Enum

from careercampus.core.errors import InvalidStateError
from careercampus.schemas.career import CareerOption, RecommendationResponse

_NON_DIGITS = re.compile(r"[^0-9]")

_SALARY_INDEX_DIVISOR = 1000
"""Scales raw salary digits into a chart-friendly income index."""


class DashboardTab(Enum):
    """Top-level dashboard tabs."""

    CAREERS = "CAREERS"
    RESUME = "RESUME"


class ResumeToolMode(Enum):
    """Resume tools sub-mode."""

    BUILDER = "BUILDER"
    ATS = "ATS"


@dataclass(frozen=True)
class ComparisonRow:
    """One bar group in the "Match vs Potential" chart."""

    name: str
    full_title: str
    match: int
    salary_potential: float


def select_default(
    careers: tuple[CareerOption, ...] | list[CareerOption],
    career_id: str | None,
) -> CareerOption:
    """Return the career with ``career_id``, falling back to the first.

    Args:
        careers: Non-empty career list in model order.
        career_id: Requested id, or None for the default.

    Returns:
        The matching career, else the first one.

    Raises:
        InvalidStateError: If ``careers`` is empty.
    """
    if not careers:
        raise InvalidStateError("No career options to select from.")
    if career_id is not None:
        for career in careers:
            if career.id == career_id:
                return career
    return careers[0]


def format_match_score(career: CareerOption) -> str:
    """Render the match score badge text (e.g., "80%")."""
    return f"{career.match_score}%"


def salary_potential(career: CareerOption) -> float:
    """Income index from the digits of the salary maximum.

    "₹12,00,000" → 1200.0. A maximum without digits scores 0.
    """
    digits = _NON_DIGITS.sub("", career.salary_range.max)
    if not digits:
        return 0.0
    return int(digits) / _SALARY_INDEX_DIVISOR


def build_comparison_data(
    careers: tuple[CareerOption, ...] | list[CareerOption],
) -> list[ComparisonRow]:
    """Build chart rows comparing match score and salary potential."""
    return [
        ComparisonRow(
            name=f"{career.title.split(' ')[0]}...",
            full_title=career.title,
            match=career.match_score,
            salary_potential=salary_potential(career),
        )
        for career in careers
    ]


class DashboardState:
    """Selection and tab state for one recommendation result.

    Attributes:
        recommendations: The result being displayed.
        selected_career_id: Id of the highlighted career.
        active_tab: Visible tab.
        resume_tool_mode: Sub-mode of the resume tab.
    """

    def __init__(self, recommendations: RecommendationResponse) -> None:
        self.recommendations = recommendations
        self.selected_career_id = select_default(recommendations.careers, None).id
        self.active_tab = DashboardTab.CAREERS
        self.resume_tool_mode = ResumeToolMode.BUILDER

    @property
    def selected_career(self) -> CareerOption:
        """The highlighted career (first one if the id is unknown)."""
        return select_default(self.recommendations.careers, self.selected_career_id)

    def select_career(self, career_id: str) -> CareerOption:
        """Highlight a career. Unknown ids fall back to the first career."""
        self.selected_career_id = career_id
        return self.selected_career

    def switch_tab(self, tab: DashboardTab) -> None:
        """Show another top-level tab."""
        self.active_tab = tab

    def switch_tool(self, mode: ResumeToolMode) -> None:
        """Show another resume tool."""
        self.resume_tool_mode = mode

    def comparison_data(self) -> list[ComparisonRow]:
        """Chart rows for the current result."""
        return build_comparison_data(self.recommendations.careers)
