# schemas/plan.py

from typing import Optional, Tuple

from pydantic import Field, field_validator

from rules.plan_config import (
    DISCLAIMERS,
    MAX_PRIORITY_ACTIONS,
    MAX_SUMMARY_ITEMS,
    MONTHLY_MILESTONE_COUNT,
    URGENCY_RANK,
    YEARLY_GOAL_COUNT,
)

from .enums import ActionCategory, Urgency
from .profile import CamelModel, FinancialProfile


class PriorityAction(CamelModel):
    """A single recommended next step, ranked by urgency."""

    id: str = Field(..., description="Identifier, unique within a plan (e.g. 'emergency_starter').")
    title: str
    description: str = Field(..., description="Why this matters.")
    action: str = Field(..., description="The specific, imperative next step.")
    urgency: Urgency
    category: ActionCategory
    potential_impact: str = Field(..., description="Human-readable impact, e.g. 'Save €300-500/year'.")


class MilestoneTask(CamelModel):
    id: str
    task: str
    completed: bool = False


class MonthlyMilestone(CamelModel):
    month: str = Field(..., description="Calendar label, e.g. 'October 2026'.")
    tasks: Tuple[MilestoneTask, ...] = ()


class GoalItem(CamelModel):
    id: str
    goal: str
    target: str = Field(..., description="Formatted target, e.g. '€22,800' or '15% of salary'.")
    completed: bool = False


class YearlyGoal(CamelModel):
    year: int
    goals: Tuple[GoalItem, ...] = ()


class PlanSummary(CamelModel):
    risk_profile: str = Field(..., description="Named investor type from the risk questionnaire.")
    key_strengths: Tuple[str, ...] = Field((), max_length=MAX_SUMMARY_ITEMS)
    key_areas: Tuple[str, ...] = Field((), max_length=MAX_SUMMARY_ITEMS)


class GeneratedPlan(CamelModel):
    """
    The personalised plan. Created once per generation and then stored,
    displayed or exported verbatim until regenerated.

    Whichever engine produced it, a plan has at most five actions ordered
    by urgency, six monthly milestones, three yearly goals and the four
    standard disclaimers.
    """

    summary: PlanSummary
    priority_actions: Tuple[PriorityAction, ...] = Field((), max_length=MAX_PRIORITY_ACTIONS)
    monthly_milestones: Tuple[MonthlyMilestone, ...] = Field(
        ..., min_length=MONTHLY_MILESTONE_COUNT, max_length=MONTHLY_MILESTONE_COUNT
    )
    yearly_goals: Tuple[YearlyGoal, ...] = Field(..., min_length=YEARLY_GOAL_COUNT, max_length=YEARLY_GOAL_COUNT)
    disclaimers: Tuple[str, ...] = Field(..., min_length=len(DISCLAIMERS), max_length=len(DISCLAIMERS))
    generated_at: str = Field(..., description="ISO-8601 timestamp of generation.")

    @field_validator("priority_actions")
    @classmethod
    def actions_ordered_by_urgency(cls, actions: Tuple[PriorityAction, ...]) -> Tuple[PriorityAction, ...]:
        ranks = [URGENCY_RANK[action.urgency] for action in actions]
        if ranks != sorted(ranks):
            raise ValueError("priority actions must be ordered most urgent first")
        return actions


class ExportEnvelope(CamelModel):
    """Downloadable bundle of everything stored for the user."""

    form_data: Optional[FinancialProfile] = None
    plan: Optional[GeneratedPlan] = None
    exported_at: str
