# services/plan_service.py

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from rules.plan_config import (
    DISCLAIMERS,
    FALLBACK_AREA,
    FALLBACK_STRENGTH,
    FULL_EMERGENCY_MONTHS,
    HIGH_INTEREST_DEBT_RATE,
    MAX_SUMMARY_ITEMS,
)
from schemas.enums import EmployerMatch
from schemas.plan import GeneratedPlan, PlanSummary
from schemas.profile import FinancialProfile
from services.profile_service import ProfileMetrics, derive_metrics
from services.recommendation_service import score_recommendations
from services.risk_service import classify_risk
from services.schedule_service import generate_monthly_milestones, generate_yearly_goals
from utils.logger import get_logger

logger = get_logger(__name__)


def _capped(items: List[str], fallback: str) -> Tuple[str, ...]:
    if not items:
        return (fallback,)
    return tuple(items[:MAX_SUMMARY_ITEMS])


def key_strengths(profile: FinancialProfile, m: ProfileMetrics) -> Tuple[str, ...]:
    strengths = []
    if profile.flowchart.budget_tracked:
        strengths.append("Tracking expenses and budgeting")
    if profile.flowchart.essential_bills_paid:
        strengths.append("Essential bills are covered")
    if m.emergency_fund >= m.net_monthly * FULL_EMERGENCY_MONTHS:
        strengths.append("Solid emergency fund in place")
    if profile.pension.employer_match == EmployerMatch.FULL:
        strengths.append("Maximising employer pension match")
    return _capped(strengths, FALLBACK_STRENGTH)


def key_areas(profile: FinancialProfile, m: ProfileMetrics) -> Tuple[str, ...]:
    areas = []
    if not profile.flowchart.budget_tracked:
        areas.append("Start tracking income and expenses")
    if m.emergency_fund < m.net_monthly * FULL_EMERGENCY_MONTHS:
        areas.append("Build up emergency fund to 3-6 months")
    if profile.pension.employer_match == EmployerMatch.PARTIAL:
        areas.append("Get full employer pension match")
    if m.highest_debt_rate > HIGH_INTEREST_DEBT_RATE:
        areas.append("Pay down high-interest debt")
    return _capped(areas, FALLBACK_AREA)


def _as_utc(reference_date: Optional[datetime]) -> datetime:
    if reference_date is None:
        return datetime.now(timezone.utc)
    if reference_date.tzinfo is None:
        return reference_date.replace(tzinfo=timezone.utc)
    return reference_date


def synthesize_plan(profile: FinancialProfile, reference_date: Optional[datetime] = None) -> GeneratedPlan:
    """
    Builds the complete rule-based plan for a profile.

    Pure apart from defaulting `reference_date` to now: the same profile and
    reference date always produce the same plan. Naive reference dates are
    taken as UTC.

    Args:
        profile: The completed (or partially completed) questionnaire.
        reference_date: The instant treated as "now" for schedules and `generatedAt`.

    Returns:
        An immutable GeneratedPlan.
    """
    reference_date = _as_utc(reference_date)
    metrics = derive_metrics(profile)
    risk = classify_risk(profile.risk)

    plan = GeneratedPlan(
        summary=PlanSummary(
            risk_profile=risk.label,
            key_strengths=key_strengths(profile, metrics),
            key_areas=key_areas(profile, metrics),
        ),
        priority_actions=tuple(score_recommendations(profile)),
        monthly_milestones=tuple(generate_monthly_milestones(profile, reference_date)),
        yearly_goals=tuple(generate_yearly_goals(profile, reference_date)),
        disclaimers=DISCLAIMERS,
        generated_at=reference_date.isoformat(),
    )
    logger.debug(
        "Rule-based plan built: risk=%s (score %d), %d priority actions",
        risk.label, risk.score, len(plan.priority_actions),
    )
    return plan
