# services/recommendation_service.py

from dataclasses import dataclass
from typing import Callable, List, Tuple

from rules.plan_config import (
    CRITICAL_DEBT_RATE,
    FULL_EMERGENCY_MONTHS,
    HIGH_INTEREST_DEBT_RATE,
    HIGHER_TAX_BAND_THRESHOLD,
    HIGHER_TAX_RELIEF,
    MAX_PRIORITY_ACTIONS,
    STANDARD_TAX_RELIEF,
    STARTER_EMERGENCY_FLOOR,
    STARTER_EMERGENCY_MONTHS,
    URGENCY_RANK,
)
from schemas.enums import ActionCategory, EmployerMatch, PensionStatus, PropertyStatus, Urgency
from schemas.plan import PriorityAction
from schemas.profile import FinancialProfile
from services.profile_service import ProfileMetrics, derive_metrics
from utils.formatting import ZERO, format_currency, format_number, format_one_decimal
from utils.logger import get_logger

logger = get_logger(__name__)

Predicate = Callable[[FinancialProfile, ProfileMetrics], bool]
ActionBuilder = Callable[[FinancialProfile, ProfileMetrics], PriorityAction]


@dataclass(frozen=True)
class PlanRule:
    """One independent recommendation: when `applies` holds, `build` emits its action."""

    rule_id: str
    applies: Predicate
    build: ActionBuilder


# ----------------------------------------------------------------------
# Action builders
# ----------------------------------------------------------------------

def _budget_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="budget",
        title="Start Tracking Your Expenses",
        description="You can't optimise what you don't measure. This is the foundation of all financial planning.",
        action="Download a budgeting app or create a spreadsheet. Review your last 3 months of bank statements.",
        urgency=Urgency.HIGH,
        category=ActionCategory.SAVINGS,
        potential_impact='Find €200-500/month in "leaks"',
    )


def _switch_energy_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="switch_energy",
        title="Switch Energy Provider",
        description="New customer deals are almost always better than loyalty rates.",
        action="Use Bonkers.ie to compare energy providers. Takes 10 minutes.",
        urgency=Urgency.MEDIUM,
        category=ActionCategory.SWITCHING,
        potential_impact="Save €300-500/year",
    )


def _switch_insurance_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="switch_insurance",
        title="Shop Around for Insurance",
        description="Car, home, and health insurance should be compared annually.",
        action="Get quotes from at least 3 providers before your next renewal.",
        urgency=Urgency.MEDIUM,
        category=ActionCategory.SWITCHING,
        potential_impact="Save €200-400/year",
    )


def _emergency_starter_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    target = max(STARTER_EMERGENCY_FLOOR, m.net_monthly)
    return PriorityAction(
        id="emergency_starter",
        title="Build Starter Emergency Fund",
        description="You need at least €1,000 or 1 month's expenses before anything else.",
        action=f"Target: {format_currency(target)}. Set up automatic transfer on payday.",
        urgency=Urgency.CRITICAL,
        category=ActionCategory.EMERGENCY_FUND,
        potential_impact="Avoid going into debt for emergencies",
    )


def _emergency_build_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="emergency_build",
        title="Build Full Emergency Fund",
        description=f"You have {format_one_decimal(m.emergency_months)} months saved. Target is 3-6 months.",
        action=(
            f"Target: {format_currency(m.net_monthly * FULL_EMERGENCY_MONTHS)} minimum. "
            "Keep in easy-access savings account."
        ),
        urgency=Urgency.HIGH,
        category=ActionCategory.EMERGENCY_FUND,
        potential_impact="Complete financial security",
    )


def _pension_match_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="pension_match",
        title="Get Your Full Pension Match!",
        description="You're leaving FREE MONEY on the table. This is an instant 100% return.",
        action="Contact HR immediately to increase your contribution to get the full employer match.",
        urgency=Urgency.CRITICAL,
        category=ActionCategory.PENSION,
        potential_impact="Instant 100% return on contributions",
    )


def _pension_enroll_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="pension_enroll",
        title="Enroll in Your Employer Pension",
        description=(
            "You have access to a pension scheme but aren't enrolled. "
            "You're missing tax relief and likely employer matching."
        ),
        action="Contact HR to enroll. Ask about employer matching.",
        urgency=Urgency.CRITICAL,
        category=ActionCategory.PENSION,
        potential_impact="Tax relief + potential matching",
    )


def _high_debt_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    rate = format_number(m.highest_debt_rate)
    return PriorityAction(
        id="high_debt",
        title="Attack High-Interest Debt",
        description=f"You have debt at {rate}% interest. This should be a priority.",
        action=(
            "List all debts by interest rate. Pay minimums on all, "
            "then attack highest rate first (Avalanche method)."
        ),
        urgency=Urgency.CRITICAL if m.highest_debt_rate > CRITICAL_DEBT_RATE else Urgency.HIGH,
        category=ActionCategory.DEBT,
        potential_impact=f'Save {rate}% guaranteed "return"',
    )


def _pension_increase_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    relief = HIGHER_TAX_RELIEF if m.gross_salary > HIGHER_TAX_BAND_THRESHOLD else STANDARD_TAX_RELIEF
    return PriorityAction(
        id="pension_increase",
        title="Increase Pension Contributions",
        description=(
            f"At age {m.age}, aim for {m.target_pension_percent}% of salary. "
            f"You're at {m.current_pension_percent}%."
        ),
        action=(
            f"Increase by 1-2% per year until you reach {m.target_pension_percent}%. "
            "Tax relief makes this efficient."
        ),
        urgency=Urgency.MEDIUM,
        category=ActionCategory.PENSION,
        potential_impact=f"{relief} tax relief on contributions",
    )


def _property_saving_action(profile: FinancialProfile, m: ProfileMetrics) -> PriorityAction:
    return PriorityAction(
        id="property_saving",
        title="House Deposit Strategy",
        description="Balance between deposit savings and pension contributions.",
        action="Check Help to Buy scheme (up to €30k for first-time buyers). Ensure you still get pension match.",
        urgency=Urgency.LOW,
        category=ActionCategory.SAVINGS,
        potential_impact="Up to €30k from Help to Buy",
    )


# ----------------------------------------------------------------------
# Rule table (evaluation order breaks urgency ties)
# ----------------------------------------------------------------------

PLAN_RULES: Tuple[PlanRule, ...] = (
    PlanRule(
        "budget",
        lambda p, m: not p.flowchart.budget_tracked,
        _budget_action,
    ),
    PlanRule(
        "switch_energy",
        lambda p, m: not p.flowchart.switched_energy,
        _switch_energy_action,
    ),
    PlanRule(
        "switch_insurance",
        lambda p, m: not p.flowchart.switched_insurance,
        _switch_insurance_action,
    ),
    PlanRule(
        "emergency_starter",
        lambda p, m: m.emergency_months < STARTER_EMERGENCY_MONTHS,
        _emergency_starter_action,
    ),
    PlanRule(
        "emergency_build",
        lambda p, m: STARTER_EMERGENCY_MONTHS <= m.emergency_months < FULL_EMERGENCY_MONTHS,
        _emergency_build_action,
    ),
    PlanRule(
        "pension_match",
        lambda p, m: (
            p.flowchart.pension_status == PensionStatus.PARTIAL
            or p.pension.employer_match == EmployerMatch.PARTIAL
        ),
        _pension_match_action,
    ),
    PlanRule(
        "pension_enroll",
        lambda p, m: p.flowchart.pension_status == PensionStatus.NOT_ENROLLED,
        _pension_enroll_action,
    ),
    PlanRule(
        "high_debt",
        lambda p, m: m.highest_debt_rate > HIGH_INTEREST_DEBT_RATE and m.other_debt_total > ZERO,
        _high_debt_action,
    ),
    PlanRule(
        # Only a partial scheme status suppresses this; not_enrolled users can get both pension rules
        "pension_increase",
        lambda p, m: (
            m.current_pension_percent < m.target_pension_percent
            and p.flowchart.pension_status != PensionStatus.PARTIAL
        ),
        _pension_increase_action,
    ),
    PlanRule(
        "property_saving",
        lambda p, m: p.flowchart.property_status == PropertyStatus.SAVING_DEPOSIT,
        _property_saving_action,
    ),
)


def rank_actions(actions: List[PriorityAction]) -> List[PriorityAction]:
    """Stable sort by urgency, then keep the top actions."""
    ranked = sorted(actions, key=lambda action: URGENCY_RANK[action.urgency])
    return ranked[:MAX_PRIORITY_ACTIONS]


def score_recommendations(profile: FinancialProfile) -> List[PriorityAction]:
    """
    Evaluates every plan rule against the profile and returns the most
    urgent actions (at most five), critical first.
    """
    metrics = derive_metrics(profile)
    fired = [rule.build(profile, metrics) for rule in PLAN_RULES if rule.applies(profile, metrics)]
    logger.debug("Plan rules fired: %s", [action.id for action in fired])
    return rank_actions(fired)
