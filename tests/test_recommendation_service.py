"""Tests for the flowchart rules that produce prioritised actions."""

from decimal import Decimal

from rules.plan_config import MAX_PRIORITY_ACTIONS, URGENCY_RANK
from schemas.enums import ActionCategory, Urgency
from schemas.profile import FinancialProfile
from services.recommendation_service import PLAN_RULES, rank_actions, score_recommendations

ALL_CHECKED = {
    "budgetTracked": True,
    "essentialBillsPaid": True,
    "minDebtPayments": True,
    "switchedEnergy": True,
    "switchedInsurance": True,
    "switchedBroadband": True,
}


def make_profile(**sections) -> FinancialProfile:
    return FinancialProfile.model_validate(sections)


def settled_profile(**overrides) -> FinancialProfile:
    """A profile where no rule fires unless the overrides trigger one."""
    sections = {
        "personal": {"age": 30},
        "income": {"grossSalary": 50000, "netMonthly": 3000},
        "savings": {"emergencyFund": 10000},
        "pension": {"monthlyPensionContribution": 700},
        "flowchart": dict(ALL_CHECKED),
    }
    for name, values in overrides.items():
        sections[name] = {**sections.get(name, {}), **values}
    return make_profile(**sections)


def ids(actions):
    return [action.id for action in actions]


def test_settled_profile_has_no_actions():
    assert score_recommendations(settled_profile()) == []


def test_not_enrolled_with_no_savings():
    profile = make_profile(
        income={"netMonthly": 3800},
        savings={"emergencyFund": 0},
        flowchart={"pensionStatus": "not_enrolled"},
    )

    actions = score_recommendations(profile)

    assert ids(actions) == ["emergency_starter", "pension_enroll", "budget", "switch_energy", "switch_insurance"]
    assert actions[0].action == "Target: €3,800. Set up automatic transfer on payday."
    assert actions[0].urgency == Urgency.CRITICAL
    assert actions[0].category == ActionCategory.EMERGENCY_FUND
    assert actions[1].urgency == Urgency.CRITICAL


def test_partial_pension_match_is_critical_and_suppresses_contribution_gap():
    profile = make_profile(
        personal={"age": 40},
        income={"grossSalary": 60000},
        pension={"monthlyPensionContribution": 300, "employerMatch": "Partial match"},
        flowchart={"pensionStatus": "partial"},
    )

    actions = score_recommendations(profile)

    assert "pension_match" in ids(actions)
    match = next(a for a in actions if a.id == "pension_match")
    assert match.urgency == Urgency.CRITICAL
    assert match.potential_impact == "Instant 100% return on contributions"
    assert "pension_increase" not in ids(actions)


def test_partial_employer_match_alone_keeps_contribution_gap():
    profile = settled_profile(
        personal={"age": 40},
        income={"grossSalary": 60000},
        pension={"monthlyPensionContribution": 300, "employerMatch": "Partial match"},
    )

    assert ids(score_recommendations(profile)) == ["pension_match", "pension_increase"]


def test_high_interest_debt_urgency_depends_on_rate():
    critical = score_recommendations(settled_profile(debt={"otherDebtTotal": 5000, "highestDebtRate": 12}))
    assert ids(critical) == ["high_debt"]
    assert critical[0].urgency == Urgency.CRITICAL
    assert critical[0].description == "You have debt at 12% interest. This should be a priority."
    assert critical[0].potential_impact == 'Save 12% guaranteed "return"'

    high = score_recommendations(settled_profile(debt={"otherDebtTotal": 5000, "highestDebtRate": 7}))
    assert high[0].urgency == Urgency.HIGH

    boundary = score_recommendations(settled_profile(debt={"otherDebtTotal": 5000, "highestDebtRate": 10}))
    assert boundary[0].urgency == Urgency.HIGH


def test_high_interest_debt_needs_a_balance():
    assert score_recommendations(settled_profile(debt={"otherDebtTotal": 0, "highestDebtRate": 20})) == []
    assert score_recommendations(settled_profile(debt={"otherDebtTotal": 2000, "highestDebtRate": 5})) == []


def test_fractional_debt_rate_is_printed_without_padding():
    actions = score_recommendations(settled_profile(debt={"otherDebtTotal": 800, "highestDebtRate": "13.50"}))
    assert actions[0].description == "You have debt at 13.5% interest. This should be a priority."


def test_emergency_fund_thresholds():
    def emergency_ids(fund):
        actions = score_recommendations(settled_profile(
            income={"netMonthly": 2000},
            savings={"emergencyFund": fund},
        ))
        return [a for a in ids(actions) if a.startswith("emergency")]

    assert emergency_ids(1000) == ["emergency_starter"]
    assert emergency_ids(1999) == ["emergency_starter"]
    assert emergency_ids(2000) == ["emergency_build"]
    assert emergency_ids(5999) == ["emergency_build"]
    assert emergency_ids(6000) == []


def test_emergency_build_texts():
    actions = score_recommendations(settled_profile(income={"netMonthly": 2000}, savings={"emergencyFund": 5000}))

    build = actions[0]
    assert build.id == "emergency_build"
    assert build.urgency == Urgency.HIGH
    assert build.description == "You have 2.5 months saved. Target is 3-6 months."
    assert build.action == "Target: €6,000 minimum. Keep in easy-access savings account."


def test_starter_target_never_below_floor():
    actions = score_recommendations(settled_profile(income={"netMonthly": 600}, savings={"emergencyFund": 100}))
    assert actions[0].action == "Target: €1,000. Set up automatic transfer on payday."


def test_no_income_means_no_measurable_buffer():
    profile = settled_profile(income={"netMonthly": 0}, savings={"emergencyFund": 5000})

    actions = score_recommendations(profile)

    assert ids(actions) == ["emergency_starter"]
    assert actions[0].action == "Target: €1,000. Set up automatic transfer on payday."


def test_not_enrolled_fires_both_pension_rules():
    profile = settled_profile(
        personal={"age": 40},
        income={"grossSalary": 50000},
        pension={"monthlyPensionContribution": 100},
        flowchart={"pensionStatus": "not_enrolled"},
    )

    actions = score_recommendations(profile)

    assert ids(actions) == ["pension_enroll", "pension_increase"]
    increase = actions[1]
    assert increase.description == "At age 40, aim for 20% of salary. You're at 2%."
    assert increase.action == "Increase by 1-2% per year until you reach 20%. Tax relief makes this efficient."
    assert increase.potential_impact == "40% tax relief on contributions"


def test_tax_relief_rate_switches_above_higher_band():
    def relief(gross):
        actions = score_recommendations(settled_profile(
            income={"grossSalary": gross},
            pension={"monthlyPensionContribution": 0},
        ))
        return actions[0].potential_impact

    assert relief(42000) == "20% tax relief on contributions"
    assert relief(42001) == "40% tax relief on contributions"


def test_missing_age_uses_default_target():
    profile = settled_profile(personal={"age": None}, pension={"monthlyPensionContribution": 0})
    actions = score_recommendations(profile)
    assert actions[0].description == "At age 30, aim for 15% of salary. You're at 0%."


def test_property_saving_is_low_priority():
    actions = score_recommendations(settled_profile(flowchart={"propertyStatus": "saving_deposit"}))

    assert ids(actions) == ["property_saving"]
    assert actions[0].urgency == Urgency.LOW
    assert actions[0].category == ActionCategory.SAVINGS


def test_at_most_five_actions_most_urgent_first():
    profile = make_profile(
        income={"netMonthly": 3000},
        savings={"emergencyFund": 0},
        debt={"otherDebtTotal": 1000, "highestDebtRate": 12},
        pension={"employerMatch": "Partial match"},
        flowchart={"pensionStatus": "partial", "propertyStatus": "saving_deposit"},
    )

    actions = score_recommendations(profile)

    assert len(actions) == MAX_PRIORITY_ACTIONS
    assert ids(actions) == ["emergency_starter", "pension_match", "high_debt", "budget", "switch_energy"]
    ranks = [URGENCY_RANK[a.urgency] for a in actions]
    assert ranks == sorted(ranks)


def test_rank_actions_is_stable_within_urgency():
    profile = make_profile()
    builders = {rule.rule_id: rule.build for rule in PLAN_RULES}
    # These builders read nothing from the derived metrics
    actions = [builders[rule_id](profile, None) for rule_id in ("property_saving", "switch_insurance", "switch_energy", "budget")]

    ranked = rank_actions(actions)

    assert ids(ranked) == ["budget", "switch_insurance", "switch_energy", "property_saving"]


def test_more_savings_never_raises_emergency_urgency():
    severity = {"emergency_starter": 2, "emergency_build": 1}
    previous = 2
    for fund in (0, 500, 1500, 3000, 4500, 6000, 9000):
        actions = score_recommendations(settled_profile(income={"netMonthly": 1500}, savings={"emergencyFund": fund}))
        current = max((severity.get(a.id, 0) for a in actions), default=0)
        assert current <= previous
        previous = current
    assert previous == 0


def test_amounts_accept_decimals():
    profile = settled_profile(income={"netMonthly": Decimal("2500.50")}, savings={"emergencyFund": Decimal("100")})
    assert score_recommendations(profile)[0].action == "Target: €2,500.5. Set up automatic transfer on payday."
