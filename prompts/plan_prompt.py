# prompts/plan_prompt.py

import json
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

from rules.plan_config import (
    HIGHER_TAX_BAND_THRESHOLD,
    HIGHER_TAX_RELIEF,
    MAX_PRIORITY_ACTIONS,
    MONTHLY_MILESTONE_COUNT,
    PENSION_RELIEF_LIMIT_60_PLUS,
    PENSION_RELIEF_LIMITS,
    STANDARD_TAX_RELIEF,
    YEARLY_GOAL_COUNT,
)
from schemas.profile import FinancialProfile
from services.profile_service import derive_metrics
from utils.formatting import as_amount, format_grouped, format_number, format_one_decimal, round_half_up


def pension_relief_limit(age: int) -> int:
    """Maximum tax-relieved pension contribution for an age, as % of earnings."""
    for age_below, limit in PENSION_RELIEF_LIMITS:
        if age < age_below:
            return limit
    return PENSION_RELIEF_LIMIT_60_PLUS


def _or(value: Any, default: str) -> str:
    if value is None or value == "":
        return default
    if hasattr(value, "value"):
        return str(value.value)
    return str(value)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _euro(value: Optional[Decimal]) -> str:
    return "EUR" + format_grouped(as_amount(value))


def _joined(values: Iterable[str], default: str) -> str:
    values = list(values)
    return ", ".join(values) if values else default


def response_shape(sample_year: int) -> Dict[str, Any]:
    """The JSON object the model is asked to return (same shape as GeneratedPlan)."""
    return {
        "summary": {
            "riskProfile": "string describing their investor type",
            "keyStrengths": ["array of 2-3 things they're doing well"],
            "keyAreas": ["array of 2-3 areas for improvement"],
        },
        "priorityActions": [{
            "id": "unique_id",
            "title": "Action title",
            "description": "Why this matters",
            "action": "Specific next step",
            "urgency": "critical|high|medium|low",
            "category": "emergency_fund|debt|pension|savings|switching|investment",
            "potentialImpact": "e.g., Save EUR500/year",
        }],
        "monthlyMilestones": [{
            "month": "Month Year",
            "tasks": [{"id": "unique_id", "task": "Specific task", "completed": False}],
        }],
        "yearlyGoals": [{
            "year": sample_year,
            "goals": [{"id": "unique_id", "goal": "Goal description", "target": "EURX or X%", "completed": False}],
        }],
        "disclaimers": ["Standard disclaimer 1", "Standard disclaimer 2"],
    }


def build_plan_prompt(profile: FinancialProfile, reference_date: Optional[datetime] = None) -> str:
    """
    Renders the profile as labelled, human-readable sections followed by the
    JSON response format. Deterministic for a given profile and reference date.
    """
    reference_date = reference_date or datetime.now(timezone.utc)
    m = derive_metrics(profile)
    personal, employment, income = profile.personal, profile.employment, profile.income
    savings, debt, pension = profile.savings, profile.debt, profile.pension
    goals, risk, flowchart = profile.goals, profile.risk, profile.flowchart

    tax_band = HIGHER_TAX_RELIEF if m.gross_salary > HIGHER_TAX_BAND_THRESHOLD else STANDARD_TAX_RELIEF
    relief_limit = pension_relief_limit(m.age)
    relief_cap = round_half_up(m.gross_salary * relief_limit / 100)
    emergency_months = format_one_decimal(m.emergency_months) if m.net_monthly > 0 else "0"

    mortgage_info = ""
    if debt.has_mortgage:
        mortgage_info = (
            f"- Mortgage balance: {_euro(debt.mortgage_balance)}\n"
            f"- Mortgage rate: {format_number(as_amount(debt.mortgage_rate))}%"
        )

    parts = [
        "GENERATE A PERSONALISED IRISH FINANCIAL PLAN FOR THIS USER:",
        "",
        "SECTION 1: PERSONAL PROFILE",
        "Age: " + _or(personal.age or None, "Not specified"),
        "Location: " + _or(personal.location, "Not specified"),
        "Relationship: " + _or(personal.relationship, "Not specified"),
        "Dependents: " + str(personal.dependents or 0),
        "Additional context: " + _or(personal.personal_context, "None provided"),
        "",
        "SECTION 2: EMPLOYMENT",
        "Type: " + _or(employment.employment_type, "Not specified"),
        "Job security: " + _or(employment.job_security, "Not specified"),
        "Industry: " + _or(employment.industry, "Not specified"),
        "Additional context: " + _or(employment.employment_context, "None provided"),
        "",
        "SECTION 3: INCOME",
        "Gross annual salary: " + _euro(m.gross_salary),
        "Net monthly income: " + _euro(m.net_monthly),
        "Tax band: " + tax_band,
        "Partner/household income: " + _euro(income.partner_income) + "/year",
        "Expected salary in 3 years: " + _euro(income.expected_salary_3_years),
        "Confidence in trajectory: " + _or(income.income_confidence, "Not specified"),
        "Additional income context: " + _or(income.additional_income_context, "None"),
        "Career context: " + _or(income.income_trajectory_context, "None"),
        "",
        "SECTION 4: CURRENT FINANCIAL STATE",
        "SAVINGS:",
        f"- Emergency fund: {_euro(m.emergency_fund)} (approx {emergency_months} months expenses)",
        "- Other savings: " + _euro(savings.other_savings),
        "- Monthly savings capacity: " + _euro(savings.monthly_savings_capacity),
        "- Context: " + _or(savings.savings_context, "None"),
        "",
        "DEBT:",
        "- Has mortgage: " + _yes_no(debt.has_mortgage),
        mortgage_info,
        "- Other debt total: " + _euro(m.other_debt_total),
        f"- Highest debt interest rate: {format_number(m.highest_debt_rate)}%",
        "- Context: " + _or(debt.debt_context, "None"),
        "",
        "PENSION & INVESTMENTS:",
        "- Current pension pot: " + _euro(m.pension_pot),
        f"- Monthly pension contribution: {_euro(m.monthly_pension_contribution)} ({m.current_pension_percent}% of salary)",
        f"- Target for age {m.age}: {m.target_pension_percent}% of salary",
        f"- Max tax-relieved contribution: {relief_limit}% of earnings (EUR{format_grouped(relief_cap)}/year)",
        "- Employer matching: " + _or(pension.employer_match, "Not specified"),
        "- Other investments: " + _euro(pension.other_investments),
        "- Context: " + _or(pension.pension_context, "None"),
        "",
        "SECTION 5: GOALS",
        "Selected goals: " + _joined(goals.selected_goals, "None selected"),
        "Goal details: " + _or(goals.goals_context, "None provided"),
        "Lifestyle values: " + _joined(goals.lifestyle_values, "None selected"),
        "Values context: " + _or(goals.lifestyle_context, "None provided"),
        "",
        "SECTION 6: RISK PROFILE",
        "Market drop reaction: " + _or(risk.market_drop_reaction, "Not answered"),
        "Guaranteed vs risk preference: " + _or(risk.guaranteed_vs_risk, "Not answered"),
        "Debt vs invest preference: " + _or(risk.debt_vs_invest, "Not answered"),
        "Emergency fund preference: " + _or(risk.emergency_fund_preference, "Not answered"),
        f"Present vs future slider: {risk.present_future_slider}/100 (0=enjoy now, 100=sacrifice for future)",
        f"Active vs passive slider: {risk.active_passive_slider}/100 (0=set and forget, 100=actively manage)",
        "Retirement preference: " + _or(risk.retirement_preference, "Not answered"),
        "Bonus usage instinct: " + _or(risk.bonus_usage, "Not answered"),
        "Risk context: " + _or(risk.risk_context, "None provided"),
        "",
        "SECTION 7: FLOWCHART CHECKLIST STATUS",
        "Budget tracked: " + _yes_no(flowchart.budget_tracked),
        "Essential bills paid: " + _yes_no(flowchart.essential_bills_paid),
        "Min debt payments: " + _yes_no(flowchart.min_debt_payments),
        "Switched energy (last 12mo): " + _yes_no(flowchart.switched_energy),
        "Switched insurance: " + _yes_no(flowchart.switched_insurance),
        "Switched broadband: " + _yes_no(flowchart.switched_broadband),
        "Emergency fund status: " + _or(flowchart.emergency_fund_status, "Not specified"),
        "Pension status: " + _or(flowchart.pension_status, "Not specified"),
        "Debt above 5%: " + _or(flowchart.debt_above_5_percent, "Not specified"),
        "Property status: " + _or(flowchart.property_status, "Not specified"),
        "Additional context: " + _or(flowchart.checklist_context, "None"),
        "",
        "SECTION 8: FINAL THOUGHTS FROM USER",
        profile.final_thoughts or "None provided",
        "",
        "Based on all the above information, generate a comprehensive personalised financial plan.",
        (
            f"Include at most {MAX_PRIORITY_ACTIONS} priority actions ordered most urgent first, "
            f"exactly {MONTHLY_MILESTONE_COUNT} monthly milestones starting this month "
            f"and exactly {YEARLY_GOAL_COUNT} yearly goals starting this year."
        ),
        "Respond ONLY with valid JSON matching this structure:",
        json.dumps(response_shape(reference_date.year), indent=2, ensure_ascii=False),
    ]

    return "\n".join(parts)
