# services/profile_service.py

from dataclasses import dataclass
from decimal import Decimal

from pydantic import BaseModel

from rules.plan_config import DEFAULT_AGE
from schemas.profile import FinancialProfile
from utils.formatting import ZERO, as_amount, round_half_up


@dataclass(frozen=True)
class ProfileMetrics:
    """
    Figures derived once from a profile and shared by every rule and schedule.
    Absent numbers are already resolved to zero here.
    """

    age: int
    gross_salary: Decimal
    net_monthly: Decimal
    emergency_fund: Decimal
    emergency_months: Decimal
    other_debt_total: Decimal
    highest_debt_rate: Decimal
    pension_pot: Decimal
    monthly_pension_contribution: Decimal
    target_pension_percent: int
    current_pension_percent: int


def derive_metrics(profile: FinancialProfile) -> ProfileMetrics:
    age = profile.personal.age or DEFAULT_AGE
    gross_salary = as_amount(profile.income.gross_salary)
    net_monthly = as_amount(profile.income.net_monthly)
    emergency_fund = as_amount(profile.savings.emergency_fund)
    monthly_pension = as_amount(profile.pension.monthly_pension_contribution)

    # No income means no measurable buffer: treat as 0 months rather than dividing by zero
    emergency_months = emergency_fund / net_monthly if net_monthly > ZERO else ZERO

    current_pension_percent = 0
    if gross_salary > ZERO:
        current_pension_percent = round_half_up(monthly_pension * 12 / gross_salary * 100)

    return ProfileMetrics(
        age=age,
        gross_salary=gross_salary,
        net_monthly=net_monthly,
        emergency_fund=emergency_fund,
        emergency_months=emergency_months,
        other_debt_total=as_amount(profile.debt.other_debt_total),
        highest_debt_rate=as_amount(profile.debt.highest_debt_rate),
        pension_pot=as_amount(profile.pension.pension_pot),
        monthly_pension_contribution=monthly_pension,
        target_pension_percent=round_half_up(Decimal(age) / 2),
        current_pension_percent=current_pension_percent,
    )


def _is_filled(value) -> bool:
    if value is None or value == "":
        return False
    if isinstance(value, (list, tuple)) and len(value) == 0:
        return False
    return True


def completion_percentage(profile: FinancialProfile) -> int:
    """
    Share of questionnaire fields answered, 0-100.

    Every field of every section counts; a field is answered unless it is
    None, an empty string or an empty list. Booleans and sliders always count
    as answered. The free-text final thoughts only count once written.
    """
    total_fields = 0
    filled_fields = 0

    for section_name in FinancialProfile.model_fields:
        section = getattr(profile, section_name)
        if isinstance(section, BaseModel):
            for field_name in type(section).model_fields:
                total_fields += 1
                if _is_filled(getattr(section, field_name)):
                    filled_fields += 1
        elif section:
            total_fields += 1
            filled_fields += 1

    if total_fields == 0:
        return 0
    return round_half_up(Decimal(filled_fields) / Decimal(total_fields) * 100)
