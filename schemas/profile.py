# schemas/profile.py

from decimal import Decimal
from typing import Annotated, Dict, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from .enums import (
    BonusUsage,
    DebtAbove5Percent,
    DebtVsInvest,
    EmergencyFundPreference,
    EmergencyFundStatus,
    EmployerMatch,
    EmploymentType,
    GuaranteedVsRisk,
    IncomeConfidence,
    JobSecurity,
    Location,
    MarketDropReaction,
    PensionStatus,
    PropertyStatus,
    Relationship,
    RetirementPreference,
)


# Upper bounds keep every derived figure within the default 28-digit Decimal context
MAX_AMOUNT = Decimal("1000000000")
AMOUNT_DECIMAL_PLACES = 3
MAX_AGE = 120


def _amount_to_json(value: Decimal) -> Union[int, float]:
    # Whole amounts stay integers so exported JSON reads like the questionnaire input.
    # At most 13 significant digits, so the float form round-trips exactly.
    if value == value.to_integral_value():
        return int(value)
    return float(value)

# Non-negative money (or percentage) value as typed by the user; None means "not provided".
Amount = Annotated[
    Decimal,
    Field(ge=Decimal("0"), le=MAX_AMOUNT, decimal_places=AMOUNT_DECIMAL_PLACES),
    PlainSerializer(_amount_to_json, when_used="json-unless-none"),
]


class CamelModel(BaseModel):
    """Immutable base model exchanging camelCase JSON with the questionnaire client."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class PersonalInfo(CamelModel):
    age: Optional[int] = Field(None, ge=0, le=MAX_AGE, description="Age in years. Unknown when not provided.")
    location: Optional[Location] = None
    relationship: Optional[Relationship] = None
    dependents: Optional[int] = Field(None, ge=0)
    personal_context: str = ""


class EmploymentInfo(CamelModel):
    employment_type: Optional[EmploymentType] = None
    job_security: Optional[JobSecurity] = None
    industry: str = ""
    employment_context: str = ""


class IncomeInfo(CamelModel):
    gross_salary: Optional[Amount] = Field(None, description="Gross annual salary.")
    net_monthly: Optional[Amount] = Field(None, description="Take-home pay per month.")
    partner_income: Optional[Amount] = Field(None, description="Partner/household income per year.")
    additional_income_context: str = ""
    expected_salary_3_years: Optional[Amount] = None
    income_confidence: Optional[IncomeConfidence] = None
    income_trajectory_context: str = ""


class SavingsInfo(CamelModel):
    emergency_fund: Optional[Amount] = None
    other_savings: Optional[Amount] = None
    monthly_savings_capacity: Optional[Amount] = None
    savings_context: str = ""


class DebtInfo(CamelModel):
    has_mortgage: bool = False
    # Mortgage figures are only meaningful when has_mortgage is set
    mortgage_balance: Optional[Amount] = None
    mortgage_rate: Optional[Amount] = None
    other_debt_total: Optional[Amount] = None
    highest_debt_rate: Optional[Amount] = Field(None, description="Highest non-mortgage interest rate, in percent.")
    debt_context: str = ""


class PensionInfo(CamelModel):
    pension_pot: Optional[Amount] = None
    monthly_pension_contribution: Optional[Amount] = None
    employer_match: Optional[EmployerMatch] = None
    other_investments: Optional[Amount] = None
    pension_context: str = ""


class GoalsInfo(CamelModel):
    selected_goals: Tuple[str, ...] = ()
    goal_timelines: Dict[str, str] = Field(default_factory=dict)
    goals_context: str = ""
    lifestyle_values: Tuple[str, ...] = ()
    lifestyle_context: str = ""


class RiskAnswers(CamelModel):
    """Answers to the risk questionnaire. Unanswered questions are None."""

    market_drop_reaction: Optional[MarketDropReaction] = None
    guaranteed_vs_risk: Optional[GuaranteedVsRisk] = None
    debt_vs_invest: Optional[DebtVsInvest] = None
    emergency_fund_preference: Optional[EmergencyFundPreference] = None
    present_future_slider: int = Field(50, ge=0, le=100, description="0 = enjoy now, 100 = sacrifice for the future.")
    active_passive_slider: int = Field(50, ge=0, le=100, description="0 = set and forget, 100 = actively manage.")
    retirement_preference: Optional[RetirementPreference] = None
    bonus_usage: Optional[BonusUsage] = None
    risk_context: str = ""


class FlowchartChecklist(CamelModel):
    """State of the Irish personal finance flowchart checklist."""

    budget_tracked: bool = False
    essential_bills_paid: bool = False
    min_debt_payments: bool = False
    switched_energy: bool = False
    switched_insurance: bool = False
    switched_broadband: bool = False
    emergency_fund_status: Optional[EmergencyFundStatus] = None
    pension_status: Optional[PensionStatus] = None
    debt_above_5_percent: Optional[DebtAbove5Percent] = None
    property_status: Optional[PropertyStatus] = None
    checklist_context: str = ""


class FinancialProfile(CamelModel):
    """
    The complete, fully typed questionnaire result. Every section defaults to
    its empty state, so a partially completed questionnaire is still a valid
    profile for plan generation.
    """

    personal: PersonalInfo = Field(default_factory=PersonalInfo)
    employment: EmploymentInfo = Field(default_factory=EmploymentInfo)
    income: IncomeInfo = Field(default_factory=IncomeInfo)
    savings: SavingsInfo = Field(default_factory=SavingsInfo)
    debt: DebtInfo = Field(default_factory=DebtInfo)
    pension: PensionInfo = Field(default_factory=PensionInfo)
    goals: GoalsInfo = Field(default_factory=GoalsInfo)
    risk: RiskAnswers = Field(default_factory=RiskAnswers)
    flowchart: FlowchartChecklist = Field(default_factory=FlowchartChecklist)
    final_thoughts: str = ""
