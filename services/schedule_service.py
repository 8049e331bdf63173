# services/schedule_service.py

from datetime import datetime
from typing import List

from rules.plan_config import (
    DEFAULT_MONTHLY_TRANSFER,
    FULL_EMERGENCY_MONTHS,
    HIGH_INTEREST_DEBT_RATE,
    HOUSE_DEPOSIT_TARGET,
    MONTHLY_MILESTONE_COUNT,
    NET_WORTH_MILESTONE_UPLIFT,
    PENSION_MILESTONE_MONTHS,
    YEARLY_EMERGENCY_MONTHS,
    YEARLY_SAVINGS_RATE,
)
from schemas.enums import PensionStatus, PropertyStatus
from schemas.plan import GoalItem, MilestoneTask, MonthlyMilestone, YearlyGoal
from schemas.profile import FinancialProfile
from services.profile_service import ProfileMetrics, derive_metrics
from utils.formatting import format_currency, format_number

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _month_label(reference_date: datetime, offset: int) -> str:
    month_index = reference_date.month - 1 + offset
    year = reference_date.year + month_index // 12
    return f"{MONTH_NAMES[month_index % 12]} {year}"


def _tasks_for_month(index: int, profile: FinancialProfile, m: ProfileMetrics) -> List[MilestoneTask]:
    flowchart = profile.flowchart
    tasks: List[MilestoneTask] = []

    def add(topic: str, text: str) -> None:
        tasks.append(MilestoneTask(id=f"m{index}_{topic}", task=text))

    if index == 0:
        if not flowchart.budget_tracked:
            add("budget", "Set up expense tracking system")
        if not flowchart.switched_energy:
            add("energy", "Compare energy providers on Bonkers.ie")
        transfer = profile.savings.monthly_savings_capacity or DEFAULT_MONTHLY_TRANSFER
        add("savings", f"Set up automatic €{format_number(transfer)}/month transfer to savings")
    elif index == 1:
        if not flowchart.switched_insurance:
            add("insurance", "Get quotes for car/home insurance")
        if flowchart.pension_status == PensionStatus.PARTIAL:
            add("pension", "Contact HR to increase pension contribution")
        add("review", "Review first month of expense tracking")
    elif index == 2:
        add("review", "Review Q1 progress and adjust plan if needed")
        add("emergency", f"Emergency fund check: target {format_currency(m.net_monthly * FULL_EMERGENCY_MONTHS)}")
    elif index == 3:
        add("tax", "Review tax situation - any reliefs being missed?")
        if m.highest_debt_rate > HIGH_INTEREST_DEBT_RATE:
            add("debt", "Assess debt repayment progress")
    elif index == 4:
        add("pension_review", "Review pension performance and allocation")
        add("goals", "Check progress towards stated goals")
    elif index == 5:
        add("half_year", "Half-year financial review")
        add("adjust", "Adjust savings rate if income has changed")

    return tasks


def generate_monthly_milestones(profile: FinancialProfile, reference_date: datetime) -> List[MonthlyMilestone]:
    """Six consecutive calendar months of tasks, starting with the reference month."""
    metrics = derive_metrics(profile)
    return [
        MonthlyMilestone(
            month=_month_label(reference_date, index),
            tasks=_tasks_for_month(index, profile, metrics),
        )
        for index in range(MONTHLY_MILESTONE_COUNT)
    ]


def generate_yearly_goals(profile: FinancialProfile, reference_date: datetime) -> List[YearlyGoal]:
    """
    Goals for the reference year and the two following years.

    Year one secures the basics (emergency fund, pension rate, high-interest
    debt), year two builds savings and net worth, year three looks at the
    pension pot and property.
    """
    m = derive_metrics(profile)
    year = reference_date.year
    saving_deposit = profile.flowchart.property_status == PropertyStatus.SAVING_DEPOSIT

    first_year = YearlyGoal(
        year=year,
        goals=(
            GoalItem(
                id="y1_emergency",
                goal="Build full emergency fund",
                target=format_currency(m.net_monthly * YEARLY_EMERGENCY_MONTHS),
            ),
            GoalItem(
                id="y1_pension",
                goal="Optimise pension contributions",
                target=f"{m.target_pension_percent}% of salary",
            ),
            GoalItem(
                id="y1_debt",
                goal="Clear all debt above 5% interest",
                target="€0 high-interest debt",
            ),
        ),
    )

    second_year = YearlyGoal(
        year=year + 1,
        goals=(
            GoalItem(
                id="y2_savings",
                goal="Build additional savings beyond emergency fund",
                target=format_currency(m.net_monthly * 12 * YEARLY_SAVINGS_RATE),
            ),
            GoalItem(
                id="y2_invest",
                goal="Consider starting taxable investments",
                target="Open investment account",
            ),
            GoalItem(
                id="y2_networth",
                goal="Net worth milestone",
                target=format_currency(m.pension_pot + m.emergency_fund + NET_WORTH_MILESTONE_UPLIFT),
            ),
        ),
    )

    third_year = YearlyGoal(
        year=year + 2,
        goals=(
            GoalItem(
                id="y3_pension",
                goal="Pension pot milestone",
                target=format_currency(m.pension_pot + m.monthly_pension_contribution * PENSION_MILESTONE_MONTHS),
            ),
            GoalItem(
                id="y3_property",
                goal="Achieve house deposit target" if saving_deposit else "Review property/mortgage strategy",
                target=f"{format_currency(HOUSE_DEPOSIT_TARGET)} deposit" if saving_deposit else "Optimise mortgage",
            ),
        ),
    )

    return [first_year, second_year, third_year]
