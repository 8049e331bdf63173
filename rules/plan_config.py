# rules/plan_config.py

from decimal import Decimal
from typing import Dict, Tuple

from schemas.enums import Urgency

# --- Plan Rule Configuration ---
# Thresholds and fixed texts used by the rule-based plan engine. All money
# values are in euro.

# Sort rank for priority actions (lower is more urgent)
URGENCY_RANK: Dict[Urgency, int] = {
    Urgency.CRITICAL: 0,
    Urgency.HIGH: 1,
    Urgency.MEDIUM: 2,
    Urgency.LOW: 3,
}

MAX_PRIORITY_ACTIONS = 5
MAX_SUMMARY_ITEMS = 3

# Age assumed when the questionnaire left it blank
DEFAULT_AGE = 30

# --- Emergency fund (in months of net income) ---
STARTER_EMERGENCY_MONTHS = Decimal("1")
FULL_EMERGENCY_MONTHS = Decimal("3")
STARTER_EMERGENCY_FLOOR = Decimal("1000")
YEARLY_EMERGENCY_MONTHS = Decimal("6")

# --- Debt (interest rates in percent) ---
HIGH_INTEREST_DEBT_RATE = Decimal("5")
CRITICAL_DEBT_RATE = Decimal("10")

# --- Pension & tax ---
# Gross salary above which relief is at the higher rate
HIGHER_TAX_BAND_THRESHOLD = Decimal("42000")
HIGHER_TAX_RELIEF = "40%"
STANDARD_TAX_RELIEF = "20%"

# Age-related limits on tax-relieved pension contributions (% of earnings)
PENSION_RELIEF_LIMITS: Tuple[Tuple[int, int], ...] = (
    (30, 15),
    (40, 20),
    (50, 25),
    (55, 30),
    (60, 35),
)
PENSION_RELIEF_LIMIT_60_PLUS = 40

# --- Schedules ---
MONTHLY_MILESTONE_COUNT = 6
YEARLY_GOAL_COUNT = 3
DEFAULT_MONTHLY_TRANSFER = Decimal("500")
YEARLY_SAVINGS_RATE = Decimal("0.2")
NET_WORTH_MILESTONE_UPLIFT = Decimal("30000")
PENSION_MILESTONE_MONTHS = 36
HOUSE_DEPOSIT_TARGET = Decimal("50000")

DISCLAIMERS: Tuple[str, ...] = (
    "This is educational guidance only, not regulated financial advice.",
    "For personal advice, consult a qualified financial advisor.",
    "Tax rules and limits are subject to change - verify with Revenue.ie.",
    "Past investment performance does not guarantee future results.",
)

FALLBACK_STRENGTH = "Taking steps to improve your financial health"
FALLBACK_AREA = "Continue building towards your goals"
