# schemas/enums.py

import enum


# --- Questionnaire answers (Profile input) ---

class Location(str, enum.Enum):
    DUBLIN = "Dublin"
    CORK = "Cork"
    GALWAY = "Galway"
    LIMERICK = "Limerick"
    OTHER_CITY = "Other City"
    RURAL_TOWN = "Rural/Town"

class Relationship(str, enum.Enum):
    SINGLE = "Single"
    IN_RELATIONSHIP = "In a relationship"
    MARRIED = "Married/Civil partnership"
    SEPARATED = "Separated/Divorced"

class EmploymentType(str, enum.Enum):
    PAYE_EMPLOYEE = "PAYE Employee"
    SELF_EMPLOYED = "Self-employed"
    CONTRACTOR = "Contractor"
    MIX = "Mix"
    NOT_WORKING = "Not working"
    RETIRED = "Retired"

class JobSecurity(str, enum.Enum):
    VERY_SECURE = "Very secure"
    FAIRLY_SECURE = "Fairly secure"
    SOMEWHAT_UNCERTAIN = "Somewhat uncertain"
    UNSTABLE = "Unstable"

class IncomeConfidence(str, enum.Enum):
    VERY_CONFIDENT = "Very confident"
    FAIRLY_CONFIDENT = "Fairly confident"
    UNCERTAIN = "Uncertain"
    EXPECT_DECREASE = "Expect decrease"

class EmployerMatch(str, enum.Enum):
    """Employer's matching contribution to the pension scheme."""
    FULL = "Full match"
    PARTIAL = "Partial match"
    NONE = "No matching"
    NOT_SURE = "Not sure"


# --- Risk questionnaire ---

class MarketDropReaction(str, enum.Enum):
    SELL = "sell"
    HOLD_ANXIOUS = "hold_anxious"
    HOLD_OKAY = "hold_okay"
    BUY_MORE = "buy_more"

class GuaranteedVsRisk(str, enum.Enum):
    GUARANTEED = "guaranteed"
    FIFTY_FIFTY = "fifty_fifty"

class DebtVsInvest(str, enum.Enum):
    PAY_DEBT = "pay_debt"
    SPLIT = "split"
    INVEST = "invest"

class EmergencyFundPreference(str, enum.Enum):
    SIX_PLUS = "6plus"
    THREE_TO_SIX = "3to6"
    THREE = "3"
    LESS = "less"

class RetirementPreference(str, enum.Enum):
    EARLY_LESS = "early_less"
    NORMAL_MORE = "normal_more"

class BonusUsage(str, enum.Enum):
    DEBT = "debt"
    SAVE = "save"
    INVEST = "invest"
    SPEND = "spend"
    MIX = "mix"


# --- Flowchart checklist ---

class EmergencyFundStatus(str, enum.Enum):
    NONE = "none"
    STARTER = "starter"
    BUILDING = "building"
    SOLID = "solid"
    STRONG = "strong"

class PensionStatus(str, enum.Enum):
    NO_SCHEME = "no_scheme"
    NOT_ENROLLED = "not_enrolled"
    PARTIAL = "partial"
    FULL_MATCH = "full_match"
    SELF_EMPLOYED = "self_employed"

class DebtAbove5Percent(str, enum.Enum):
    NONE = "none"
    SMALL = "small"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"

class PropertyStatus(str, enum.Enum):
    OWN_OUTRIGHT = "own_outright"
    OWN_MORTGAGE = "own_mortgage"
    SAVING_DEPOSIT = "saving_deposit"
    RENTING_HAPPY = "renting_happy"
    RENTING_UNSURE = "renting_unsure"


# --- Plan output ---

class Urgency(str, enum.Enum):
    """Ordinal severity of a recommended action (critical is highest)."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class ActionCategory(str, enum.Enum):
    EMERGENCY_FUND = "emergency_fund"
    DEBT = "debt"
    PENSION = "pension"
    SAVINGS = "savings"
    SWITCHING = "switching"
    INVESTMENT = "investment"

class PlanSource(str, enum.Enum):
    """Which engine produced a plan."""
    LLM = "llm"
    RULE_BASED = "rule_based"
