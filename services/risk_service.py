# services/risk_service.py

from dataclasses import dataclass
from typing import Dict, Tuple

from schemas.enums import DebtVsInvest, GuaranteedVsRisk, MarketDropReaction
from schemas.profile import RiskAnswers

# --- Risk questionnaire points (unanswered questions score 0) ---
MARKET_DROP_POINTS: Dict[MarketDropReaction, int] = {
    MarketDropReaction.BUY_MORE: 3,
    MarketDropReaction.HOLD_OKAY: 2,
    MarketDropReaction.HOLD_ANXIOUS: 1,
    MarketDropReaction.SELL: 0,
}

GUARANTEED_VS_RISK_POINTS: Dict[GuaranteedVsRisk, int] = {
    GuaranteedVsRisk.FIFTY_FIFTY: 2,
    GuaranteedVsRisk.GUARANTEED: 0,
}

DEBT_VS_INVEST_POINTS: Dict[DebtVsInvest, int] = {
    DebtVsInvest.INVEST: 2,
    DebtVsInvest.SPLIT: 1,
    DebtVsInvest.PAY_DEBT: 0,
}

# Checked highest first; the first threshold met wins
RISK_LABEL_THRESHOLDS: Tuple[Tuple[int, str], ...] = (
    (6, "Growth-Focused Investor"),
    (4, "Balanced Investor"),
    (2, "Security-Focused Saver"),
)
DEFAULT_RISK_LABEL = "Conservative Saver"


@dataclass(frozen=True)
class RiskClassification:
    score: int
    label: str


def compute_risk_score(risk: RiskAnswers) -> int:
    """Additive 0-7 score from the three behavioural risk questions."""
    score = 0
    if risk.market_drop_reaction is not None:
        score += MARKET_DROP_POINTS[risk.market_drop_reaction]
    if risk.guaranteed_vs_risk is not None:
        score += GUARANTEED_VS_RISK_POINTS[risk.guaranteed_vs_risk]
    if risk.debt_vs_invest is not None:
        score += DEBT_VS_INVEST_POINTS[risk.debt_vs_invest]
    return score


def risk_label(score: int) -> str:
    for threshold, label in RISK_LABEL_THRESHOLDS:
        if score >= threshold:
            return label
    return DEFAULT_RISK_LABEL


def classify_risk(risk: RiskAnswers) -> RiskClassification:
    """Reduces the risk answers to an ordinal score and its named profile."""
    score = compute_risk_score(risk)
    return RiskClassification(score=score, label=risk_label(score))
