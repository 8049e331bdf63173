# schemas/plan_api_data.py

from typing import Optional

from pydantic import Field

from .enums import PlanSource
from .plan import GeneratedPlan
from .profile import CamelModel, FinancialProfile


# --- 1. Input Schema for /plan (LLM with rule-based fallback) ---

class PlanRequest(CamelModel):
    """Profile to plan for, and whether the remote model may be used."""

    profile: FinancialProfile = Field(..., description="The completed questionnaire.")
    use_llm: bool = Field(True, description="Try the remote model first when one is configured.")


# --- 2. Output Schema for /plan ---

class PlanResponse(CamelModel):
    plan: GeneratedPlan = Field(..., description="The generated plan.")
    source: PlanSource = Field(..., description="Which engine produced the plan.")
    fallback_reason: Optional[str] = Field(None, description="Why the remote model was not used, if it failed.")


# --- 3. Output Schema for /plan/prompt ---

class PlanPromptOut(CamelModel):
    system_prompt: str = Field(..., description="Fixed advisor instructions.")
    user_prompt: str = Field(..., description="The labelled profile sections and the JSON response format.")


# --- 4. Output Schema for /profile/completion ---

class CompletionOut(CamelModel):
    completion_percentage: int = Field(..., ge=0, le=100, description="Share of questionnaire fields answered.")


# --- 5. Input Schema for /export ---

class ExportRequest(CamelModel):
    form_data: Optional[FinancialProfile] = None
    plan: Optional[GeneratedPlan] = None
