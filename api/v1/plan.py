# api/v1/plan.py

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_plan_service
from prompts.plan_prompt import build_plan_prompt
from prompts.system_prompt import SYSTEM_PROMPT
from schemas.plan import ExportEnvelope, GeneratedPlan
from schemas.plan_api_data import CompletionOut, ExportRequest, PlanPromptOut, PlanRequest, PlanResponse
from schemas.profile import FinancialProfile
from services.orchestration_service import PlanOrchestrationService
from services.plan_service import synthesize_plan
from services.profile_service import completion_percentage
from utils.logger import get_logger
from utils.storage import export_envelope

logger = get_logger(__name__)

router = APIRouter(
    tags=["Financial Plan"],
)

PlanServiceDependency = Annotated[PlanOrchestrationService, Depends(get_plan_service)]


@router.post(
    "/plan/rule-based",
    response_model=GeneratedPlan,
    status_code=status.HTTP_200_OK,
    summary="Generate the plan with the rule engine only (no external calls)."
)
def create_rule_based_plan(profile: FinancialProfile):
    """
    Maps the questionnaire to prioritised actions, monthly milestones and
    yearly goals using the fixed flowchart rules.
    """
    return synthesize_plan(profile, datetime.now(timezone.utc))


@router.post(
    "/plan",
    response_model=PlanResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate the plan with the remote model, falling back to the rule engine."
)
async def create_plan(request: PlanRequest, plan_service: PlanServiceDependency):
    try:
        result = await plan_service.generate_plan(request.profile, use_llm=request.use_llm)
    except Exception as e:
        logger.exception("Plan generation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"An unexpected error occurred during plan generation: {e}"
        )

    return PlanResponse(plan=result.plan, source=result.source, fallback_reason=result.fallback_reason)


@router.post(
    "/plan/prompt",
    response_model=PlanPromptOut,
    summary="Preview the prompts sent to the remote model for this profile."
)
def preview_plan_prompt(profile: FinancialProfile):
    return PlanPromptOut(system_prompt=SYSTEM_PROMPT, user_prompt=build_plan_prompt(profile))


@router.post(
    "/profile/completion",
    response_model=CompletionOut,
    summary="Percentage of questionnaire fields answered."
)
def profile_completion(profile: FinancialProfile):
    return CompletionOut(completion_percentage=completion_percentage(profile))


@router.post(
    "/export",
    response_model=ExportEnvelope,
    summary="Bundle form data and plan into the downloadable export format."
)
def export_data(request: ExportRequest):
    return export_envelope(request.form_data, request.plan)
