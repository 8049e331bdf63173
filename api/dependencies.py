# api/dependencies.py

from fastapi import Depends

from services.orchestration_service import PlanOrchestrationService
from utils.settings import Settings, get_settings


def get_plan_service(settings: Settings = Depends(get_settings)) -> PlanOrchestrationService:
    """
    FastAPI Dependency providing the plan orchestration service.
    Requests are stateless, so a fresh service per request is enough.
    """
    return PlanOrchestrationService(settings)
