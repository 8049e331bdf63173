# services/orchestration_service.py

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from schemas.enums import PlanSource
from schemas.plan import GeneratedPlan
from schemas.profile import FinancialProfile
from services.errors import PlanGenerationError
from services.llm_service import LLMPlanGenerator
from services.plan_service import synthesize_plan
from utils.logger import get_logger
from utils.settings import Settings

logger = get_logger(__name__)


@dataclass(frozen=True)
class PlanResult:
    plan: GeneratedPlan
    source: PlanSource
    fallback_reason: Optional[str] = None


class PlanOrchestrationService:
    """
    Produces the user's plan: the remote model when one is configured and
    requested, the rule engine otherwise. Any remote failure falls back to
    the rule engine, so a plan is always returned.
    """

    def __init__(self, settings: Settings, generator: Optional[LLMPlanGenerator] = None):
        self.settings = settings
        if generator is None and settings.llm_enabled:
            generator = LLMPlanGenerator(
                api_key=settings.openai_api_key,
                model=settings.llm_model,
                temperature=settings.llm_temperature,
                timeout=settings.llm_timeout,
            )
        self.generator = generator

    def generate_rule_based_plan(self, profile: FinancialProfile, reference_date: Optional[datetime] = None) -> PlanResult:
        plan = synthesize_plan(profile, reference_date)
        return PlanResult(plan=plan, source=PlanSource.RULE_BASED)

    async def generate_plan(
        self,
        profile: FinancialProfile,
        reference_date: Optional[datetime] = None,
        use_llm: bool = True,
    ) -> PlanResult:
        reference_date = reference_date or datetime.now(timezone.utc)

        if not use_llm or self.generator is None:
            logger.info("Generating rule-based plan (remote model %s)", "not requested" if not use_llm else "not configured")
            return self.generate_rule_based_plan(profile, reference_date)

        try:
            plan = await self.generator.generate(profile, reference_date)
        except PlanGenerationError as e:
            logger.warning("Remote plan generation failed, falling back to rule engine: %s", e)
            result = self.generate_rule_based_plan(profile, reference_date)
            return PlanResult(plan=result.plan, source=PlanSource.RULE_BASED, fallback_reason=str(e))

        return PlanResult(plan=plan, source=PlanSource.LLM)
