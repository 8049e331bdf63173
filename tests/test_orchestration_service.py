import asyncio
from datetime import datetime, timezone

from schemas.enums import PlanSource
from schemas.profile import FinancialProfile
from services.errors import PlanGenerationError
from services.llm_service import LLMPlanGenerator
from services.orchestration_service import PlanOrchestrationService
from services.plan_service import synthesize_plan
from utils.settings import Settings

REFERENCE = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


class FakeGenerator:
    def __init__(self, plan=None, error=None):
        self.plan = plan
        self.error = error
        self.calls = 0

    async def generate(self, profile, reference_date=None):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.plan


def run(service, **kwargs):
    return asyncio.run(service.generate_plan(FinancialProfile(), REFERENCE, **kwargs))


def test_without_api_key_there_is_no_generator():
    service = PlanOrchestrationService(Settings())
    assert service.generator is None

    result = run(service)

    assert result.source == PlanSource.RULE_BASED
    assert result.fallback_reason is None
    assert result.plan == synthesize_plan(FinancialProfile(), REFERENCE)


def test_api_key_enables_generator():
    service = PlanOrchestrationService(Settings(openai_api_key="sk-test", llm_model="gpt-4o-mini"))

    assert isinstance(service.generator, LLMPlanGenerator)
    assert service.generator.model == "gpt-4o-mini"


def test_remote_plan_is_used():
    remote_plan = synthesize_plan(FinancialProfile(), datetime(2020, 1, 1, tzinfo=timezone.utc))
    generator = FakeGenerator(plan=remote_plan)

    result = run(PlanOrchestrationService(Settings(), generator=generator))

    assert result.source == PlanSource.LLM
    assert result.plan is remote_plan
    assert generator.calls == 1


def test_remote_failure_falls_back_to_rules():
    generator = FakeGenerator(error=PlanGenerationError("Remote model request failed: boom"))

    result = run(PlanOrchestrationService(Settings(), generator=generator))

    assert result.source == PlanSource.RULE_BASED
    assert result.fallback_reason == "Remote model request failed: boom"
    assert result.plan == synthesize_plan(FinancialProfile(), REFERENCE)


def test_remote_model_can_be_skipped():
    generator = FakeGenerator(error=AssertionError("should not be called"))

    result = run(PlanOrchestrationService(Settings(), generator=generator), use_llm=False)

    assert result.source == PlanSource.RULE_BASED
    assert generator.calls == 0
