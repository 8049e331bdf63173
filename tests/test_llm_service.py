"""Remote plan generation, with the model call replaced by canned replies."""

import asyncio
from datetime import datetime, timezone

import pytest
from langchain_core.exceptions import OutputParserException

from rules.plan_config import DISCLAIMERS
from schemas.profile import FinancialProfile
from services.errors import PlanGenerationError
from services.llm_service import LLMPlanGenerator
from services.plan_service import synthesize_plan

REFERENCE = datetime(2026, 10, 19, 9, 30, tzinfo=timezone.utc)


class CannedGenerator(LLMPlanGenerator):
    """Returns a fixed reply (or raises it) instead of calling the model."""

    def __init__(self, reply, api_key="test-key"):
        super().__init__(api_key=api_key)
        self.reply = reply
        self.calls = 0

    async def _request_plan(self, profile, reference_date):
        self.calls += 1
        if isinstance(self.reply, Exception):
            raise self.reply
        return self.reply


def model_reply():
    plan = synthesize_plan(FinancialProfile(), datetime(2020, 1, 1, tzinfo=timezone.utc))
    return plan.model_dump(mode="json", by_alias=True)


def generate(generator):
    return asyncio.run(generator.generate(FinancialProfile(), REFERENCE))


def test_valid_reply_becomes_a_plan():
    plan = generate(CannedGenerator(model_reply()))

    assert plan.summary.risk_profile == "Conservative Saver"
    assert len(plan.monthly_milestones) == 6


def test_generation_time_is_overwritten():
    plan = generate(CannedGenerator(model_reply()))
    assert plan.generated_at == "2026-10-19T09:30:00+00:00"


def test_missing_api_key_fails_before_calling():
    generator = CannedGenerator(model_reply(), api_key="")

    with pytest.raises(PlanGenerationError):
        generate(generator)
    assert generator.calls == 0


@pytest.mark.parametrize("reply", [{}, None, ["not", "a", "plan"]])
def test_empty_reply_fails(reply):
    with pytest.raises(PlanGenerationError, match="No plan"):
        generate(CannedGenerator(reply))


def test_reply_not_matching_schema_fails():
    reply = model_reply()
    del reply["summary"]

    with pytest.raises(PlanGenerationError, match="does not match"):
        generate(CannedGenerator(reply))


def test_unknown_urgency_fails():
    reply = model_reply()
    reply["priorityActions"][0]["urgency"] = "whenever"

    with pytest.raises(PlanGenerationError):
        generate(CannedGenerator(reply))


def test_invalid_json_fails():
    with pytest.raises(PlanGenerationError, match="not valid JSON"):
        generate(CannedGenerator(OutputParserException("Invalid json output: {")))


def test_transport_error_fails():
    with pytest.raises(PlanGenerationError, match="request failed"):
        generate(CannedGenerator(TimeoutError("read timed out")))


def test_too_many_actions_fails():
    reply = model_reply()
    reply["priorityActions"] = reply["priorityActions"] + reply["priorityActions"]

    with pytest.raises(PlanGenerationError, match="does not match"):
        generate(CannedGenerator(reply))


def test_actions_out_of_urgency_order_fail():
    reply = model_reply()
    reply["priorityActions"] = list(reversed(reply["priorityActions"]))

    with pytest.raises(PlanGenerationError, match="does not match"):
        generate(CannedGenerator(reply))


@pytest.mark.parametrize("key, keep", [("monthlyMilestones", 1), ("monthlyMilestones", 0), ("yearlyGoals", 2)])
def test_wrong_schedule_length_fails(key, keep):
    reply = model_reply()
    reply[key] = reply[key][:keep]

    with pytest.raises(PlanGenerationError, match="does not match"):
        generate(CannedGenerator(reply))


def test_standard_disclaimers_replace_the_model_ones():
    reply = model_reply()
    reply["disclaimers"] = []

    plan = generate(CannedGenerator(reply))

    assert plan.disclaimers == DISCLAIMERS
