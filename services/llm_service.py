# services/llm_service.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.output_parsers import JsonOutputParser
from langchain_openai import ChatOpenAI
from pydantic import ValidationError

from prompts.plan_prompt import build_plan_prompt
from prompts.system_prompt import SYSTEM_PROMPT
from rules.plan_config import DISCLAIMERS
from schemas.plan import GeneratedPlan
from schemas.profile import FinancialProfile
from services.errors import PlanGenerationError
from utils.logger import get_logger

logger = get_logger(__name__)


class LLMPlanGenerator:
    """
    Asks an OpenAI chat model for a plan in the GeneratedPlan JSON shape.
    The chat client is created lazily on first use.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4-turbo-preview",
        temperature: float = 0.7,
        max_tokens: int = 4000,
        timeout: float = 60,
    ):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._chain = None

    def _get_chain(self):
        if self._chain is None:
            llm = ChatOpenAI(
                model=self.model,
                api_key=self.api_key,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                model_kwargs={"response_format": {"type": "json_object"}},
            )
            self._chain = llm | JsonOutputParser()
        return self._chain

    async def _request_plan(self, profile: FinancialProfile, reference_date: datetime) -> Dict[str, Any]:
        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(content=build_plan_prompt(profile, reference_date)),
        ]
        return await self._get_chain().ainvoke(messages)

    async def generate(self, profile: FinancialProfile, reference_date: Optional[datetime] = None) -> GeneratedPlan:
        """
        Generates a plan with the remote model.

        Raises:
            PlanGenerationError: on any transport failure, empty reply, invalid
                JSON or a reply that does not match the plan schema.
        """
        reference_date = reference_date or datetime.now(timezone.utc)
        if not self.api_key:
            raise PlanGenerationError("No API key configured for remote plan generation.")

        try:
            content = await self._request_plan(profile, reference_date)
        except OutputParserException as e:
            raise PlanGenerationError(f"Model reply was not valid JSON: {e}") from e
        except Exception as e:
            raise PlanGenerationError(f"Remote model request failed: {e}") from e

        if not isinstance(content, dict) or not content:
            raise PlanGenerationError("No plan in the model response.")

        # The generation time and the disclaimers are ours, never the model's
        content = {**content, "generatedAt": reference_date.isoformat(), "disclaimers": list(DISCLAIMERS)}
        content.pop("generated_at", None)
        try:
            plan = GeneratedPlan.model_validate(content)
        except ValidationError as e:
            raise PlanGenerationError(f"Model reply does not match the plan schema: {e}") from e

        logger.info("Remote plan generated with %s (%d priority actions)", self.model, len(plan.priority_actions))
        return plan
