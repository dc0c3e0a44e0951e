"""Completion-backed narrative analysis.

CompletionAnalyzer turns research questions and articles into prompts,
sends each as a single system message to the chat completion model and
wraps the reply in a ResultEnvelope. Operations never raise: service and
parse failures come back as {success: False, message: "Error: ...", data: None}.
"""

import json
from typing import Any, Dict, Union

from .llm.client import complete
from .llm.fences import strip_json_fence, strip_json_fence_strict
from .llm.prompts import build_analysis_prompt, build_keyword_prompt, build_summary_prompt
from .log import get_logger
from .schemas.envelope import ResultEnvelope
from .schemas.request import ResearchRequest
from .tracing import tracer

logger = get_logger(__name__)


class KeywordParseError(ValueError):
    """Keyword reply was not valid JSON. Carries a fixed message only."""


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class CompletionAnalyzer:
    def __init__(self, client: Any, model: str):
        self.client = client
        self.model = model

    async def _complete(self, prompt: str, span_name: str) -> str:
        with tracer.span(span_name, span_type="LLM", attributes={"model": self.model}):
            content = await complete(self.client, self.model, prompt)
            tracer.trace_llm_call(self.model, prompt, content)
            return content

    async def generate_analysis(
        self, request: Union[ResearchRequest, Dict[str, Any]]
    ) -> ResultEnvelope[Any]:
        """
        Narrative analysis across all articles of the request.

        Args:
            request: ResearchRequest (or a dict with researchQuestion/articles)

        Returns:
            ResultEnvelope whose data is the parsed JSON reply
            (articleAnalysis, statistics, overallConclusion), unvalidated.
        """
        try:
            if not isinstance(request, ResearchRequest):
                request = ResearchRequest.model_validate(request)

            prompt = build_analysis_prompt(request.research_question, request.articles)
            content = await self._complete(prompt, "analyzer.generate_analysis")
            cleaned = strip_json_fence(content)

            try:
                data = json.loads(cleaned, parse_constant=_reject_constant)
            except ValueError as e:
                logger.error(f"Error parsing JSON: {e}")
                return ResultEnvelope.fail(e)

            if data is None:
                logger.error("Narrative analysis reply was JSON null")
                return ResultEnvelope.fail("Completion returned JSON null")

            logger.debug(f"Parsed narrative analysis: {data}")
            return ResultEnvelope.ok(data, "Narrative analysis generated successfully.")
        except Exception as e:
            logger.error(f"Error fetching narrative analysis: {e}")
            return ResultEnvelope.fail(e)

    async def generate_summary(self, text: str) -> ResultEnvelope[str]:
        """Summary of one article, returned as the model's raw reply."""
        try:
            prompt = build_summary_prompt(text)
            summary = await self._complete(prompt, "analyzer.generate_summary")
            return ResultEnvelope[str].ok(summary, "Summary generated successfully.")
        except Exception as e:
            logger.error(f"Error generating summary: {e}")
            return ResultEnvelope[str].fail(e)

    async def extract_keyword(self, text: str) -> ResultEnvelope[Any]:
        """
        Search keyword for a research question, parsed from a JSON reply
        such as {"keyword": "climate change"}.
        """
        try:
            prompt = build_keyword_prompt(text)
            content = await self._complete(prompt, "analyzer.extract_keyword")
            cleaned = strip_json_fence_strict(content)

            try:
                parsed = json.loads(cleaned, parse_constant=_reject_constant)
            except ValueError:
                raise KeywordParseError("Error parsing JSON:") from None

            if parsed is None:
                raise KeywordParseError("Error parsing JSON:") from None

            logger.debug(f"Parsed keyword: {parsed}")
            return ResultEnvelope.ok(parsed, "Keyword extracted successfully.")
        except Exception as e:
            logger.error(f"Error generating keyword: {e}")
            return ResultEnvelope.fail(e)
