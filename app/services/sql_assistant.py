import json
import logging
from typing import Any, Dict, Optional

from app.schemas.sql import (
    ExplainSqlRequest,
    GenerateSqlRequest,
    SqlExplanationResult,
    SqlGenerationResult,
    TransformSqlRequest,
)
from app.utils.templates.sql_prompts import (
    explain_prompt_template,
    explain_system_prompt,
    generate_prompt_template,
    generate_system_prompt,
    transform_prompt_template,
    transform_system_prompt,
)

logger = logging.getLogger(__name__)

COMPLEXITY_LEVELS = ("simple", "medium", "complex")


class SqlAssistantError(Exception):
    """Raised when the LLM call fails or returns something unusable."""


def _complexity(value: Any) -> str:
    return value if value in COMPLEXITY_LEVELS else "medium"


class SqlAssistant:
    """Generates, transforms and explains SQL through an OpenAI chat model.

    The model output is trusted as-is: only missing keys are defaulted.
    """

    def __init__(self, client, model: str = "gpt-4o"):
        self.client = client
        self.model = model

    def _complete_json(self, system_prompt: str, prompt: str, temperature: float) -> Dict[str, Any]:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
            temperature=temperature,
        )
        content = response.choices[0].message.content or "{}"
        try:
            result = json.loads(content)
        except json.JSONDecodeError:
            raise SqlAssistantError(f"Invalid JSON format from model response: {content}")
        if not isinstance(result, dict):
            raise SqlAssistantError(f"Expected a JSON object from model response: {content}")
        return result

    def _to_generation_result(self, result: Dict[str, Any]) -> SqlGenerationResult:
        return SqlGenerationResult(
            sql=result.get("sql") or "",
            explanation=result.get("explanation") or "",
            complexity=_complexity(result.get("complexity")),
            estimated_execution_time=result.get("estimatedExecutionTime") or 1000,
            suggestions=result.get("suggestions") or [],
            used_tables=result.get("usedTables") or [],
        )

    def build_generate_prompt(self, request: GenerateSqlRequest, schema_text: Optional[str] = None) -> str:
        options = request.options
        return generate_prompt_template.format(
            natural_language_query=request.natural_language_query,
            database=request.database,
            subject=request.subject or "General",
            analysis_type=request.analysis_type or "General",
            limit=(options and options.limit) or "No limit specified",
            sort_order=(options and options.sort_order) or "auto",
            optimization_level=(options and options.optimization_level) or "standard",
            schema_text=schema_text or "",
        )

    def generate_sql(self, request: GenerateSqlRequest, schema_text: Optional[str] = None) -> SqlGenerationResult:
        logger.info("Generating %s SQL for: %s", request.database, request.natural_language_query)
        try:
            prompt = self.build_generate_prompt(request, schema_text)
            result = self._complete_json(generate_system_prompt, prompt, temperature=0.3)
            return self._to_generation_result(result)
        except Exception as e:
            raise SqlAssistantError(f"Failed to generate SQL: {e}") from e

    def transform_sql(self, request: TransformSqlRequest) -> SqlGenerationResult:
        logger.info("Transforming SQL for %s", request.target_database)
        try:
            prompt = transform_prompt_template.format(
                target_database=request.target_database,
                optimization_level=request.optimization_level or "standard",
                original_sql=request.original_sql,
            )
            result = self._complete_json(transform_system_prompt, prompt, temperature=0.2)
            return self._to_generation_result(result)
        except Exception as e:
            raise SqlAssistantError(f"Failed to transform SQL: {e}") from e

    def explain_sql(self, request: ExplainSqlRequest) -> SqlExplanationResult:
        logger.info("Explaining SQL (%d chars)", len(request.sql))
        try:
            prompt = explain_prompt_template.format(sql=request.sql)
            result = self._complete_json(explain_system_prompt, prompt, temperature=0.3)
            return SqlExplanationResult(
                explanation=result.get("explanation") or "",
                breakdown=result.get("breakdown") or [],
                complexity=_complexity(result.get("complexity")),
                performance=result.get("performance") or {"rating": 5, "suggestions": []},
            )
        except Exception as e:
            raise SqlAssistantError(f"Failed to explain SQL: {e}") from e
