"""Pydantic schemas for the JSON payloads the model is asked to return.

The analyzer passes parsed JSON through untouched. These models are an
opt-in structural check for callers who want typed access:

    envelope = await analyzer.generate_analysis(request)
    if envelope.success:
        result = validate_analysis(envelope.data)
"""

from __future__ import annotations

from typing import Any, List
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ArticleAnalysis(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    unique_id: str = Field(..., alias="UniqueId")
    title: str = Field(..., alias="Title")
    summary: str = Field(..., alias="Summary")
    narratives: List[Any] = Field(default_factory=list, alias="Narratives")
    dominance: List[Any] = Field(default_factory=list, alias="Dominance")
    evolution: str = Field("", alias="Evolution")


class NarrativeStatistic(BaseModel):
    narrative: str
    value: float


class NarrativeAnalysisResult(BaseModel):
    """
    Narrative analysis across all articles.
    statistics feeds a pie chart and must hold exactly the top 5 narratives.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    article_analysis: List[ArticleAnalysis] = Field(..., alias="articleAnalysis")
    statistics: List[NarrativeStatistic] = Field(..., min_length=5, max_length=5)
    overall_conclusion: str = Field(..., alias="overallConclusion")

    @model_validator(mode="after")
    def validate_conclusion(self) -> "NarrativeAnalysisResult":
        if not self.overall_conclusion.strip():
            raise ValueError("overallConclusion must not be empty")
        return self


class KeywordResult(BaseModel):
    keyword: str = Field(..., min_length=1)


def validate_analysis(data: Any) -> NarrativeAnalysisResult:
    """Raises pydantic.ValidationError when data does not match the requested schema."""
    return NarrativeAnalysisResult.model_validate(data)


def validate_keyword(data: Any) -> KeywordResult:
    return KeywordResult.model_validate(data)
