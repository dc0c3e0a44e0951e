"""Pydantic schemas for analysis requests.

Defines Article and ResearchRequest. Both accept the camelCase field names
used by JSON callers (uniqueId, researchQuestion).
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List

class Article(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    unique_id: str = Field(..., alias="uniqueId")
    title: str
    summary: str

class ResearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    research_question: str = Field(..., alias="researchQuestion")
    articles: List[Article] = []
