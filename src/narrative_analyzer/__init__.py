"""Narrative Analyzer - LLM-backed narrative analysis of news and blog articles.

Sends research questions and articles to a chat completion model and parses
the replies into uniform result envelopes.

Components:
- analyzer: CompletionAnalyzer (analysis, summary, keyword operations)
- llm: prompt loading, completion client and retry wrapper
- schemas: request, envelope and payload models
- tracing: optional MLflow spans around completion calls
"""

from .analyzer import CompletionAnalyzer
from .schemas.envelope import ResultEnvelope
from .schemas.request import Article, ResearchRequest

__all__ = ["CompletionAnalyzer", "ResultEnvelope", "Article", "ResearchRequest"]
