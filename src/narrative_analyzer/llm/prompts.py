import yaml
from pathlib import Path
from functools import lru_cache
from typing import Iterable

from ..schemas.request import Article

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"

@lru_cache(maxsize=None)
def load_prompt(name: str) -> str:
    # Prioritize .yaml for structured prompts
    yaml_path = PROMPTS_DIR / f"{name}.yaml"
    if yaml_path.exists():
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
            return data.get("content", "")

    # Fallback to .md
    md_path = PROMPTS_DIR / f"{name}.md"
    if md_path.exists():
        with open(md_path, "r", encoding="utf-8") as f:
            return f.read()

    raise FileNotFoundError(f"Prompt {name} not found as .yaml or .md")

def format_articles(articles: Iterable[Article]) -> str:
    """One block per article, blank line between blocks, input order kept."""
    return "\n\n".join(
        f"UniqueId: {a.unique_id}\nTitle: {a.title}\nContent: {a.summary}"
        for a in articles
    )

def build_analysis_prompt(research_question: str, articles: Iterable[Article]) -> str:
    return load_prompt("narrative_analysis").format(
        research_question=research_question,
        articles=format_articles(articles),
    )

def build_summary_prompt(text: str) -> str:
    return load_prompt("article_summary").format(text=text)

def build_keyword_prompt(research_question: str) -> str:
    return load_prompt("search_keyword").format(research_question=research_question)
