#!/usr/bin/env python3
"""
Run one analyzer operation against the configured model and print the
result envelope as JSON.

    python scripts/run_analysis.py keyword "How does social media shape climate opinion?"
    python scripts/run_analysis.py summarize --file article.txt
    python scripts/run_analysis.py analyze "Research question" articles.json
"""
import argparse
import asyncio
import json
import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from narrative_analyzer.analyzer import CompletionAnalyzer
from narrative_analyzer.config import get_settings
from narrative_analyzer.llm.client import build_client
from narrative_analyzer.log import setup_logging
from narrative_analyzer.schemas.request import ResearchRequest

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Narrative analysis via chat completions")
    parser.add_argument("--model", help="Override the MODEL setting")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Narrative analysis across articles")
    analyze.add_argument("question", help="Research question")
    analyze.add_argument("articles", type=Path, help="JSON file: list of {uniqueId, title, summary}")

    summarize = sub.add_parser("summarize", help="Summarize one article")
    summarize.add_argument("text", nargs="?", help="Article text")
    summarize.add_argument("--file", type=Path, help="Read article text from file")

    keyword = sub.add_parser("keyword", help="Search keyword for a research question")
    keyword.add_argument("question", help="Research question")

    return parser.parse_args(argv)


async def run(args) -> dict:
    settings = get_settings()
    analyzer = CompletionAnalyzer(build_client(settings), args.model or settings.MODEL)

    if args.command == "analyze":
        articles = json.loads(args.articles.read_text(encoding="utf-8"))
        request = ResearchRequest(research_question=args.question, articles=articles)
        result = await analyzer.generate_analysis(request)
    elif args.command == "summarize":
        if args.file:
            text = args.file.read_text(encoding="utf-8")
        elif args.text:
            text = args.text
        else:
            raise SystemExit("summarize needs text or --file")
        result = await analyzer.generate_summary(text)
    else:
        result = await analyzer.extract_keyword(args.question)

    return result.model_dump()


def main(argv=None):
    load_dotenv()
    setup_logging()
    args = parse_args(argv)
    logger.info(f"Running {args.command}")

    envelope = asyncio.run(run(args))
    print(json.dumps(envelope, indent=2, ensure_ascii=False))
    sys.exit(0 if envelope["success"] else 1)


if __name__ == "__main__":
    main()
