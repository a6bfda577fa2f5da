#!/usr/bin/env python3
"""Run a single career assessment from the command line.

Reads raw answers (a JSON object keyed by question id) from a file or stdin,
runs them through the recommendation service and prints the bundle as JSON.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lantern.core.config import get_settings
from lantern.schemas.recommendation_schemas import RecommendationBundle
from lantern.services.recommendation_service import build_recommendation_service
from lantern.utils.exceptions import LanternError
from lantern.utils.logger import get_logger

logger = get_logger(__name__)


def load_answers(source: str) -> Dict[str, Any]:
    """Load raw answers from a path, or from stdin when ``source`` is "-"."""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as f:
        return json.load(f)


async def run_assessment(raw_answers: Dict[str, Any], path: Optional[str]) -> RecommendationBundle:
    """Submit one assessment and close provider connections afterwards."""
    async with build_recommendation_service(get_settings()) as service:
        return await service.submit(raw_answers, path=path)


def main() -> int:
    """Main function for command line usage."""
    parser = argparse.ArgumentParser(description="Lantern career assessment runner")
    parser.add_argument("answers", help="Path to a JSON answers file, or - for stdin")
    parser.add_argument(
        "--path", choices=["decided", "undecided"],
        help="Assessment path; read from q3_career_knowledge when omitted",
    )
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    args = parser.parse_args()

    try:
        raw_answers = load_answers(args.answers)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read answers: {e}")
        return 1

    try:
        bundle = asyncio.run(run_assessment(raw_answers, args.path))
    except LanternError as e:
        print(json.dumps(e.to_dict(), indent=args.indent, default=str), file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1

    print(json.dumps(bundle.to_json_dict(), indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
