import re
import logging
from typing import List, Optional

from interview_coach.models.evaluation import FeedbackBreakdown, FeedbackComponent
from interview_coach.prompts.builder import get_rubric

OVERALL_SCORE_PATTERN = re.compile(r"Overall Score: ([0-9.]+)/10")

_STRENGTHS_PATTERN = re.compile(r"Key Strengths:(.*?)(?=Areas for Improvement:|$)", re.DOTALL)
_IMPROVEMENTS_PATTERN = re.compile(r"Areas for Improvement:(.*)$", re.DOTALL)
_NEXT_BLOCK = r"(?=\n\s*\n|\Z)"


def extract_overall_score(text: Optional[str]) -> float:
    """
    Pull the overall score out of an evaluation text.

    Matches anywhere in the text. A missing or malformed score resolves to 0.0.
    """
    if not text:
        logging.warning("Empty evaluation text, overall score defaults to 0")
        return 0.0

    match = OVERALL_SCORE_PATTERN.search(text)
    if not match:
        logging.warning("No 'Overall Score: X/10' found in evaluation text, defaulting to 0")
        return 0.0

    try:
        return float(match.group(1))
    except ValueError:
        logging.warning(f"Malformed overall score '{match.group(1)}', defaulting to 0")
        return 0.0


def _bullets(block: str) -> List[str]:
    items = []
    for line in block.split("\n"):
        stripped = line.strip()
        if stripped.startswith("-"):
            item = re.sub(r"^-\s*", "", stripped).strip()
            if item:
                items.append(item)
    return items


def _field(body: str, label_pattern: str) -> str:
    match = re.search(rf"{label_pattern}\s*:\s*(.*?)(?=\n\s*(?:\*\*)?(?:What was|What could|Improvement suggestions|Specific suggestions)|{_NEXT_BLOCK})", body, re.DOTALL | re.IGNORECASE)
    if not match:
        return ""
    return match.group(1).strip().strip("*").strip()


def parse_component(text: str, title: str) -> Optional[FeedbackComponent]:
    """Find a '<title> (Score X/10):' block, optionally wrapped in '**'."""
    header = re.compile(
        rf"(?:\*\*)?{re.escape(title)} \(Score ([0-9.]+)/10\):(?:\*\*)?(.*?){_NEXT_BLOCK}",
        re.DOTALL | re.IGNORECASE,
    )
    match = header.search(text)
    if not match:
        return None

    try:
        score = float(match.group(1))
    except ValueError:
        score = 0.0

    body = match.group(2)
    return FeedbackComponent(
        title=title,
        score=score,
        observed=_field(body, r"(?:\*\*)?What was observed(?:\*\*)?"),
        missing=_field(body, r"(?:\*\*)?(?:What was missing|What could be improved)(?:\*\*)?"),
        suggestions=_field(body, r"(?:\*\*)?(?:Improvement suggestions|Specific suggestions for enhancement)(?:\*\*)?"),
    )


def parse_feedback(text: str, framework) -> FeedbackBreakdown:
    """Break an evaluation text into components, strengths and improvement areas."""
    rubric = get_rubric(framework)

    components = []
    for title in rubric.section_titles:
        component = parse_component(text, title)
        if component is None:
            logging.info(f"Section '{title}' not found in evaluation text")
            continue
        components.append(component)

    strengths_match = _STRENGTHS_PATTERN.search(text)
    improvements_match = _IMPROVEMENTS_PATTERN.search(text)

    return FeedbackBreakdown(
        overall_score=extract_overall_score(text),
        components=components,
        key_strengths=_bullets(strengths_match.group(1)) if strengths_match else [],
        areas_for_improvement=_bullets(improvements_match.group(1)) if improvements_match else [],
    )
