import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

from interview_coach.models.evaluation import EvaluationRequest, HeuristicEvaluation, SectionScore
from interview_coach.models.rubric import SECTION_MAX_SCORE, FrameworkRubric, RubricSection
from interview_coach.prompts.builder import get_rubric
from interview_coach.services.section_segmenter import MarkerSegmenter, SectionSegmenter

DETAIL_INDICATORS = (
    "for example",
    "for instance",
    "specifically",
    "such as",
    "step",
    "first",
    "second",
    "then",
    "finally",
    "because",
    "result",
    "metric",
    "data",
    "analysis",
    "measure",
    "impact",
)

LENGTH_TARGET = 200
DETAIL_TARGET = 5
LENGTH_WEIGHT = 0.4
KEYWORD_WEIGHT = 0.2
DETAIL_WEIGHT_WITH_KEYWORD = 0.4
DETAIL_WEIGHT_WITHOUT_KEYWORD = 0.6
STRENGTH_THRESHOLD = 7

HEURISTIC_NOTE = "Note: This evaluation was generated by automated structural analysis of the response."


def round_half_up(value: float) -> float:
    """Round to one decimal, halves away from zero."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def find_detail_indicators(span: str) -> List[str]:
    lowered = span.lower()
    return [indicator for indicator in DETAIL_INDICATORS if indicator in lowered]


class HeuristicScorer:
    """
    Deterministic scorer used when the completion service is unavailable.

    Scores only depend on surface features of each section span: its length,
    an optional section keyword and how many detail indicators it contains.
    """

    def __init__(self, segmenter: Optional[SectionSegmenter] = None, max_score: float = SECTION_MAX_SCORE):
        self.segmenter = segmenter or MarkerSegmenter()
        self.max_score = max_score

    def score_section(self, span: str, keyword: Optional[str] = None) -> float:
        if not span:
            return 0.0

        length_component = min(
            self.max_score * LENGTH_WEIGHT,
            (len(span) / LENGTH_TARGET) * self.max_score * LENGTH_WEIGHT,
        )

        keyword_component = 0.0
        detail_weight = DETAIL_WEIGHT_WITHOUT_KEYWORD
        if keyword is not None:
            detail_weight = DETAIL_WEIGHT_WITH_KEYWORD
            if keyword.lower() in span.lower():
                keyword_component = self.max_score * KEYWORD_WEIGHT

        matches = len(find_detail_indicators(span))
        detail_component = min(
            self.max_score * detail_weight,
            (matches / DETAIL_TARGET) * self.max_score * detail_weight,
        )

        score = round_half_up(length_component + keyword_component + detail_component)
        return min(max(score, 0.0), float(self.max_score))

    def evaluate(self, request: EvaluationRequest) -> HeuristicEvaluation:
        rubric = get_rubric(request.framework)
        spans = self.segmenter.split(request.transcript, rubric.sections)

        section_scores = [
            SectionScore(
                section_key=section.key,
                title=section.title,
                score=self.score_section(spans[section.key], section.keyword),
            )
            for section in rubric.sections
        ]
        overall = round_half_up(sum(s.score for s in section_scores) / len(section_scores))

        logging.info(
            f"Heuristic evaluation | framework={rubric.framework.value} | "
            f"overall={overall} | sections={[s.score for s in section_scores]}"
        )

        return HeuristicEvaluation(
            framework=rubric.framework,
            sections=section_scores,
            overall_score=overall,
            text=self.render(rubric, spans, section_scores, overall),
        )

    def render(
        self,
        rubric: FrameworkRubric,
        spans: dict,
        section_scores: List[SectionScore],
        overall: float,
    ) -> str:
        """Render feedback in the same layout the completion service is asked for."""
        blocks = [f"Overall Score: {overall:.1f}/10", HEURISTIC_NOTE]

        for section, section_score in zip(rubric.sections, section_scores):
            blocks.append(self._render_section(section, spans[section.key], section_score.score))

        strengths = [
            f"- {s.title}: well developed with supporting detail (score {s.score:.1f}/10)"
            for s in section_scores
            if s.score >= STRENGTH_THRESHOLD
        ]
        improvements = [
            f"- {section.title}: {section.guidance}"
            for section, s in zip(rubric.sections, section_scores)
            if s.score < STRENGTH_THRESHOLD
        ]

        blocks.append("Key Strengths:\n" + ("\n".join(strengths) or "No section scored 7 or higher yet."))
        blocks.append("Areas for Improvement:\n" + ("\n".join(improvements) or "No section scored below 7."))
        return "\n\n".join(blocks)

    def _render_section(self, section: RubricSection, span: str, score: float) -> str:
        indicators = find_detail_indicators(span)
        has_keyword = section.keyword is not None and section.keyword.lower() in span.lower()

        if not span:
            observed = f"No {section.title} section was found in the response."
            missing = f"The response does not address {section.title}. Open it with \"{section.marker}\" so it can be assessed."
        else:
            observed = f"The {section.title} section contains {len(span)} characters"
            if indicators:
                observed += f" and references {', '.join(indicators)}."
            else:
                observed += " with no supporting detail."
            if has_keyword:
                observed += f" It mentions {section.keyword}."

            gaps = []
            if len(span) < LENGTH_TARGET:
                gaps.append("The section is brief; develop it further.")
            if len(indicators) < DETAIL_TARGET:
                gaps.append("Add concrete specifics such as examples, data, or metrics.")
            if section.keyword is not None and not has_keyword:
                gaps.append(f"It does not mention {section.keyword}.")
            missing = " ".join(gaps) or "No major gaps detected in the structure of this section."

        return (
            f"{section.title} (Score {score:.1f}/10):\n"
            f"What was observed: {observed}\n"
            f"What was missing: {missing}\n"
            f"Improvement suggestions: {section.guidance}"
        )
