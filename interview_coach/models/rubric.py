from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from interview_coach.models.framework import Framework

SECTION_MAX_SCORE = 10


class Criterion(BaseModel):
    """One additive sub-criterion of a rubric section"""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    max_points: int = Field(ge=1, le=SECTION_MAX_SCORE)


class RubricSection(BaseModel):
    """
    A named section of a framework rubric.

    `marker` is the literal text a candidate uses to open the section in a
    transcript. `keyword` is only declared by the behavioral and generic
    rubrics and feeds the heuristic keyword bonus.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    marker: str
    keyword: Optional[str] = None
    guidance: str = ""
    criteria: Tuple[Criterion, ...]

    @model_validator(mode="after")
    def validate_total_points(self):
        total = sum(criterion.max_points for criterion in self.criteria)
        if total != SECTION_MAX_SCORE:
            raise ValueError(
                f"Criteria of section '{self.key}' total {total}, expected {SECTION_MAX_SCORE}"
            )
        return self


class FrameworkRubric(BaseModel):
    """Fixed rubric for a framework, defined at import time"""
    model_config = ConfigDict(frozen=True)

    framework: Framework
    display_name: str
    evaluator_role: str
    sections: Tuple[RubricSection, ...]

    @property
    def section_titles(self) -> List[str]:
        return [section.title for section in self.sections]
