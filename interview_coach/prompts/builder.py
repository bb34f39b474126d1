import logging
from typing import Dict, List

from interview_coach.models.evaluation import EvaluationRequest
from interview_coach.models.framework import Framework
from interview_coach.models.rubric import FrameworkRubric
from interview_coach.prompts import (
    circles_evaluation,
    design_thinking_evaluation,
    generic_evaluation,
    jtbd_evaluation,
    star_evaluation,
    user_centric_evaluation,
)
from interview_coach.prompts.common import get_user_prompt

_FRAMEWORK_PROMPTS = {
    Framework.STAR: star_evaluation,
    Framework.CIRCLES: circles_evaluation,
    Framework.DESIGN_THINKING: design_thinking_evaluation,
    Framework.JTBD: jtbd_evaluation,
    Framework.USER_CENTRIC: user_centric_evaluation,
    Framework.GENERIC: generic_evaluation,
}


def get_rubric(framework) -> FrameworkRubric:
    """Rubric for a framework; unknown identifiers get the generic rubric."""
    return _FRAMEWORK_PROMPTS[Framework.parse(framework)].RUBRIC


def all_rubrics() -> Dict[Framework, FrameworkRubric]:
    return {framework: module.RUBRIC for framework, module in _FRAMEWORK_PROMPTS.items()}


def get_system_instruction(framework) -> str:
    return _FRAMEWORK_PROMPTS[Framework.parse(framework)].get_system_instruction()


def build_messages(request: EvaluationRequest) -> List[Dict[str, str]]:
    """
    Build the ordered chat messages for an evaluation request.
    The output depends only on the request, so the same input always yields the same prompt.
    """
    system_instruction = get_system_instruction(request.framework)
    user_prompt = get_user_prompt(request.question_text, request.transcript)

    logging.info(
        "Built evaluation prompt | framework=%s | system_len=%d | user_len=%d",
        request.framework.value,
        len(system_instruction),
        len(user_prompt),
    )
    return [
        {"role": "system", "content": system_instruction},
        {"role": "user", "content": user_prompt},
    ]
