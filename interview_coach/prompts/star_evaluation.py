from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.STAR,
    display_name="STAR",
    evaluator_role="an expert interviewer",
    sections=[
        RubricSection(
            key="situation",
            title="Situation",
            marker="Situation",
            keyword="challenge",
            guidance="Set the scene in one or two sentences: where and when it happened and what challenge you faced.",
            criteria=[
                Criterion(name="Clarity of context", max_points=3, description="Is the setting (where, when, what) clearly described?"),
                Criterion(name="Description of challenge", max_points=3, description="Is the problem or challenge clearly stated?"),
                Criterion(name="Relevance to the question", max_points=2, description="Does the situation align with the question's theme?"),
                Criterion(name="Conciseness", max_points=2, description="Is the description brief and focused?"),
            ],
        ),
        RubricSection(
            key="task",
            title="Task",
            marker="Task",
            keyword="goal",
            guidance="State your own responsibility and the specific goal you were asked to reach.",
            criteria=[
                Criterion(name="Specification of role", max_points=3, description="Is the candidate's role or responsibility clearly stated?"),
                Criterion(name="Clarity of goal", max_points=3, description="Is the objective or task clearly defined?"),
                Criterion(name="Connection to situation", max_points=2, description="Does the task logically follow from the situation?"),
                Criterion(name="Specificity", max_points=2, description="Is the task described in specific, non-vague terms?"),
            ],
        ),
        RubricSection(
            key="action",
            title="Action",
            marker="Action",
            keyword="decided",
            guidance="Walk through the steps you personally took and explain why you chose them.",
            criteria=[
                Criterion(name="Detail of steps", max_points=3, description="Are the actions taken described in detail?"),
                Criterion(name="Rationale for actions", max_points=3, description="Is there an explanation of why those actions were chosen?"),
                Criterion(name="Demonstration of skills", max_points=2, description="Do the actions showcase relevant skills?"),
                Criterion(name="Initiative and ownership", max_points=2, description="Does the candidate show they took charge?"),
            ],
        ),
        RubricSection(
            key="result",
            title="Result",
            marker="Result",
            keyword="learned",
            guidance="Quantify the outcome with a metric and close with what you learned.",
            criteria=[
                Criterion(name="Description of outcome", max_points=3, description="Is the result of the actions clearly stated?"),
                Criterion(name="Measurability", max_points=3, description="Are there quantifiable metrics or specific achievements?"),
                Criterion(name="Reflection", max_points=2, description="Does the candidate reflect on lessons learned?"),
                Criterion(name="Impact", max_points=2, description="Does the result show a significant outcome?"),
            ],
        ),
    ],
)

FOCUS = """A strong behavioral answer tells one real story in order: the Situation that framed it, the Task the candidate owned, the Actions they personally took, and the measurable Result. Reward first-person ownership and concrete evidence; penalize hypothetical answers ("I would...") and team-only narration ("we did...") that hides the candidate's contribution."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
