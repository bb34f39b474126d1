from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.USER_CENTRIC,
    display_name="User-Centric Design",
    evaluator_role="an expert UX and product interviewer",
    sections=[
        RubricSection(
            key="understand_context",
            title="Understand Context of Use",
            marker="Understand Context",
            guidance="Describe who the users are, their environment, and the tasks they perform.",
            criteria=[
                Criterion(name="Users described", max_points=3, description="Are the users and their characteristics described?"),
                Criterion(name="Environment", max_points=3, description="Is the physical, social or technical environment covered?"),
                Criterion(name="Tasks", max_points=2, description="Are the users' tasks identified?"),
                Criterion(name="Research basis", max_points=2, description="Is the context grounded in research?"),
            ],
        ),
        RubricSection(
            key="specify_requirements",
            title="Specify User Requirements",
            marker="Specify User Requirements",
            guidance="Translate the context into specific, testable user requirements.",
            criteria=[
                Criterion(name="Requirements listed", max_points=3, description="Are user requirements stated explicitly?"),
                Criterion(name="Testability", max_points=3, description="Can each requirement be verified?"),
                Criterion(name="Prioritization", max_points=2, description="Are requirements prioritized?"),
                Criterion(name="Traceability", max_points=2, description="Do requirements follow from the context?"),
            ],
        ),
        RubricSection(
            key="design_solution",
            title="Design Solution",
            marker="Design Solution",
            guidance="Present a design and show how each element satisfies a requirement.",
            criteria=[
                Criterion(name="Solution description", max_points=3, description="Is the design described concretely?"),
                Criterion(name="Requirement coverage", max_points=3, description="Does the design meet the stated requirements?"),
                Criterion(name="Usability", max_points=2, description="Are usability and accessibility considered?"),
                Criterion(name="Alternatives", max_points=2, description="Were alternative designs considered?"),
            ],
        ),
        RubricSection(
            key="evaluate",
            title="Evaluate",
            marker="Evaluate",
            guidance="Explain how you would evaluate the design against requirements with real users.",
            criteria=[
                Criterion(name="Evaluation method", max_points=3, description="Is a usability evaluation method described?"),
                Criterion(name="Metrics", max_points=3, description="Are measurable success criteria defined?"),
                Criterion(name="Iteration", max_points=2, description="Is there a loop back to earlier stages?"),
                Criterion(name="User involvement", max_points=2, description="Are real users involved?"),
            ],
        ),
    ],
)

FOCUS = """A strong User-Centric Design answer keeps users involved throughout: context of use drives requirements, requirements drive the design, and evaluation with real users closes the loop. Reward traceability between stages and explicit iteration."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
