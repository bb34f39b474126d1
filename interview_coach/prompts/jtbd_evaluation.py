from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.JTBD,
    display_name="Jobs-To-Be-Done",
    evaluator_role="an expert product strategy interviewer",
    sections=[
        RubricSection(
            key="identify_job",
            title="Identify the Job",
            marker="Identify the Job",
            guidance="Phrase the job as 'When I..., I want to..., so I can...' and keep it solution-free.",
            criteria=[
                Criterion(name="Job statement", max_points=3, description="Is the core job clearly articulated?"),
                Criterion(name="Solution independence", max_points=3, description="Is the job described without assuming a product?"),
                Criterion(name="Circumstance", max_points=2, description="Is the triggering situation described?"),
                Criterion(name="Relevance", max_points=2, description="Does the job match the question?"),
            ],
        ),
        RubricSection(
            key="current_solutions",
            title="Current Solutions",
            marker="Current Solutions",
            guidance="Name what customers hire today, including workarounds, and where each falls short.",
            criteria=[
                Criterion(name="Alternatives named", max_points=3, description="Are existing solutions and workarounds listed?"),
                Criterion(name="Shortcomings", max_points=3, description="Are the gaps of current solutions explained?"),
                Criterion(name="Competitive insight", max_points=2, description="Is there insight into why customers switch?"),
                Criterion(name="Specificity", max_points=2, description="Are examples concrete?"),
            ],
        ),
        RubricSection(
            key="functional_requirements",
            title="Functional Requirements",
            marker="Functional Requirements",
            guidance="List the practical outcomes the customer needs to get the job done.",
            criteria=[
                Criterion(name="Requirements listed", max_points=3, description="Are functional outcomes enumerated?"),
                Criterion(name="Measurability", max_points=3, description="Are outcomes expressed measurably?"),
                Criterion(name="Prioritization", max_points=2, description="Are requirements ranked?"),
                Criterion(name="Link to job", max_points=2, description="Do requirements follow from the job?"),
            ],
        ),
        RubricSection(
            key="emotional_social",
            title="Emotional and Social Needs",
            marker="Emotional and Social",
            guidance="Describe how the customer wants to feel and be perceived while doing the job.",
            criteria=[
                Criterion(name="Emotional jobs", max_points=3, description="Are emotional needs identified?"),
                Criterion(name="Social jobs", max_points=3, description="Are social perceptions considered?"),
                Criterion(name="Depth", max_points=2, description="Are the needs explored beyond surface level?"),
                Criterion(name="Connection", max_points=2, description="Are they connected to the functional job?"),
            ],
        ),
        RubricSection(
            key="proposed_solution",
            title="Proposed Solution",
            marker="Proposed Solution",
            guidance="Propose a solution and map each feature back to a functional or emotional need.",
            criteria=[
                Criterion(name="Solution clarity", max_points=3, description="Is the proposed solution clearly described?"),
                Criterion(name="Needs coverage", max_points=3, description="Does it address functional and emotional needs?"),
                Criterion(name="Differentiation", max_points=2, description="Is it better than current solutions?"),
                Criterion(name="Feasibility", max_points=2, description="Is it realistic to build?"),
            ],
        ),
        RubricSection(
            key="validation",
            title="Validation Approach",
            marker="Validation",
            guidance="Explain the experiment and metric that would prove customers hire your solution.",
            criteria=[
                Criterion(name="Validation method", max_points=3, description="Is a concrete validation experiment described?"),
                Criterion(name="Success metrics", max_points=3, description="Are success metrics defined?"),
                Criterion(name="Risk reduction", max_points=2, description="Does the approach test the riskiest assumption?"),
                Criterion(name="Iteration", max_points=2, description="Is there a plan to act on the results?"),
            ],
        ),
    ],
)

FOCUS = """A strong Jobs-To-Be-Done answer starts from the progress the customer is trying to make, not from a feature. Reward a solution-free job statement, honest analysis of what customers hire today, and a validation plan that tests whether the new solution would actually be hired."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
