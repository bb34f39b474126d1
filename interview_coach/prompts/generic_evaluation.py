from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.GENERIC,
    display_name="Product Framework",
    evaluator_role="an expert product management interviewer",
    sections=[
        RubricSection(
            key="problem_understanding",
            title="Problem Understanding",
            marker="Problem Understanding",
            keyword="problem",
            guidance="Restate the problem, clarify the goal and call out your assumptions.",
            criteria=[
                Criterion(name="Problem clarity", max_points=3, description="Is the problem restated clearly?"),
                Criterion(name="Goal definition", max_points=3, description="Is the business or user goal defined?"),
                Criterion(name="Assumptions", max_points=2, description="Are assumptions made explicit?"),
                Criterion(name="Scope", max_points=2, description="Is the scope of the problem bounded?"),
            ],
        ),
        RubricSection(
            key="user_analysis",
            title="User Analysis",
            marker="User Analysis",
            keyword="user",
            guidance="Segment the users, pick a focus segment, and describe its needs.",
            criteria=[
                Criterion(name="Segmentation", max_points=3, description="Are user segments identified?"),
                Criterion(name="Needs and pain points", max_points=3, description="Are the focus segment's needs described?"),
                Criterion(name="Prioritization", max_points=2, description="Is a focus segment chosen with reasons?"),
                Criterion(name="Evidence", max_points=2, description="Is the analysis grounded in data or research?"),
            ],
        ),
        RubricSection(
            key="solution_design",
            title="Solution Design",
            marker="Solution Design",
            keyword="solution",
            guidance="Propose several solutions, compare them, and choose one.",
            criteria=[
                Criterion(name="Solution options", max_points=3, description="Are multiple solutions considered?"),
                Criterion(name="Fit to needs", max_points=3, description="Does the chosen solution address the user needs?"),
                Criterion(name="Trade-offs", max_points=2, description="Are trade-offs between options discussed?"),
                Criterion(name="Creativity", max_points=2, description="Is the solution original?"),
            ],
        ),
        RubricSection(
            key="implementation_plan",
            title="Implementation Plan",
            marker="Implementation Plan",
            keyword="phase",
            guidance="Lay out an MVP and the phases that follow, with dependencies and risks.",
            criteria=[
                Criterion(name="Phasing", max_points=3, description="Is the rollout broken into phases or an MVP?"),
                Criterion(name="Feasibility", max_points=3, description="Are resources and dependencies considered?"),
                Criterion(name="Risks", max_points=2, description="Are risks and mitigations identified?"),
                Criterion(name="Timeline", max_points=2, description="Is there a realistic timeline?"),
            ],
        ),
        RubricSection(
            key="success_metrics",
            title="Success Metrics",
            marker="Success Metrics",
            keyword="metric",
            guidance="Name a primary metric, supporting metrics and guardrails, with targets.",
            criteria=[
                Criterion(name="Primary metric", max_points=3, description="Is a primary success metric defined?"),
                Criterion(name="Supporting metrics", max_points=3, description="Are secondary and guardrail metrics included?"),
                Criterion(name="Targets", max_points=2, description="Are targets or baselines given?"),
                Criterion(name="Link to goal", max_points=2, description="Do metrics reflect the stated goal?"),
            ],
        ),
    ],
)

FOCUS = """A strong product answer understands the problem before solving it, focuses on a well-chosen user segment, weighs alternative solutions, plans a realistic rollout, and defines how success will be measured."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
