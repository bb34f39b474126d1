from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.CIRCLES,
    display_name="CIRCLES",
    evaluator_role="an expert product management interviewer",
    sections=[
        RubricSection(
            key="comprehend",
            title="Comprehend the Situation",
            marker="Comprehend",
            guidance="Restate the goal, clarify constraints, and describe the product's current state and market trends.",
            criteria=[
                Criterion(name="Clarifying the goal", max_points=3, description="Is the objective of the exercise restated and clarified?"),
                Criterion(name="Context and constraints", max_points=3, description="Are the product's current state, market and constraints described?"),
                Criterion(name="Assumptions", max_points=2, description="Are assumptions made explicit?"),
                Criterion(name="Relevance to the question", max_points=2, description="Does the framing match the question asked?"),
            ],
        ),
        RubricSection(
            key="identify",
            title="Identify the Customer",
            marker="Identify",
            guidance="Pick one key user segment and describe its characteristics and behaviors.",
            criteria=[
                Criterion(name="Segment choice", max_points=3, description="Is a specific customer segment chosen?"),
                Criterion(name="Persona detail", max_points=3, description="Are the segment's characteristics and behaviors described?"),
                Criterion(name="Justification", max_points=2, description="Is the choice of segment justified?"),
                Criterion(name="Focus", max_points=2, description="Does the answer stay with the chosen segment?"),
            ],
        ),
        RubricSection(
            key="report",
            title="Report Customer Needs",
            marker="Report",
            guidance="List the segment's needs and pain points as user stories or use cases.",
            criteria=[
                Criterion(name="Needs identified", max_points=3, description="Are the customer's needs clearly stated?"),
                Criterion(name="Pain points", max_points=3, description="Are specific pain points or frustrations described?"),
                Criterion(name="Evidence", max_points=2, description="Are needs grounded in observation or data?"),
                Criterion(name="Breadth", max_points=2, description="Are several distinct needs covered?"),
            ],
        ),
        RubricSection(
            key="cut",
            title="Cut Through Prioritization",
            marker="Cut",
            guidance="Rank the needs by impact and explain the criteria you used to cut.",
            criteria=[
                Criterion(name="Prioritization criteria", max_points=3, description="Are explicit criteria (impact, effort, reach) used?"),
                Criterion(name="Clear ranking", max_points=3, description="Is a top priority clearly chosen?"),
                Criterion(name="Rationale", max_points=2, description="Is the ranking explained?"),
                Criterion(name="Trade-off awareness", max_points=2, description="Does the candidate acknowledge what is deprioritized?"),
            ],
        ),
        RubricSection(
            key="list",
            title="List Solutions",
            marker="List",
            guidance="Offer at least three distinct solutions that address the prioritized need.",
            criteria=[
                Criterion(name="Number of solutions", max_points=3, description="Are multiple solutions proposed?"),
                Criterion(name="Creativity", max_points=3, description="Are the solutions original and varied?"),
                Criterion(name="Alignment with needs", max_points=2, description="Do the solutions address the prioritized need?"),
                Criterion(name="Clarity", max_points=2, description="Is each solution described clearly?"),
            ],
        ),
        RubricSection(
            key="evaluate",
            title="Evaluate Trade-offs",
            marker="Evaluate",
            guidance="Compare each solution's user impact against its cost and risk.",
            criteria=[
                Criterion(name="Pros and cons", max_points=3, description="Are advantages and drawbacks given for each solution?"),
                Criterion(name="Cost versus impact", max_points=3, description="Is effort weighed against user impact?"),
                Criterion(name="Risks", max_points=2, description="Are risks or dependencies considered?"),
                Criterion(name="Comparison", max_points=2, description="Are the solutions compared against each other?"),
            ],
        ),
        RubricSection(
            key="summarize",
            title="Summarize Recommendation",
            marker="Summarize",
            guidance="Recommend one solution, restate why it wins, and name the metric you would track.",
            criteria=[
                Criterion(name="Clear recommendation", max_points=3, description="Is one solution recommended?"),
                Criterion(name="Justification", max_points=3, description="Is the recommendation tied back to the need and trade-offs?"),
                Criterion(name="Success metrics", max_points=2, description="Is a way to measure success given?"),
                Criterion(name="Conciseness", max_points=2, description="Is the summary brief and decisive?"),
            ],
        ),
    ],
)

FOCUS = """A strong CIRCLES answer moves through Comprehend, Identify, Report, Cut, List, Evaluate and Summarize in order, with each step building on the previous one. Reward a single clearly chosen customer segment, explicit prioritization and a decisive recommendation backed by trade-offs."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
