from interview_coach.models.framework import Framework
from interview_coach.models.rubric import Criterion, FrameworkRubric, RubricSection
from interview_coach.prompts.common import render_system_instruction

RUBRIC = FrameworkRubric(
    framework=Framework.DESIGN_THINKING,
    display_name="Design Thinking",
    evaluator_role="an expert product design interviewer",
    sections=[
        RubricSection(
            key="empathize",
            title="Empathize",
            marker="Empathize",
            guidance="Describe how you would observe and interview users to understand their experience.",
            criteria=[
                Criterion(name="User research approach", max_points=3, description="Are concrete research methods (interviews, observation) described?"),
                Criterion(name="User insight", max_points=3, description="Are genuine user feelings and motivations uncovered?"),
                Criterion(name="Target users", max_points=2, description="Is it clear who is being studied?"),
                Criterion(name="Relevance", max_points=2, description="Is the research tied to the question's problem?"),
            ],
        ),
        RubricSection(
            key="define",
            title="Define",
            marker="Define",
            guidance="Turn your research into a single, user-centered problem statement.",
            criteria=[
                Criterion(name="Problem statement", max_points=3, description="Is there a clear, user-centered problem statement?"),
                Criterion(name="Grounding in research", max_points=3, description="Does the definition follow from the empathy findings?"),
                Criterion(name="Scope", max_points=2, description="Is the problem scoped appropriately?"),
                Criterion(name="Clarity", max_points=2, description="Is the statement concise and unambiguous?"),
            ],
        ),
        RubricSection(
            key="ideate",
            title="Ideate",
            marker="Ideate",
            guidance="Generate several diverse ideas before converging on the most promising one.",
            criteria=[
                Criterion(name="Breadth of ideas", max_points=3, description="Are multiple distinct ideas generated?"),
                Criterion(name="Creativity", max_points=3, description="Are the ideas original?"),
                Criterion(name="Convergence", max_points=2, description="Is a promising idea selected with reasons?"),
                Criterion(name="Fit to problem", max_points=2, description="Do ideas address the defined problem?"),
            ],
        ),
        RubricSection(
            key="prototype",
            title="Prototype",
            marker="Prototype",
            guidance="Describe the cheapest artifact that would let users react to the idea.",
            criteria=[
                Criterion(name="Prototype description", max_points=3, description="Is the prototype concretely described?"),
                Criterion(name="Fidelity choice", max_points=3, description="Is the level of fidelity appropriate and justified?"),
                Criterion(name="Speed and cost", max_points=2, description="Is the prototype quick and cheap to build?"),
                Criterion(name="Learning goal", max_points=2, description="Is it clear what the prototype should teach?"),
            ],
        ),
        RubricSection(
            key="test",
            title="Test",
            marker="Test",
            guidance="Explain how you would test with real users, what you would measure, and how you would iterate.",
            criteria=[
                Criterion(name="Testing method", max_points=3, description="Is a concrete user testing method described?"),
                Criterion(name="Success criteria", max_points=3, description="Are metrics or signals for success defined?"),
                Criterion(name="Iteration", max_points=2, description="Is there a plan to iterate on feedback?"),
                Criterion(name="Participants", max_points=2, description="Is it clear who tests the prototype?"),
            ],
        ),
    ],
)

FOCUS = """A strong Design Thinking answer stays anchored on real users: empathy research informs a crisp problem definition, ideation explores before it converges, and the prototype and test plan are designed to learn quickly. Reward evidence of iteration and penalize jumping straight to a solution."""


def get_system_instruction() -> str:
    return render_system_instruction(RUBRIC, FOCUS)
