from interview_coach.models.rubric import FrameworkRubric


def get_system_instruction(rubric: FrameworkRubric) -> str:
    return f"""You are a senior product manager who coaches candidates for product management interviews. You write model answers that would score 9-10 on every section of the {rubric.display_name} rubric. You are concrete: you use specific examples, data, metrics and clear steps."""


def get_ideal_response_prompt(rubric: FrameworkRubric, question_text: str) -> str:
    """
    Generate the prompt asking for a model answer.
    Each section must open with its marker so the answer can be segmented and scored.
    """
    section_lines = "\n".join(
        f"- Start the section with \"{section.marker}:\" and cover: {section.guidance}"
        for section in rubric.sections
    )

    return f"""Write an ideal answer to the following interview question using the {rubric.display_name} framework.

    QUESTION:
    {question_text}

    STRUCTURE (use the sections in this exact order):
    {section_lines}

    Write in the first person, as the candidate speaking. Keep each section between 80 and 150 words.
    Return ONLY the answer text (no headings other than the section labels, no commentary)."""
