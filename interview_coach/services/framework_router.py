import logging
from typing import Dict, Tuple

from interview_coach.models.framework import PRODUCT_SENSE_FRAMEWORKS, Framework

# A framework matches when all of its keywords are present.
FRAMEWORK_KEYWORDS: Dict[Framework, Tuple[str, ...]] = {
    Framework.CIRCLES: ("Comprehend", "Identify", "List solutions"),
    Framework.DESIGN_THINKING: ("Empathize", "Define", "Ideate"),
    Framework.JTBD: ("Job", "Current Solutions", "Functional Requirements"),
    Framework.USER_CENTRIC: ("Context", "User Requirements", "Design Solution"),
}


def detect_framework(transcript: str) -> Framework:
    """Guess which product-sense framework a transcript follows."""
    for framework in PRODUCT_SENSE_FRAMEWORKS:
        if all(keyword in transcript for keyword in FRAMEWORK_KEYWORDS[framework]):
            logging.info(f"Detected framework: {framework.value}")
            return framework

    logging.info("No framework keywords matched, using generic product framework")
    return Framework.GENERIC
