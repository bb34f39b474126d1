from enum import Enum
from typing import Optional


class Framework(str, Enum):
    """
    Evaluation framework identifiers
    """
    STAR = "star"
    CIRCLES = "circles"
    DESIGN_THINKING = "design_thinking"
    JTBD = "jtbd"
    USER_CENTRIC = "user_centric"
    GENERIC = "generic"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Framework":
        """Resolve a caller supplied identifier, falling back to GENERIC."""
        if isinstance(value, Framework):
            return value
        if not value:
            return cls.GENERIC

        normalized = value.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(normalized)
        except ValueError:
            return cls.GENERIC


# Also the order in which transcripts are matched against framework keywords
PRODUCT_SENSE_FRAMEWORKS = (
    Framework.CIRCLES,
    Framework.DESIGN_THINKING,
    Framework.JTBD,
    Framework.USER_CENTRIC,
)
