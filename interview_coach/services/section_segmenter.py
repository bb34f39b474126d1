import re
from typing import Dict, List, Optional, Sequence, Tuple

from interview_coach.models.rubric import RubricSection

_LEADING_PUNCTUATION = re.compile(r"^[\s:\-]+")


def _clean_span(span: str) -> str:
    return _LEADING_PUNCTUATION.sub("", span).strip()


class SectionSegmenter:
    """Splits a transcript into one text span per rubric section"""

    def locate(self, transcript: str, marker: str) -> Optional[Tuple[int, int]]:
        """Return (start, end) of the text that opens a section, or None."""
        raise NotImplementedError()

    def split(self, transcript: str, sections: Sequence[RubricSection]) -> Dict[str, str]:
        spans = {section.key: "" for section in sections}

        found: List[Tuple[int, int, RubricSection]] = []
        for section in sections:
            location = self.locate(transcript, section.marker)
            if location is not None:
                found.append((location[0], location[1], section))
        found.sort(key=lambda item: item[0])

        for index, (_, marker_end, section) in enumerate(found):
            span_end = found[index + 1][0] if index + 1 < len(found) else len(transcript)
            if span_end <= marker_end:
                continue
            spans[section.key] = _clean_span(transcript[marker_end:span_end])

        return spans


class MarkerSegmenter(SectionSegmenter):
    """
    Case-sensitive substring search for the first occurrence of each marker.

    A marker mentioned inside another section's prose still opens a new
    section here; use LineSegmenter when that matters.
    """

    def locate(self, transcript: str, marker: str) -> Optional[Tuple[int, int]]:
        start = transcript.find(marker)
        if start < 0:
            return None
        return start, start + len(marker)


class LineSegmenter(SectionSegmenter):
    """Only accepts markers at the start of a line (after optional bullets or heading marks)."""

    def locate(self, transcript: str, marker: str) -> Optional[Tuple[int, int]]:
        pattern = re.compile(rf"^[ \t#*\-]*{re.escape(marker)}\**", re.MULTILINE)
        match = pattern.search(transcript)
        if not match:
            return None
        return match.start(), match.end()
