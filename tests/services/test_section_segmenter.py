import pytest

from interview_coach.prompts.builder import get_rubric
from interview_coach.services.section_segmenter import LineSegmenter, MarkerSegmenter, SectionSegmenter
from tests.helper import CIRCLES_TRANSCRIPT


def test_locate_not_implemented():
    tested = SectionSegmenter()
    with pytest.raises(Exception) as e:
        _ = tested.locate("text", "marker")
    expected = "NotImplementedError"
    assert e.typename == expected


def test_marker_segmenter_circles():
    tested = MarkerSegmenter()
    result = tested.split(CIRCLES_TRANSCRIPT, get_rubric("circles").sections)
    expected = {
        "comprehend": "We have a messaging app losing users.",
        "identify": "Teenagers.",
        "report": "They want speed.",
        "cut": "Speed first.",
        "list": "Voice notes.",
        "evaluate": "High impact, high cost.",
        "summarize": "Ship voice notes.",
    }
    assert result == expected


def test_marker_segmenter_missing_and_out_of_order():
    tested = MarkerSegmenter()
    result = tested.split("Task: fix onboarding. Situation: churn was high.", get_rubric("star").sections)
    expected = {
        "situation": "churn was high.",
        "task": "fix onboarding.",
        "action": "",
        "result": "",
    }
    assert result == expected


def test_marker_segmenter_is_case_sensitive():
    tested = MarkerSegmenter()
    result = tested.split("situation: lower case marker", get_rubric("star").sections)
    assert result["situation"] == ""


def test_marker_segmenter_empty_transcript():
    tested = MarkerSegmenter()
    result = tested.split("", get_rubric("jtbd").sections)
    assert set(result.values()) == {""}
    assert list(result.keys()) == [section.key for section in get_rubric("jtbd").sections]


def test_inline_marker_handling():
    transcript = "Comprehend: the Identify step matters\nIdentify: teens"
    sections = get_rubric("circles").sections

    result = MarkerSegmenter().split(transcript, sections)
    assert result["comprehend"] == "the"
    assert result["identify"] == "step matters\nIdentify: teens"

    result = LineSegmenter().split(transcript, sections)
    assert result["comprehend"] == "the Identify step matters"
    assert result["identify"] == "teens"


def test_line_segmenter_accepts_bullets_and_headings():
    transcript = "## Situation\nWe were late.\n- Task: ship on time\n**Action**: cut scope"
    result = LineSegmenter().split(transcript, get_rubric("star").sections)
    expected = {
        "situation": "We were late.",
        "task": "ship on time",
        "action": "cut scope",
        "result": "",
    }
    assert result == expected
