from typing import List

from fastapi import APIRouter

from interview_coach.models.evaluate import DetectFrameworkRequest, DetectFrameworkResponse, FrameworkInfo
from interview_coach.prompts.builder import all_rubrics, get_rubric
from interview_coach.services.framework_router import detect_framework

router = APIRouter()


@router.get("/frameworks", response_model=List[FrameworkInfo])
async def list_frameworks():
    return [
        FrameworkInfo(framework=framework, display_name=rubric.display_name, sections=rubric.section_titles)
        for framework, rubric in all_rubrics().items()
    ]


@router.post("/frameworks/detect", response_model=DetectFrameworkResponse)
async def detect(request: DetectFrameworkRequest):
    """Guess the framework a transcript was written with"""
    framework = detect_framework(request.transcript)
    return DetectFrameworkResponse(framework=framework, display_name=get_rubric(framework).display_name)
