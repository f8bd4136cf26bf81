# dashboard/api/analyze.py

import logging
from typing import Dict, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from dashboard.config import settings
from resume_match.config import get_config
from resume_match.ats import ResumeAnalyzer, InvalidInputError, ComputationError

logger = logging.getLogger(__name__)

router = APIRouter()

# Categories are loaded once and shared by every request
analyzer = ResumeAnalyzer(get_config().load_categories())


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_sections: Dict[str, str] = Field(default_factory=dict, alias="resumeSections")
    job_description: Optional[str] = Field(default=None, alias="jobDescription")


@router.post("/analyze")
def analyze_resume(request: AnalyzeRequest) -> Dict:
    """Analyze resume sections against a job description"""
    total_length = len(request.job_description or '') + sum(
        len(text) for text in request.resume_sections.values()
    )
    if total_length > settings.max_text_length:
        raise HTTPException(
            status_code=413,
            detail=f"Submitted text exceeds {settings.max_text_length} characters"
        )

    try:
        result = analyzer.analyze(request.resume_sections, request.job_description)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ComputationError:
        logger.exception("Resume analysis failed")
        raise HTTPException(status_code=500, detail="Failed to analyze resume")

    logger.info(f"Analysis complete: match={result.match_score} ats={result.ats_score}")
    return result.to_dict()
