# resume_match/ats/analyzer.py
import logging
from typing import Dict, Mapping, Optional

from resume_match.ats.errors import InvalidInputError, ComputationError, ResumeMatchError
from resume_match.ats.models import AnalysisInput, AnalysisResult
from resume_match.ats.tokenizer import keyword_set, unique_keywords
from resume_match.ats.categories import CategoryDictionary, CategoryClassifier
from resume_match.ats.matcher import KeywordMatcher
from resume_match.ats.scorer import similarity, ATSScorer, SectionScorer
from resume_match.ats.recommendations import RecommendationGenerator

logger = logging.getLogger(__name__)


class ResumeAnalyzer:
    """
    Compare resume sections against a job description

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, categories: CategoryDictionary = None):
        self.classifier = CategoryClassifier(categories)
        self.matcher = KeywordMatcher(self.classifier)
        self.ats_scorer = ATSScorer()
        self.section_scorer = SectionScorer()
        self.recommender = RecommendationGenerator()

    def analyze(
        self,
        resume_sections: Mapping[str, str],
        job_description_text: Optional[str]
    ) -> AnalysisResult:
        """
        Analyze resume sections against a job description

        Args:
            resume_sections: Section name -> plain text
            job_description_text: Job description plain text

        Returns:
            AnalysisResult

        Raises:
            InvalidInputError: job description or resume content is empty
            ComputationError: anything unexpected inside the pipeline
        """
        sections = self._validate(resume_sections, job_description_text)

        try:
            return self._run(sections, job_description_text)
        except ResumeMatchError:
            raise
        except Exception as exc:
            raise ComputationError(f"Resume analysis failed: {exc}") from exc

    def analyze_input(self, analysis_input: AnalysisInput) -> AnalysisResult:
        return self.analyze(analysis_input.resume_sections, analysis_input.job_description_text)

    def _validate(
        self,
        resume_sections: Mapping[str, str],
        job_description_text: Optional[str]
    ) -> Dict[str, str]:
        if not isinstance(job_description_text, str):
            raise InvalidInputError("Job description text is required")
        if not job_description_text.strip():
            raise InvalidInputError("Job description text is empty")

        if not resume_sections or not isinstance(resume_sections, Mapping):
            raise InvalidInputError("Resume sections are required")

        sections = {}
        for name, content in resume_sections.items():
            if content is None:
                content = ''
            if not isinstance(content, str):
                raise InvalidInputError(f"Section '{name}' content must be text")
            sections[str(name)] = content

        if not any(content.strip() for content in sections.values()):
            raise InvalidInputError("Resume sections are empty")

        return sections

    def _run(self, sections: Dict[str, str], job_text: str) -> AnalysisResult:
        resume_text = ' '.join(sections.values())

        job_keywords = unique_keywords(job_text)
        job_set = frozenset(job_keywords)
        resume_set = keyword_set(resume_text)
        logger.debug(f"Job keywords: {len(job_set)}, resume keywords: {len(resume_set)}")

        keyword_categories = self.classifier.classify(job_keywords)
        matched, missing = self.matcher.match_keywords(resume_set, job_keywords, job_text)

        match_score = similarity(resume_set, job_set)
        ats_score = self.ats_scorer.score(sections.keys(), len(matched))
        section_scores = self.section_scorer.score_sections(sections, job_set)

        result = AnalysisResult(
            match_score=match_score,
            ats_score=ats_score,
            matched_keywords=matched,
            missing_keywords=missing,
            section_scores=section_scores,
            overall_suggestions=self.recommender.overall_suggestions(),
            section_recommendations=self.recommender.section_recommendations(sections.keys()),
            metrics=[],
            keyword_categories=keyword_categories,
            section_details=self.recommender.section_details(section_scores),
            keyword_suggestions=self.recommender.keyword_suggestions(missing),
        )
        result.metrics = self.recommender.metrics(
            match_score, ats_score, len(missing), result.strongest_section
        )

        logger.debug(f"Match score {match_score}, ATS score {ats_score}")
        return result


_default_analyzer = ResumeAnalyzer()


def analyze(
    resume_sections: Mapping[str, str],
    job_description_text: Optional[str]
) -> AnalysisResult:
    """Analyze with the built-in category dictionary"""
    return _default_analyzer.analyze(resume_sections, job_description_text)
