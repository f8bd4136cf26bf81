# resume_match/ats/models.py
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Optional, Union, Any, Mapping
from enum import Enum

from resume_match.ats.errors import InvalidInputError


class Importance(Enum):
    """How central a keyword is to the job description"""
    HIGH = "high"       # 5+ occurrences
    MEDIUM = "medium"   # 2-4 occurrences
    LOW = "low"         # 0-1 occurrences


class MatchLevel(Enum):
    """Overall match band"""
    EXCELLENT = "excellent"
    GOOD = "good"
    AVERAGE = "average"
    LOW = "low"


class SectionStatus(Enum):
    """Section recommendation status"""
    EXCELLENT = "excellent"
    GOOD = "good"
    IMPROVE = "improve"
    MISSING = "missing"


MATCH_LEVEL_INFO = {
    MatchLevel.EXCELLENT: (
        "Excellent Match",
        "Your resume is highly aligned with this job description!"
    ),
    MatchLevel.GOOD: (
        "Good Match",
        "Your resume aligns well with this job. A few tweaks could improve your chances."
    ),
    MatchLevel.AVERAGE: (
        "Average Match",
        "Your resume partially matches this job. Consider updating it based on our suggestions."
    ),
    MatchLevel.LOW: (
        "Low Match",
        "Your resume needs significant updates to match this job description."
    ),
}


@dataclass(frozen=True)
class Keyword:
    """A job description keyword with its category and importance"""
    text: str
    category: str
    importance: Importance

    def to_dict(self) -> Dict[str, str]:
        return {
            'text': self.text,
            'category': self.category,
            'importance': self.importance.value,
        }


@dataclass
class Metric:
    """Named value shown alongside the scores"""
    name: str
    value: Union[int, str]
    description: str
    static: bool = False  # True for placeholders that are not computed

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Suggestion:
    """Keyword-driven improvement suggestion"""
    title: str
    text: str
    priority: str  # "high", "medium", "low"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class SectionRecommendation:
    """Structured recommendation for one canonical resume section"""
    section: str
    title: str
    status: SectionStatus
    feedback: str
    suggestions: List[str] = field(default_factory=list)
    example: Optional[Dict[str, str]] = None  # before/after or context/content

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['status'] = self.status.value
        if self.example is None:
            del data['example']
        return data


@dataclass
class AnalysisInput:
    """Resume sections plus the target job description"""
    resume_sections: Dict[str, str]
    job_description_text: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AnalysisInput':
        """
        Build input from a request-style mapping.

        Section values may be plain strings or ``{"content": text}`` objects.
        """
        raw_sections = data.get('resumeSections', data.get('resume_sections')) or {}
        if not isinstance(raw_sections, Mapping):
            raise InvalidInputError("resumeSections must be a mapping of section name to text")

        sections = {}
        for name, value in raw_sections.items():
            if isinstance(value, Mapping):
                value = value.get('content') or ''
            sections[str(name)] = value

        job_text = data.get('jobDescriptionText', data.get('job_description_text'))
        if job_text is None:
            job_text = data.get('jobDescription')

        return cls(resume_sections=sections, job_description_text=job_text)

    @property
    def resume_text(self) -> str:
        """All section texts flattened into one string"""
        return ' '.join(text or '' for text in self.resume_sections.values())


@dataclass
class AnalysisResult:
    """Complete output of a resume/job description analysis"""
    match_score: int                       # 0-100
    ats_score: int                         # 0-100
    matched_keywords: List[Keyword]
    missing_keywords: List[Keyword]
    section_scores: Dict[str, int]
    overall_suggestions: List[str]
    section_recommendations: Dict[str, str]
    metrics: List[Metric]

    # Detailed analysis
    keyword_categories: Dict[str, List[str]] = field(default_factory=dict)
    section_details: List[SectionRecommendation] = field(default_factory=list)
    keyword_suggestions: List[Suggestion] = field(default_factory=list)

    @property
    def match_level(self) -> MatchLevel:
        if self.match_score >= 80:
            return MatchLevel.EXCELLENT
        elif self.match_score >= 60:
            return MatchLevel.GOOD
        elif self.match_score >= 40:
            return MatchLevel.AVERAGE
        else:
            return MatchLevel.LOW

    @property
    def match_label(self) -> str:
        return MATCH_LEVEL_INFO[self.match_level][0]

    @property
    def match_description(self) -> str:
        return MATCH_LEVEL_INFO[self.match_level][1]

    @property
    def strongest_section(self) -> Optional[str]:
        """Section with the highest score (first one wins on ties)"""
        best_name, best_score = None, 0
        for name, score in self.section_scores.items():
            if score > best_score:
                best_name, best_score = name, score
        return best_name

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable representation for callers"""
        return {
            'matchScore': self.match_score,
            'atsScore': self.ats_score,
            'matchLevel': self.match_level.value,
            'matchLabel': self.match_label,
            'matchedKeywords': [k.to_dict() for k in self.matched_keywords],
            'missingKeywords': [k.to_dict() for k in self.missing_keywords],
            'keywordCategories': {c: list(kws) for c, kws in self.keyword_categories.items()},
            'sectionScores': dict(self.section_scores),
            'overallSuggestions': list(self.overall_suggestions),
            'keywordSuggestions': [s.to_dict() for s in self.keyword_suggestions],
            'sectionRecommendations': dict(self.section_recommendations),
            'sectionDetails': [r.to_dict() for r in self.section_details],
            'metrics': [m.to_dict() for m in self.metrics],
        }
