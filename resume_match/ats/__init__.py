# resume_match/ats/__init__.py
"""
Resume to job description matching and ATS scoring
"""

from resume_match.ats.errors import ResumeMatchError, InvalidInputError, ComputationError
from resume_match.ats.models import (
    Keyword, Importance, Metric, Suggestion,
    SectionRecommendation, SectionStatus, MatchLevel,
    AnalysisInput, AnalysisResult
)
from resume_match.ats.tokenizer import tokenize, keyword_set, STOP_WORDS
from resume_match.ats.categories import (
    CategoryDictionary, CategoryClassifier, DEFAULT_CATEGORIES, OTHER_CATEGORY
)
from resume_match.ats.matcher import KeywordMatcher
from resume_match.ats.scorer import similarity, ATSScorer, SectionScorer
from resume_match.ats.recommendations import RecommendationGenerator
from resume_match.ats.analyzer import ResumeAnalyzer, analyze

__all__ = [
    'ResumeMatchError',
    'InvalidInputError',
    'ComputationError',
    'Keyword',
    'Importance',
    'Metric',
    'Suggestion',
    'SectionRecommendation',
    'SectionStatus',
    'MatchLevel',
    'AnalysisInput',
    'AnalysisResult',
    'tokenize',
    'keyword_set',
    'STOP_WORDS',
    'CategoryDictionary',
    'CategoryClassifier',
    'DEFAULT_CATEGORIES',
    'OTHER_CATEGORY',
    'KeywordMatcher',
    'similarity',
    'ATSScorer',
    'SectionScorer',
    'RecommendationGenerator',
    'ResumeAnalyzer',
    'analyze',
]
