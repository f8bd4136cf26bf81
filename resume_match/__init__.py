# resume_match/__init__.py
"""
Resume matching and ATS scoring for the resume builder
"""

from resume_match.ats import analyze, ResumeAnalyzer, AnalysisResult
from resume_match.config import MatchConfig, get_config

__version__ = '0.1.0'

__all__ = [
    'analyze',
    'ResumeAnalyzer',
    'AnalysisResult',
    'MatchConfig',
    'get_config',
]
