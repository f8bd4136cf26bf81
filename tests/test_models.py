import pytest

from resume_match.ats.models import (
    AnalysisInput, AnalysisResult, Keyword, Importance, MatchLevel
)
from resume_match.ats.errors import InvalidInputError


def _result(match_score=0, section_scores=None):
    return AnalysisResult(
        match_score=match_score,
        ats_score=65,
        matched_keywords=[Keyword('python', 'Technical Skills', Importance.HIGH)],
        missing_keywords=[],
        section_scores=section_scores or {},
        overall_suggestions=[],
        section_recommendations={},
        metrics=[],
    )


@pytest.mark.parametrize('score, level', [
    (80, MatchLevel.EXCELLENT),
    (79, MatchLevel.GOOD),
    (60, MatchLevel.GOOD),
    (40, MatchLevel.AVERAGE),
    (39, MatchLevel.LOW),
])
def test_match_level(score, level):
    assert _result(score).match_level == level


def test_strongest_section():
    assert _result(section_scores={'summary': 10, 'skills': 40, 'other': 40}).strongest_section == 'skills'
    assert _result(section_scores={'summary': 0}).strongest_section is None


def test_keyword_is_immutable():
    keyword = Keyword('python', 'Technical Skills', Importance.LOW)
    with pytest.raises(AttributeError):
        keyword.text = 'java'


def test_to_dict_keys():
    data = _result(72).to_dict()
    assert data['matchScore'] == 72
    assert data['matchLevel'] == 'good'
    assert data['matchedKeywords'] == [
        {'text': 'python', 'category': 'Technical Skills', 'importance': 'high'}
    ]
    for key in ('atsScore', 'missingKeywords', 'sectionScores', 'overallSuggestions',
                'sectionRecommendations', 'metrics'):
        assert key in data


def test_input_from_dict():
    analysis_input = AnalysisInput.from_dict({
        'resumeSections': {'summary': 'Engineer', 'skills': {'content': 'Python'}},
        'jobDescriptionText': 'Python engineer',
    })
    assert analysis_input.resume_sections == {'summary': 'Engineer', 'skills': 'Python'}
    assert analysis_input.job_description_text == 'Python engineer'
    assert analysis_input.resume_text == 'Engineer Python'


def test_input_from_dict_rejects_non_mapping():
    with pytest.raises(InvalidInputError):
        AnalysisInput.from_dict({'resumeSections': ['summary'], 'jobDescription': 'x'})
