import json

import pytest

from resume_match.ats import (
    analyze, ResumeAnalyzer, AnalysisInput, CategoryDictionary,
    InvalidInputError, ComputationError
)
from resume_match.ats.tokenizer import unique_keywords


def test_scenario_cloud_platform(job_description, resume_sections):
    result = analyze(resume_sections, job_description)

    matched = {k.text: k for k in result.matched_keywords}
    missing = {k.text: k for k in result.missing_keywords}

    assert 'cloud' in missing
    assert 'platform' in missing
    assert 'databases' in matched
    assert 'leadership' in matched
    assert matched['leadership'].category == 'Soft Skills'
    assert matched['databases'].category == 'Technical Skills'

    # 4 shared keywords out of 7 unique
    assert result.match_score == 57
    assert result.section_scores == {'experience': 57}


@pytest.mark.parametrize('sections, job', [
    ({'experience': "I have databases and team leadership experience."},
     "Looking for cloud platform experience, databases, and team leadership."),
    ({'summary': 'Python developer', 'skills': 'python, sql, sql'},
     "Python python PYTHON developer with SQL and Kubernetes; kubernetes required."),
    ({'notes': 'nothing relevant here at all'}, "Senior accountant, CPA preferred."),
    ({'skills': 'a an the'}, "Data engineer"),
])
def test_matched_and_missing_partition_job_keywords(sections, job):
    result = analyze(sections, job)
    matched = [k.text for k in result.matched_keywords]
    missing = [k.text for k in result.missing_keywords]

    assert not set(matched) & set(missing)
    assert len(matched) == len(set(matched))
    assert len(missing) == len(set(missing))
    assert set(matched) | set(missing) == set(unique_keywords(job))

    for score in (result.match_score, result.ats_score, *result.section_scores.values()):
        assert isinstance(score, int)
        assert 0 <= score <= 100


def test_full_resume_scores_100(skill_words):
    job = ' '.join(skill_words)
    sections = {
        'summary': ' '.join(skill_words[:5]),
        'experience': ' '.join(skill_words[5:11]),
        'education': 'computer science degree',
        'skills': ' '.join(skill_words[11:]),
    }
    result = analyze(sections, job)

    assert len(result.matched_keywords) == 22
    assert result.missing_keywords == []
    assert result.ats_score == 100


def test_ats_score_without_sections_or_matches():
    result = analyze({'notes': 'gardening'}, 'Senior accountant')
    assert result.ats_score == 65
    assert result.match_score == 0


def test_idempotent(job_description, resume_sections):
    first = analyze(resume_sections, job_description)
    second = analyze(resume_sections, job_description)
    assert first == second
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


@pytest.mark.parametrize('job', ['', None, '   \n'])
def test_empty_job_description_rejected(job, resume_sections):
    with pytest.raises(InvalidInputError):
        analyze(resume_sections, job)


@pytest.mark.parametrize('sections', [{}, None, {'summary': '   '}, {'a': '', 'b': None}])
def test_empty_resume_rejected(sections, job_description):
    with pytest.raises(InvalidInputError):
        analyze(sections, job_description)


def test_non_text_section_rejected(job_description):
    with pytest.raises(InvalidInputError):
        analyze({'summary': 42}, job_description)


def test_unexpected_failure_wrapped(job_description, resume_sections, monkeypatch):
    analyzer = ResumeAnalyzer()

    def boom(*args, **kwargs):
        raise KeyError('broken')

    monkeypatch.setattr(analyzer.section_scorer, 'score_sections', boom)

    with pytest.raises(ComputationError) as excinfo:
        analyzer.analyze(resume_sections, job_description)
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_custom_categories(job_description, resume_sections):
    categories = CategoryDictionary([('Cloud', ['cloud', 'platform'])])
    result = ResumeAnalyzer(categories).analyze(resume_sections, job_description)

    assert result.keyword_categories['Cloud'] == ['cloud', 'platform']
    assert all(k.category == 'Other' for k in result.matched_keywords)


def test_keyword_categories_cover_job_keywords(job_description, resume_sections):
    result = analyze(resume_sections, job_description)
    grouped = [kw for kws in result.keyword_categories.values() for kw in kws]
    assert sorted(grouped) == sorted(unique_keywords(job_description))


def test_analyze_input(job_description):
    data = {
        'resumeSections': {'experience': {'content': 'databases and leadership'}},
        'jobDescription': job_description,
    }
    result = ResumeAnalyzer().analyze_input(AnalysisInput.from_dict(data))
    assert {k.text for k in result.matched_keywords} == {'databases', 'leadership'}


def test_unicode_whitespace_in_resume():
    result = analyze({'skills': 'kubernetes\u00a0docker'}, 'Kubernetes and Docker experience')
    assert {k.text for k in result.matched_keywords} == {'kubernetes', 'docker'}


def test_non_string_job_description_rejected(resume_sections):
    with pytest.raises(InvalidInputError):
        analyze(resume_sections, 42)
