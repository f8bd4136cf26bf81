import pytest


@pytest.fixture(autouse=True)
def no_config_file(monkeypatch, tmp_path):
    """Keep a local config/resume_match.yaml from leaking into tests"""
    monkeypatch.setenv('RESUME_MATCH_CONFIG', str(tmp_path / 'missing.yaml'))


@pytest.fixture
def job_description():
    return "Looking for cloud platform experience, databases, and team leadership."


@pytest.fixture
def resume_sections():
    return {'experience': "I have databases and team leadership experience."}


@pytest.fixture
def skill_words():
    return [
        'python', 'django', 'flask', 'docker', 'kubernetes', 'terraform',
        'jenkins', 'postgresql', 'mongodb', 'redis', 'kafka', 'graphql',
        'react', 'typescript', 'leadership', 'mentoring', 'communication',
        'agile', 'scrum', 'analytics', 'finance', 'marketing',
    ]
