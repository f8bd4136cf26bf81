import pytest

from resume_match.config import MatchConfig, get_config
from resume_match.ats.categories import DEFAULT_CATEGORIES
from resume_match.ats.errors import ComputationError


def test_defaults_when_file_missing():
    config = get_config()
    assert config.max_text_length == 100_000
    assert config.categories_path is None
    assert config.load_categories() is DEFAULT_CATEGORIES


def test_from_env_yaml(tmp_path, monkeypatch):
    categories = tmp_path / 'categories.yaml'
    categories.write_text(
        "categories:\n"
        "  - name: Cloud\n"
        "    terms: [aws]\n"
    )
    config_file = tmp_path / 'resume_match.yaml'
    config_file.write_text(
        "resume_match:\n"
        "  max_text_length: 500\n"
        f"  categories_path: {categories}\n"
    )
    monkeypatch.setenv('RESUME_MATCH_CONFIG', str(config_file))

    config = get_config()
    assert config.max_text_length == 500
    assert config.load_categories().names == ('Cloud',)


def test_bad_categories_file(tmp_path):
    path = tmp_path / 'categories.yaml'
    path.write_text("categories: oops\n")
    with pytest.raises(ComputationError):
        MatchConfig(categories_path=path).load_categories()
