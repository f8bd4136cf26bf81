# resume_match/config.py
import os
from dataclasses import dataclass, field
from typing import Dict, Optional
from pathlib import Path
import yaml

from resume_match.ats.categories import CategoryDictionary, DEFAULT_CATEGORIES


@dataclass
class MatchConfig:
    """Configuration for resume matching callers"""

    # Optional YAML file replacing the built-in category dictionary
    categories_path: Optional[Path] = None

    # Callers reject text longer than this (characters)
    max_text_length: int = 100_000

    # Resume heading (lowercase) -> section name
    section_aliases: Dict[str, str] = field(default_factory=lambda: {
        'summary': 'summary',
        'professional summary': 'summary',
        'profile': 'summary',
        'objective': 'summary',
        'about me': 'summary',
        'experience': 'experience',
        'work experience': 'experience',
        'professional experience': 'experience',
        'employment history': 'experience',
        'work history': 'experience',
        'education': 'education',
        'academic background': 'education',
        'skills': 'skills',
        'technical skills': 'skills',
        'core competencies': 'skills',
        'certifications': 'certifications',
        'licenses and certifications': 'certifications',
        'projects': 'projects',
        'awards': 'awards',
        'publications': 'publications',
        'volunteer experience': 'volunteer',
    })

    def __post_init__(self):
        if self.categories_path is not None:
            self.categories_path = Path(self.categories_path)
        self.section_aliases = {k.lower(): v for k, v in self.section_aliases.items()}

    def load_categories(self) -> CategoryDictionary:
        """Category dictionary to analyze with"""
        if self.categories_path is None:
            return DEFAULT_CATEGORIES
        return CategoryDictionary.from_yaml(self.categories_path)

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get('resume_match', {}))


def get_config() -> MatchConfig:
    """Get matching configuration"""
    config_path = os.getenv('RESUME_MATCH_CONFIG', 'config/resume_match.yaml')

    if os.path.exists(config_path):
        return MatchConfig.from_yaml(config_path)
    return MatchConfig()
