# resume_match/ats/errors.py


class ResumeMatchError(Exception):
    """Base error for the matching engine"""


class InvalidInputError(ResumeMatchError, ValueError):
    """Job description or resume sections are missing/empty"""


class ComputationError(ResumeMatchError, RuntimeError):
    """Unexpected failure inside the scoring pipeline"""
