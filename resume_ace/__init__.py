"""Resume Ace API: ATS scoring and cover letter generation for uploaded résumés."""

__version__ = "1.0.0"
