"""
Prompt templates for the three generation tasks.

User-supplied text (résumé, job description, skills) is interpolated as-is.
Nothing here guards against prompt injection; callers get whatever the model
returns and the normalizer only enforces the response shape.
"""
from enum import Enum
from typing import Optional


class TaskKind(str, Enum):
    ATS_SCORE = "ats_score"
    COVER_LETTER_RESUME = "cover_letter_resume"
    COVER_LETTER_TEXT = "cover_letter_text"


ATS_PROMPT = """You are an ATS (Applicant Tracking System) expert. Analyze this resume and provide:
1. A score from 0-100 based on ATS compatibility
2. Key findings about the resume's ATS-friendliness
3. Specific suggestions for improvement

Resume content:
{resume_text}

Provide the response in the following JSON format only:
{{
  "score": number,
  "findings": [string],
  "suggestions": [string]
}}"""

_COVER_LETTER_RULES = """The cover letter should:
1. Be tailored to the specific job
2. Highlight relevant experience from the {source}
3. Show enthusiasm for the role
4. Be professional but personable
5. Be around 300-400 words"""

_COVER_LETTER_FORMAT = """Provide the response in the following JSON format only:
{{
  "coverLetter": string (the complete cover letter)
}}"""

COVER_LETTER_RESUME_PROMPT = (
    "You are a professional cover letter writer. Using the provided resume and job description, "
    "create a compelling cover letter. "
    + _COVER_LETTER_RULES.format(source="resume")
    + """

Resume content:
{resume_text}

Job Description:
{job_description}

"""
    + _COVER_LETTER_FORMAT
)

COVER_LETTER_TEXT_PROMPT = (
    "You are a professional cover letter writer. Using the provided skills/experience and job "
    "description, create a compelling cover letter. "
    + _COVER_LETTER_RULES.format(source="provided background")
    + """

Candidate's Skills and Experience: {skills_experience}
Job Description: {job_description}

"""
    + _COVER_LETTER_FORMAT
)


def _require(value: Optional[str], name: str, task: TaskKind) -> str:
    if not value:
        raise ValueError(f"{name} is required for {task.value} prompts")
    return value


def build_prompt(
    task: TaskKind,
    resume_text: Optional[str] = None,
    job_description: Optional[str] = None,
    skills_experience: Optional[str] = None,
) -> str:
    """
    Fill the fixed template for a task.

    Args:
        task: Which template to use
        resume_text: Extracted résumé text (ATS and résumé cover letter)
        job_description: Target job description (both cover letter tasks)
        skills_experience: Free-text background (text cover letter)

    Returns:
        Prompt string asking for a strictly-JSON answer
    """
    if task is TaskKind.ATS_SCORE:
        return ATS_PROMPT.format(resume_text=_require(resume_text, "resume_text", task))

    if task is TaskKind.COVER_LETTER_RESUME:
        return COVER_LETTER_RESUME_PROMPT.format(
            resume_text=_require(resume_text, "resume_text", task),
            job_description=_require(job_description, "job_description", task),
        )

    if task is TaskKind.COVER_LETTER_TEXT:
        return COVER_LETTER_TEXT_PROMPT.format(
            skills_experience=_require(skills_experience, "skills_experience", task),
            job_description=_require(job_description, "job_description", task),
        )

    raise ValueError(f"Unknown task: {task}")
