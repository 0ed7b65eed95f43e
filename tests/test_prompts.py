import pytest

from resume_ace.services.prompts import TaskKind, build_prompt


def test_ats_prompt_embeds_resume_and_json_contract():
    prompt = build_prompt(TaskKind.ATS_SCORE, resume_text="Jane Doe, Python developer")

    assert "Jane Doe, Python developer" in prompt
    assert '"score": number' in prompt
    assert '"suggestions": [string]' in prompt


def test_resume_cover_letter_prompt():
    prompt = build_prompt(
        TaskKind.COVER_LETTER_RESUME,
        resume_text="RESUME-TEXT",
        job_description="JD-TEXT",
    )

    assert "RESUME-TEXT" in prompt
    assert "JD-TEXT" in prompt
    assert "300-400 words" in prompt
    assert '"coverLetter"' in prompt


def test_text_cover_letter_prompt():
    prompt = build_prompt(
        TaskKind.COVER_LETTER_TEXT,
        job_description="JD-TEXT",
        skills_experience="SKILLS-TEXT",
    )

    assert "Candidate's Skills and Experience: SKILLS-TEXT" in prompt
    assert "Job Description: JD-TEXT" in prompt
    assert '"coverLetter"' in prompt


def test_braces_in_user_text_are_kept_verbatim():
    prompt = build_prompt(TaskKind.ATS_SCORE, resume_text="skills: {python} {0}")

    assert "skills: {python} {0}" in prompt


def test_missing_inputs_raise():
    with pytest.raises(ValueError):
        build_prompt(TaskKind.ATS_SCORE)
    with pytest.raises(ValueError):
        build_prompt(TaskKind.COVER_LETTER_RESUME, resume_text="x")
    with pytest.raises(ValueError):
        build_prompt(TaskKind.COVER_LETTER_TEXT, job_description="x")
