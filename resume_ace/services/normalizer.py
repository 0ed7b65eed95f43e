"""
Turns raw model output into the response shapes the API returns.

The model is asked for JSON but nothing guarantees it. Every function here
returns a well-formed response: either the parsed fields (strict path) or a
deterministic best-effort result (fallback path). None of them raise.
"""
import json
import logging
import math
import re
from numbers import Number
from typing import Any, Dict, List, Optional

from resume_ace.schemas.ats import AtsCheckResponse
from resume_ace.schemas.cover_letter import CoverLetterResponse

logger = logging.getLogger(__name__)

DEFAULT_ATS_SCORE = 70
ATS_FALLBACK_FINDINGS = ["Analysis completed"]
ATS_FALLBACK_SUGGESTIONS = ["Consider reviewing the resume format"]

COVER_LETTER_FALLBACK_HIGHLIGHTS = {
    "resume": ["Letter generated based on your resume and job description"],
    "text": ["Letter generated based on your background and job description"],
}
COVER_LETTER_FALLBACK_IMPROVEMENTS = ["Consider reviewing and personalizing the generated content"]

# ASCII digits only; capped below the int() string-conversion limit
_FIRST_INTEGER = re.compile(r"[0-9]{1,4000}")
_LINE_BREAKS = re.compile(r"[\r\n]+")


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not allowed")


def _parse_object(raw: str) -> Optional[Dict[str, Any]]:
    """Strict JSON parse; anything other than a JSON object counts as a failure."""
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"Model response is not valid JSON: {e}")
        return None
    if not isinstance(parsed, dict):
        logger.warning(f"Model response is JSON but not an object: {type(parsed).__name__}")
        return None
    return parsed


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item if isinstance(item, str) else json.dumps(item) for item in value]


def _valid_score(value: Any) -> bool:
    if not isinstance(value, Number) or isinstance(value, bool) or not value:
        return False
    return isinstance(value, int) or math.isfinite(value)


def normalize_ats_response(raw: str) -> AtsCheckResponse:
    """
    Build an ATS result from model output.

    Strict path: a JSON object with a truthy numeric ``score`` and a list
    ``suggestions``; ``findings`` defaults to an empty list.

    Fallback: the first integer in the raw text becomes the score (70 when
    there is none) with fixed findings and suggestions.
    """
    parsed = _parse_object(raw)
    if parsed is not None:
        if _valid_score(parsed.get("score")) and isinstance(parsed.get("suggestions"), list):
            return AtsCheckResponse(
                score=parsed["score"],
                findings=_string_list(parsed.get("findings")),
                suggestions=_string_list(parsed["suggestions"]),
            )
        logger.warning("Invalid response format from AI: missing score or suggestions")

    match = _FIRST_INTEGER.search(raw or "")
    score = int(match.group(0)) if match else DEFAULT_ATS_SCORE
    logger.info(f"Using ATS fallback result (score={score})")
    return AtsCheckResponse(
        score=score,
        findings=list(ATS_FALLBACK_FINDINGS),
        suggestions=list(ATS_FALLBACK_SUGGESTIONS),
    )


def normalize_cover_letter_response(raw: str, source: str = "resume") -> CoverLetterResponse:
    """
    Build a cover letter result from model output.

    Strict path: a JSON object with a non-empty ``coverLetter`` string.
    Fallback: the whole response, line breaks collapsed, is the letter, plus
    fixed highlights and improvement notes.

    Args:
        raw: Model output
        source: "resume" or "text", selects the fallback highlight wording
    """
    parsed = _parse_object(raw)
    if parsed is not None:
        letter = parsed.get("coverLetter")
        if isinstance(letter, str) and letter:
            return CoverLetterResponse(cover_letter=letter)
        logger.warning("Invalid response format from AI: missing coverLetter")

    logger.info(f"Using cover letter fallback result (source={source})")
    return CoverLetterResponse(
        cover_letter=_LINE_BREAKS.sub("\n", raw or "").strip(),
        highlights=list(COVER_LETTER_FALLBACK_HIGHLIGHTS.get(source, COVER_LETTER_FALLBACK_HIGHLIGHTS["resume"])),
        suggested_improvements=list(COVER_LETTER_FALLBACK_IMPROVEMENTS),
    )
