import re
from typing import List, Optional
from models.resume_models import JobMatch
from services.text_normalizer import clamp, is_blank, round_half_up
import logging

logger = logging.getLogger(__name__)

NO_JOB_DESCRIPTION = "No job description provided"
MIN_TOKEN_LENGTH = 3

_NON_WORD = re.compile(r'\W+')


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercased word tokens of three or more characters"""
    return [token for token in _NON_WORD.split((text or "").lower())
            if len(token) >= MIN_TOKEN_LENGTH]


class KeywordJobMatcher:
    def not_provided(self) -> JobMatch:
        return JobMatch(score=0, details=NO_JOB_DESCRIPTION)

    def match(self, resume_text: str, job_description: Optional[str]) -> JobMatch:
        """
        Share of job description words (duplicates counted) that also
        appear somewhere in the resume.
        """
        if is_blank(job_description):
            return self.not_provided()

        resume_words = set(tokenize(resume_text))
        job_words = tokenize(job_description)

        if not resume_words:
            return JobMatch(score=0, details="Resume text has no comparable keywords")
        if not job_words:
            return JobMatch(score=0, details="Job description has no comparable keywords")

        matched = [word for word in job_words if word in resume_words]
        score = clamp(round_half_up(len(matched) / len(job_words) * 100))
        logger.info(f"Keyword job match {score}% ({len(matched)}/{len(job_words)})")

        return JobMatch(
            score=score,
            details=f"Keyword match: {len(matched)}/{len(job_words)} words matched"
        )
