"""
Boundary for the optional language-model collaborator.

The analyzer never calls the collaborator itself. The service layer runs
``collect_enrichment`` first and hands the resulting ``Enrichment`` to
``ResumeAnalyzer.analyze``; every call that fails is recorded as a fallback
outcome, so the deterministic path takes over for that piece only.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, Protocol, TypeVar

from models.resume_models import JobMatch, Suggestion
from services.text_normalizer import is_blank
import logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

ENRICHED = "enrichment"
FALLBACK = "fallback"


class ResumeEnricher(Protocol):
    def match_job_description(self, resume_text: str, job_description: str) -> JobMatch:
        ...

    def extract_skills(self, text: str) -> List[str]:
        ...

    def generate_suggestions(self, resume_text: str, job_description: str) -> List[Suggestion]:
        ...


@dataclass(frozen=True)
class EnrichmentOutcome(Generic[T]):
    source: str
    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def enriched(self) -> bool:
        return self.source == ENRICHED

    @classmethod
    def success(cls, value: T) -> "EnrichmentOutcome[T]":
        return cls(source=ENRICHED, value=value)

    @classmethod
    def fallback(cls, error: str) -> "EnrichmentOutcome[T]":
        return cls(source=FALLBACK, error=error)


@dataclass(frozen=True)
class Enrichment:
    job_match: EnrichmentOutcome[JobMatch] = field(
        default_factory=lambda: EnrichmentOutcome.fallback("not requested"))
    skills: EnrichmentOutcome[List[str]] = field(
        default_factory=lambda: EnrichmentOutcome.fallback("not requested"))
    suggestions: EnrichmentOutcome[List[Suggestion]] = field(
        default_factory=lambda: EnrichmentOutcome.fallback("not requested"))

    def sources(self) -> Dict[str, str]:
        return {
            "jobMatch": self.job_match.source,
            "skills": self.skills.source,
            "suggestions": self.suggestions.source,
        }


def _attempt(name: str, call: Callable[[], T], coerce: Callable[[T], T]) -> EnrichmentOutcome[T]:
    try:
        value = coerce(call())
    except Exception as e:
        logger.warning(f"Enrichment '{name}' failed, using fallback: {str(e)}")
        return EnrichmentOutcome.fallback(f"{type(e).__name__}: {e}")
    return EnrichmentOutcome.success(value)


def _as_job_match(value) -> JobMatch:
    if isinstance(value, JobMatch):
        return value
    return JobMatch.model_validate(value)


def _as_skill_list(value) -> List[str]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a list of skills, got {type(value).__name__}")
    return [str(skill) for skill in value]


def _as_suggestions(value) -> List[Suggestion]:
    if not isinstance(value, (list, tuple)):
        raise TypeError(f"expected a list of suggestions, got {type(value).__name__}")
    return [item if isinstance(item, Suggestion) else Suggestion.model_validate(item)
            for item in value]


def collect_enrichment(enricher: Optional[ResumeEnricher], resume_text: str,
                       job_description: Optional[str] = None) -> Enrichment:
    """
    Run each enricher call once, in order, and record what happened.
    """
    if enricher is None:
        return Enrichment()

    job_description = job_description or ""
    if is_blank(job_description):
        job_match = EnrichmentOutcome.fallback("no job description provided")
    else:
        job_match = _attempt(
            "match_job_description",
            lambda: enricher.match_job_description(resume_text, job_description),
            _as_job_match
        )

    skills = _attempt("extract_skills", lambda: enricher.extract_skills(resume_text), _as_skill_list)
    suggestions = _attempt(
        "generate_suggestions",
        lambda: enricher.generate_suggestions(resume_text, job_description),
        _as_suggestions
    )

    enrichment = Enrichment(job_match=job_match, skills=skills, suggestions=suggestions)
    logger.info(f"Enrichment sources: {enrichment.sources()}")
    return enrichment
