import pytest

from services.enrichment import Enrichment, EnrichmentOutcome, collect_enrichment
from services.errors import AnalysisFailedError, InvalidInputError
from services.job_matcher import NO_JOB_DESCRIPTION
from services.resume_analyzer import ResumeAnalyzer
from services.skill_extractor import SkillExtractor
from tests.conftest import FailingEnricher, FakeEnricher


class ExplodingExtractor(SkillExtractor):
    def extract(self, text):
        raise KeyError("taxonomy corrupted")


def test_empty_resume_scores_zero_without_raising():
    result = ResumeAnalyzer().analyze("")

    assert result.ats_score == 0
    assert result.overall_score == 0
    assert result.job_match_score == 0
    assert result.ats_breakdown.total() == 0
    assert result.breakdown.keyword_optimization == 0
    assert result.skills == {}
    kinds = [item.kind for item in result.feedback]
    assert kinds[0] == "negative"   # contact
    assert kinds[3] == "negative"   # experience
    assert result.job_match.details == NO_JOB_DESCRIPTION


def test_missing_resume_is_invalid_input():
    with pytest.raises(InvalidInputError):
        ResumeAnalyzer().analyze(None)


def test_full_analysis(sample_resume, sample_job):
    result = ResumeAnalyzer().analyze(sample_resume, sample_job)

    assert result.ats_breakdown.contact == 20
    assert result.ats_breakdown.experience > 10
    assert result.skills["programming"][0] == "python"
    assert "django" in result.skills["frameworks"]
    assert result.job_match.details.startswith("Keyword match:")
    assert result.job_match_score == result.job_match.score
    assert result.overall_score == ResumeAnalyzer.overall_score(
        " ".join(sample_resume.split()), result.ats_score, result.job_match_score
    )
    assert result.analysis_date.tzinfo is not None


def test_analysis_is_deterministic(sample_resume, sample_job):
    analyzer = ResumeAnalyzer()
    first = analyzer.analyze(sample_resume, sample_job)
    second = analyzer.analyze(sample_resume, sample_job)

    assert first.model_dump(exclude={"analysis_date"}) == second.model_dump(exclude={"analysis_date"})


def test_scores_bounded_for_large_input():
    text = "Increased revenue 50% at company. Skills summary degree jane@a.io 555-123-4567. " * 2000
    assert len(text) > 100_000
    result = ResumeAnalyzer().analyze(text, "python " * 500)

    for value in (result.overall_score, result.ats_score, result.job_match_score):
        assert 0 <= value <= 100
    for value in result.breakdown.model_dump().values():
        assert 0 <= value <= 100
    assert result.suggestions[-1].category == "Job Matching"


def test_secondary_breakdown_bands(sample_resume):
    breakdown = ResumeAnalyzer().analyze(sample_resume).breakdown

    assert 65 <= breakdown.keyword_optimization <= 95
    assert 70 <= breakdown.structural_formatting <= 90
    assert 75 <= breakdown.content_quality <= 92
    assert 80 <= breakdown.narrative_coherence <= 95
    assert 75 <= breakdown.additional_factors <= 88


def test_blank_job_description_short_circuits(sample_resume):
    for job in (None, "", "   \n"):
        result = ResumeAnalyzer().analyze(sample_resume, job)
        assert result.job_match_score == 0
        assert result.job_match.details == NO_JOB_DESCRIPTION
        assert result.suggestions[-1].category == "Job Matching"


def test_overall_score_variation():
    # round(80*0.6 + 50*0.4) = 68, 10 chars -> 0 - 5
    assert ResumeAnalyzer.overall_score("x" * 10, 80, 50) == 63
    assert ResumeAnalyzer.overall_score("x" * 19, 100, 100) == 100
    assert ResumeAnalyzer.overall_score("", 0, 0) == 0


def test_enrichment_replaces_fallback_pieces(sample_resume, sample_job):
    enrichment = collect_enrichment(FakeEnricher(), sample_resume, sample_job)
    result = ResumeAnalyzer().analyze(sample_resume, sample_job, enrichment=enrichment)

    assert result.job_match_score == 88
    assert result.skills == {
        "programming": ["python"],
        "frameworks": ["django"],
        "other": ["Communication"],
    }
    assert result.suggestions[-1].category == "AI Insight"


def test_failed_enrichment_matches_plain_analysis(sample_resume, sample_job):
    analyzer = ResumeAnalyzer()
    plain = analyzer.analyze(sample_resume, sample_job)
    fallback = analyzer.analyze(
        sample_resume, sample_job,
        enrichment=collect_enrichment(FailingEnricher(), sample_resume, sample_job)
    )

    assert fallback.model_dump(exclude={"analysis_date"}) == plain.model_dump(exclude={"analysis_date"})


def test_enriched_job_match_ignored_without_job_description(sample_resume):
    enrichment = Enrichment(job_match=EnrichmentOutcome.success(
        FakeEnricher().match_job_description(sample_resume, "")
    ))
    result = ResumeAnalyzer().analyze(sample_resume, "", enrichment=enrichment)
    assert result.job_match_score == 0


def test_unexpected_errors_become_analysis_failed(sample_resume):
    analyzer = ResumeAnalyzer(skill_extractor=ExplodingExtractor())
    with pytest.raises(AnalysisFailedError) as exc_info:
        analyzer.analyze(sample_resume)
    assert isinstance(exc_info.value.__cause__, KeyError)


def test_serializes_with_dashboard_field_names(sample_resume, sample_job):
    result = ResumeAnalyzer().analyze(sample_resume, sample_job)
    payload = result.model_dump(by_alias=True, mode="json")

    assert set(payload) == {
        "overallScore", "atsScore", "jobMatchScore", "breakdown", "skills",
        "suggestions", "feedback", "jobMatch", "analysisDate"
    }
    assert result.ats_breakdown.contact == 20
    assert set(payload["breakdown"]) == {
        "keywordOptimization", "structuralFormatting", "contentQuality",
        "narrativeCoherence", "additionalFactors"
    }
    assert set(payload["jobMatch"]) == {"score", "details"}
