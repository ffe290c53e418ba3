from typing import List
from models.resume_models import ATSResult, JobMatch, Suggestion
from services.ats_scorer import ATSScorer
from services.text_normalizer import word_count

SHORT_RESUME_WORDS = 200
LONG_RESUME_WORDS = 800
LOW_JOB_MATCH = 50


class SuggestionSynthesizer:
    def synthesize(self, ats_result: ATSResult, job_match: JobMatch,
                   resume_text: str) -> List[Suggestion]:
        """
        Build the ordered suggestion list: ATS feedback first, then length,
        then job match.
        """
        suggestions = self.ats_suggestions(ats_result)
        suggestions.extend(self.length_suggestions(resume_text))
        suggestions.extend(self.job_match_suggestions(job_match))
        return suggestions

    def ats_suggestions(self, ats_result: ATSResult) -> List[Suggestion]:
        suggestions = []
        for item in ATSScorer.problems(ats_result):
            critical = item.kind == 'negative'
            suggestions.append(Suggestion(
                category="ATS Optimization",
                priority="high" if critical else "medium",
                text=item.message,
                impact="Critical" if critical else "Improvement"
            ))
        return suggestions

    def length_suggestions(self, resume_text: str) -> List[Suggestion]:
        words = word_count(resume_text or "")
        if words < SHORT_RESUME_WORDS:
            return [Suggestion(
                category="Content",
                priority="medium",
                text="Resume appears too short. Consider adding more detail to your experience and achievements.",
                impact="Improvement"
            )]
        if words > LONG_RESUME_WORDS:
            return [Suggestion(
                category="Content",
                priority="low",
                text="Resume might be too long. Consider condensing to 1-2 pages for better readability.",
                impact="Improvement"
            )]
        return []

    def job_match_suggestions(self, job_match: JobMatch) -> List[Suggestion]:
        if job_match.score < LOW_JOB_MATCH:
            return [Suggestion(
                category="Job Matching",
                priority="high",
                text="Low job match score. Review the job description and incorporate relevant keywords and skills.",
                impact="Critical"
            )]
        return []
