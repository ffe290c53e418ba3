from typing import List, Tuple
from models.resume_models import ATSResult, FeatureSignal, FeedbackItem, ScoreBreakdown
from services.feature_detector import FeatureDetector
from services.text_normalizer import clamp, is_blank, word_count
import logging

logger = logging.getLogger(__name__)

# Feedback messages per category: (awarded, absent)
FEEDBACK_MESSAGES = {
    'contact': ("Contact information present",
                "Missing complete contact information"),
    'summary': ("Professional summary found",
                "Consider adding a professional summary"),
    'skills': ("Skills section present",
               "Add a dedicated skills section"),
    'experience': ("Work experience section found",
                   "Work experience section missing"),
    'education': ("Education information present",
                  "Consider adding education details"),
    'achievements': ("Quantified achievements found",
                     "Add quantified achievements and metrics"),
}

THIN_EXPERIENCE_MESSAGE = "Expand work experience details"

# Missing these categories is treated as critical
CRITICAL_CATEGORIES = ('contact', 'experience')

VARIATION_MODULUS = 15
VARIATION_OFFSET = 7


class ATSScorer:
    def __init__(self, detector: FeatureDetector = None):
        self.detector = detector or FeatureDetector()

    def score(self, text: str) -> ATSResult:
        """
        Score resume text out of 100 with per-category feedback
        """
        if is_blank(text):
            logger.info("Blank resume text, returning zero ATS score")
            return self.empty_result()

        signals = self.detector.detect_features(text)
        contact, contact_feedback = self.score_contact(signals.contact)
        summary, summary_feedback = self.score_summary(signals.summary)
        skills, skills_feedback = self.score_skills(signals.skills)
        experience, experience_feedback = self.score_experience(signals.experience)
        education, education_feedback = self.score_education(signals.education)
        achievements, achievements_feedback = self.score_achievements(signals.achievements)

        breakdown = ScoreBreakdown(
            contact=contact,
            summary=summary,
            skills=skills,
            experience=experience,
            education=education,
            achievements=achievements
        )
        feedback = [
            contact_feedback,
            summary_feedback,
            skills_feedback,
            experience_feedback,
            education_feedback,
            achievements_feedback
        ]

        variation = self.variation(text)
        score = clamp(breakdown.total() + variation)
        logger.info(f"ATS score {score} (points {breakdown.total()}, variation {variation:+d})")

        return ATSResult(score=score, feedback=feedback, breakdown=breakdown)

    def empty_result(self) -> ATSResult:
        feedback = [
            self.absent_feedback(category) for category in FEEDBACK_MESSAGES
        ]
        return ATSResult(score=0, feedback=feedback, breakdown=ScoreBreakdown())

    @staticmethod
    def variation(text: str) -> int:
        """Deterministic -7..+7 offset so near-identical resumes don't tie"""
        return (len(text) + word_count(text)) % VARIATION_MODULUS - VARIATION_OFFSET

    def score_contact(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        """Score contact information completeness"""
        if signal.present:
            return 20, self.positive_feedback('contact')
        return 0, self.absent_feedback('contact')

    def score_summary(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        """Score professional summary"""
        if signal.present:
            return min(15, 10 + 2 * signal.strength), self.positive_feedback('summary')
        return 0, self.absent_feedback('summary')

    def score_skills(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        """Score technical skills section"""
        if signal.present:
            return min(20, 12 + 2 * signal.strength), self.positive_feedback('skills')
        return 0, self.absent_feedback('skills')

    def score_experience(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        """Score work experience section"""
        if self.detector.has_strong_experience(signal):
            return min(25, 18 + signal.strength), self.positive_feedback('experience')
        if signal.strength > 0:
            return 10, FeedbackItem(kind='improvement', message=THIN_EXPERIENCE_MESSAGE)
        return 0, self.absent_feedback('experience')

    def score_education(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        """Score education section"""
        if signal.present:
            return min(10, 7 + signal.strength), self.positive_feedback('education')
        return 0, self.absent_feedback('education')

    def score_achievements(self, signal: FeatureSignal) -> Tuple[int, FeedbackItem]:
        if signal.present:
            return min(10, 5 + signal.strength), self.positive_feedback('achievements')
        return 0, self.absent_feedback('achievements')

    @staticmethod
    def positive_feedback(category: str) -> FeedbackItem:
        return FeedbackItem(kind='positive', message=FEEDBACK_MESSAGES[category][0])

    @staticmethod
    def absent_feedback(category: str) -> FeedbackItem:
        kind = 'negative' if category in CRITICAL_CATEGORIES else 'improvement'
        return FeedbackItem(kind=kind, message=FEEDBACK_MESSAGES[category][1])

    @staticmethod
    def problems(result: ATSResult) -> List[FeedbackItem]:
        """Feedback items that call for a change"""
        return [item for item in result.feedback if item.kind != 'positive']
