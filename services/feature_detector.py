import re
from typing import Dict
from models.resume_models import FeatureSignal, FeatureSignals
import logging

logger = logging.getLogger(__name__)

# Experience strength above this counts as a substantial work history
STRONG_EXPERIENCE_THRESHOLD = 3


class FeatureDetector:
    def __init__(self):
        # Contact details need both an email and a phone number
        self.contact_patterns = {
            'email': re.compile(r'[\w.-]+@[\w.-]+\.\w+'),
            'phone': re.compile(
                r'(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}'
            ),
        }

        # Section vocabularies, matched as case-insensitive substrings
        self.section_patterns = {
            'summary': re.compile(
                r'summary|profile|about|overview|objective', re.IGNORECASE
            ),
            'skills': re.compile(
                r'skills|technologies|competencies|proficient|experienced',
                re.IGNORECASE
            ),
            'experience': re.compile(
                r'experience|work|employment|position|role|company|years',
                re.IGNORECASE
            ),
            'education': re.compile(
                r'education|degree|university|college|school|bachelor|master|phd',
                re.IGNORECASE
            ),
            'achievements': re.compile(
                r'\d+%|\$\d+|increased|improved|reduced|grew|achieved|\d+\+|\d+ years',
                re.IGNORECASE
            ),
        }

    def detect_features(self, text: str) -> FeatureSignals:
        """
        Probe resume text for each scored category
        """
        signals: Dict[str, FeatureSignal] = {
            'contact': self.detect_contact(text)
        }
        for category, pattern in self.section_patterns.items():
            strength = len(pattern.findall(text))
            signals[category] = FeatureSignal(present=strength > 0, strength=strength)

        logger.debug(
            "Detected features: "
            + ", ".join(f"{name}={signal.strength}" for name, signal in signals.items())
        )
        return FeatureSignals(**signals)

    def detect_contact(self, text: str) -> FeatureSignal:
        """Contact info counts only when email AND phone are both present"""
        found = [name for name, pattern in self.contact_patterns.items()
                 if pattern.search(text)]
        return FeatureSignal(
            present=len(found) == len(self.contact_patterns),
            strength=len(found)
        )

    @staticmethod
    def has_strong_experience(signal: FeatureSignal) -> bool:
        return signal.strength > STRONG_EXPERIENCE_THRESHOLD
