import pytest
from fastapi.testclient import TestClient

from models.resume_models import JobMatch, Suggestion
from services.analysis_store import AnalysisStore
from services.resume_analyzer import ResumeAnalyzer


SAMPLE_RESUME = (
    "Jane Smith jane.smith@example.com +1 (555) 123-4567\n"
    "Summary: Backend engineer focused on reliable APIs.\n"
    "Skills: Python, Django, PostgreSQL, Docker, AWS\n"
    "Experience: Senior engineer at a payments company, 6 years in a platform role. "
    "Increased throughput by 40% and reduced costs by $20000.\n"
    "Education: BSc degree in Computer Science, State University"
)

SAMPLE_JOB = (
    "We are hiring a backend engineer with Python, Django and PostgreSQL experience. "
    "Docker and AWS knowledge required."
)


class FakeEnricher:
    def match_job_description(self, resume_text, job_description):
        return JobMatch(score=88, details="Strong overlap on backend skills")

    def extract_skills(self, text):
        return ["Python", "Django", "Communication"]

    def generate_suggestions(self, resume_text, job_description):
        return [Suggestion(category="AI Insight", priority="high",
                           text="Lead with the payments platform impact.", impact="Improvement")]


class FailingEnricher:
    def match_job_description(self, resume_text, job_description):
        raise TimeoutError("model timed out")

    def extract_skills(self, text):
        raise ConnectionError("connection reset")

    def generate_suggestions(self, resume_text, job_description):
        raise RuntimeError("rate limit")


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_job() -> str:
    return SAMPLE_JOB


@pytest.fixture
def client():
    """
    TestClient with a fresh store and no enricher; state is restored afterwards
    so tests can swap collaborators freely.
    """
    from main import app

    saved = (app.state.analyzer, app.state.analysis_store, app.state.enricher)
    app.state.analyzer = ResumeAnalyzer()
    app.state.analysis_store = AnalysisStore()
    app.state.enricher = None
    with TestClient(app) as test_client:
        yield test_client
    app.state.analyzer, app.state.analysis_store, app.state.enricher = saved
