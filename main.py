from datetime import datetime, timezone
from typing import Optional
from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from config import settings
from models.resume_models import (
    AnalysisHistoryResponse, AnalysisResultResponse, AnalyzeRequest,
    AnalyzeResponse, MessageResponse
)
from services.analysis_store import AnalysisStore
from services.enrichment import ResumeEnricher, collect_enrichment
from services.errors import AnalysisError, AnalysisFailedError
from services.resume_analyzer import ResumeAnalyzer
from services.text_normalizer import normalize
import logging


app = FastAPI(title=settings.app_name, version=settings.app_version)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize services
app.state.analyzer = ResumeAnalyzer()
app.state.analysis_store = AnalysisStore(preview_chars=settings.resume_preview_chars)
# No language-model collaborator is wired by default; deployments may set one
app.state.enricher = None

SAMPLE_RESUME = (
    "John Doe, Software Engineer with 5 years of experience in JavaScript, React, "
    "Node.js, and Python. Email: john@example.com, Phone: (555) 123-4567. "
    "Experience includes building web applications and APIs."
)
SAMPLE_JOB_DESCRIPTION = (
    "Looking for a Senior Software Engineer with experience in JavaScript, React, "
    "and Node.js. Must have 3+ years of experience building web applications."
)


def get_analyzer(request: Request) -> ResumeAnalyzer:
    return request.app.state.analyzer


def get_store(request: Request) -> AnalysisStore:
    return request.app.state.analysis_store


def get_enricher(request: Request) -> Optional[ResumeEnricher]:
    return request.app.state.enricher


def get_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    return (x_user_id or "").strip() or "anonymous"


def http_error(error: AnalysisError) -> HTTPException:
    return HTTPException(status_code=error.status_code, detail=str(error))


@app.get("/")
async def root():
    return {"message": "Resume Match Scorer API is working"}


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "services": {
            "resume_analyzer": "running",
            "analysis_store": "running",
            "enrichment": "configured" if app.state.enricher is not None else "fallback"
        }
    }


@app.post("/api/analyze/resume", response_model=AnalyzeResponse)
def analyze_resume(body: AnalyzeRequest,
                   user_id: str = Depends(get_user_id),
                   analyzer: ResumeAnalyzer = Depends(get_analyzer),
                   store: AnalysisStore = Depends(get_store),
                   enricher: Optional[ResumeEnricher] = Depends(get_enricher)):
    """
    Analyze resume text, optionally against a job description.
    Plain def: enricher calls block, so FastAPI runs this in its threadpool.
    """
    resume_text = normalize(body.resume_text)
    job_description = body.job_description or ""

    if len(resume_text) < settings.min_resume_chars:
        raise HTTPException(
            status_code=400,
            detail="Could not find meaningful text in the resume. Please provide the full resume content."
        )

    logger.info(f"Starting analysis for user: {user_id}, {len(resume_text)} characters")
    record = store.create(user_id, resume_text, job_description, file_name=body.file_name)

    enrichment = collect_enrichment(enricher, resume_text, job_description)
    try:
        analysis = analyzer.analyze(resume_text, job_description, enrichment=enrichment)
    except AnalysisFailedError as e:
        store.update(user_id, record.id, status="failed")
        raise http_error(e) from e

    store.update(user_id, record.id, analysis=analysis, status="completed")
    logger.info(f"Analysis completed for {record.id}")

    return AnalyzeResponse(
        analysis_id=record.id,
        analysis=analysis,
        message="Resume analysis completed successfully"
    )


@app.get("/api/analyze/results/{analysis_id}", response_model=AnalysisResultResponse)
async def get_analysis(analysis_id: str,
                       user_id: str = Depends(get_user_id),
                       store: AnalysisStore = Depends(get_store)):
    try:
        record = store.get(user_id, analysis_id)
    except AnalysisError as e:
        raise http_error(e) from e
    return AnalysisResultResponse(result=record)


@app.get("/api/analyze/history", response_model=AnalysisHistoryResponse)
async def analysis_history(user_id: str = Depends(get_user_id),
                           store: AnalysisStore = Depends(get_store)):
    """Summaries of the user's analyses, newest first"""
    return AnalysisHistoryResponse(analyses=store.list_for_user(user_id))


@app.delete("/api/analyze/results/{analysis_id}", response_model=MessageResponse)
async def delete_analysis(analysis_id: str,
                          user_id: str = Depends(get_user_id),
                          store: AnalysisStore = Depends(get_store)):
    try:
        store.delete(user_id, analysis_id)
    except AnalysisError as e:
        raise http_error(e) from e
    return MessageResponse(message="Analysis deleted successfully")


@app.get("/api/analyze/test")
async def test_analysis(analyzer: ResumeAnalyzer = Depends(get_analyzer)):
    """Run the analyzer on a built-in sample to verify the service"""
    try:
        analysis = analyzer.analyze(SAMPLE_RESUME, SAMPLE_JOB_DESCRIPTION)
    except AnalysisFailedError as e:
        raise http_error(e) from e
    return {
        "success": True,
        "testAnalysis": analysis.model_dump(by_alias=True, mode="json"),
        "message": "Analysis service is working correctly"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
