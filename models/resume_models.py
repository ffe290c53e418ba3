from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

FeedbackKind = Literal["positive", "negative", "improvement"]
Priority = Literal["high", "medium", "low"]
Impact = Literal["Critical", "Improvement"]
AnalysisStatus = Literal["processing", "completed", "failed"]


class CamelModel(BaseModel):
    """Base model that serializes field names in camelCase for the dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FeedbackItem(FrozenCamelModel):
    kind: FeedbackKind
    message: str


class FeatureSignal(FrozenCamelModel):
    present: bool = False
    strength: int = 0


class FeatureSignals(FrozenCamelModel):
    contact: FeatureSignal
    summary: FeatureSignal
    skills: FeatureSignal
    experience: FeatureSignal
    education: FeatureSignal
    achievements: FeatureSignal


class ScoreBreakdown(FrozenCamelModel):
    # Per-category caps: 20/15/20/25/10/10
    contact: int = Field(default=0, ge=0, le=20)
    summary: int = Field(default=0, ge=0, le=15)
    skills: int = Field(default=0, ge=0, le=20)
    experience: int = Field(default=0, ge=0, le=25)
    education: int = Field(default=0, ge=0, le=10)
    achievements: int = Field(default=0, ge=0, le=10)

    def total(self) -> int:
        return (self.contact + self.summary + self.skills
                + self.experience + self.education + self.achievements)


class ATSResult(FrozenCamelModel):
    score: int = Field(ge=0, le=100)
    feedback: List[FeedbackItem]
    breakdown: ScoreBreakdown


class JobMatch(FrozenCamelModel):
    score: int = Field(ge=0, le=100)
    details: str


class Suggestion(FrozenCamelModel):
    category: str
    priority: Priority
    text: str
    impact: Impact


class AnalysisBreakdown(FrozenCamelModel):
    keyword_optimization: int = Field(default=0, ge=0, le=100)
    structural_formatting: int = Field(default=0, ge=0, le=100)
    content_quality: int = Field(default=0, ge=0, le=100)
    narrative_coherence: int = Field(default=0, ge=0, le=100)
    additional_factors: int = Field(default=0, ge=0, le=100)


class AnalysisResult(FrozenCamelModel):
    overall_score: int = Field(ge=0, le=100)
    ats_score: int = Field(ge=0, le=100)
    job_match_score: int = Field(ge=0, le=100)
    breakdown: AnalysisBreakdown
    # Kept on the model for callers, left out of the serialized result
    ats_breakdown: ScoreBreakdown = Field(exclude=True)
    skills: Dict[str, List[str]]
    suggestions: List[Suggestion]
    feedback: List[FeedbackItem]
    job_match: JobMatch
    analysis_date: datetime


class StoredAnalysis(CamelModel):
    id: str
    user_id: str
    file_name: Optional[str] = None
    job_description: str = ""
    resume_preview: str = ""
    analysis: Optional[AnalysisResult] = None
    created_at: datetime
    status: AnalysisStatus = "processing"


class AnalysisSummary(CamelModel):
    id: str
    file_name: Optional[str] = None
    overall_score: Optional[int] = None
    ats_score: Optional[int] = None
    job_match_score: Optional[int] = None
    created_at: datetime
    status: AnalysisStatus


class AnalyzeRequest(CamelModel):
    resume_text: str
    job_description: Optional[str] = ""
    file_name: Optional[str] = None


class AnalyzeResponse(CamelModel):
    success: bool = True
    analysis_id: str
    analysis: AnalysisResult
    message: str


class AnalysisResultResponse(CamelModel):
    success: bool = True
    result: StoredAnalysis


class AnalysisHistoryResponse(CamelModel):
    success: bool = True
    analyses: List[AnalysisSummary]


class MessageResponse(CamelModel):
    success: bool = True
    message: str
