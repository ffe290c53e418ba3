import threading
import time
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from models.resume_models import AnalysisResult, AnalysisSummary, StoredAnalysis
from services.errors import AnalysisAccessDeniedError, AnalysisNotFoundError
import logging

logger = logging.getLogger(__name__)


def new_analysis_id() -> str:
    return f"analysis_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class AnalysisStore:
    """
    In-memory analysis repository. Every read and write is scoped by the
    owning user id.
    """

    def __init__(self, preview_chars: int = 1000):
        self.preview_chars = preview_chars
        self._records: Dict[str, StoredAnalysis] = {}
        self._lock = threading.Lock()

    def create(self, user_id: str, resume_text: str, job_description: str = "",
               file_name: Optional[str] = None,
               analysis: Optional[AnalysisResult] = None) -> StoredAnalysis:
        record = StoredAnalysis(
            id=new_analysis_id(),
            user_id=user_id,
            file_name=file_name,
            job_description=job_description or "",
            resume_preview=(resume_text or "")[:self.preview_chars],
            analysis=analysis,
            created_at=datetime.now(timezone.utc),
            status="completed" if analysis is not None else "processing"
        )
        with self._lock:
            self._records[record.id] = record
        logger.info(f"Stored analysis {record.id} for user {user_id}")
        return record

    def get(self, user_id: str, analysis_id: str) -> StoredAnalysis:
        with self._lock:
            record = self._records.get(analysis_id)
        return self._check_owner(record, user_id, analysis_id)

    def update(self, user_id: str, analysis_id: str, **changes) -> StoredAnalysis:
        unknown = set(changes) - set(StoredAnalysis.model_fields)
        if unknown:
            raise ValueError(f"Unknown analysis fields: {', '.join(sorted(unknown))}")

        with self._lock:
            record = self._check_owner(self._records.get(analysis_id), user_id, analysis_id)
            # Revalidate from attributes, model_dump would drop excluded fields
            fields = {name: getattr(record, name) for name in StoredAnalysis.model_fields}
            updated = StoredAnalysis.model_validate({**fields, **changes})
            self._records[analysis_id] = updated
        return updated

    def delete(self, user_id: str, analysis_id: str) -> None:
        with self._lock:
            self._check_owner(self._records.get(analysis_id), user_id, analysis_id)
            del self._records[analysis_id]
        logger.info(f"Deleted analysis {analysis_id} for user {user_id}")

    def list_for_user(self, user_id: str) -> List[AnalysisSummary]:
        """Summaries of the user's analyses, newest first"""
        with self._lock:
            records = [r for r in self._records.values() if r.user_id == user_id]

        # reversed() keeps same-timestamp records newest first after the stable sort
        records = sorted(reversed(records), key=lambda r: r.created_at, reverse=True)
        return [self.summarize(record) for record in records]

    @staticmethod
    def summarize(record: StoredAnalysis) -> AnalysisSummary:
        analysis = record.analysis
        return AnalysisSummary(
            id=record.id,
            file_name=record.file_name,
            overall_score=analysis.overall_score if analysis else None,
            ats_score=analysis.ats_score if analysis else None,
            job_match_score=analysis.job_match_score if analysis else None,
            created_at=record.created_at,
            status=record.status
        )

    @staticmethod
    def _check_owner(record: Optional[StoredAnalysis], user_id: str,
                     analysis_id: str) -> StoredAnalysis:
        if record is None:
            raise AnalysisNotFoundError(f"Analysis {analysis_id} not found")
        if record.user_id != user_id:
            raise AnalysisAccessDeniedError("Access denied")
        return record
