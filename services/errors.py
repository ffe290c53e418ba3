class AnalysisError(Exception):
    """Base class for resume analysis errors"""
    status_code = 500


class InvalidInputError(AnalysisError):
    """Resume text was not supplied at all"""
    status_code = 400


class AnalysisFailedError(AnalysisError):
    """An unexpected error occurred while building an analysis"""
    status_code = 500


class AnalysisNotFoundError(AnalysisError):
    status_code = 404


class AnalysisAccessDeniedError(AnalysisError):
    status_code = 403
