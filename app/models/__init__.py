# Models package for Pydantic schemas and pipeline dataclasses

# Import Pydantic schemas
from .schemas import (
    ReconcileQuestionsRequest, ReconcileQuestionsResponse, QuestionPromptRequest,
    JobPostPromptRequest, PromptResponse, AnalyzeJobPostRequest, JobPostAnalysisResponse,
    ToggleSavedQuestionRequest, ToggleSavedQuestionResponse
)

# Import pipeline models
from .question_models import (
    AnswerCandidate, QuestionEntry, QuestionTag, PayloadSource, JobPostAnalysis
)

__all__ = [
    "ReconcileQuestionsRequest", "ReconcileQuestionsResponse", "QuestionPromptRequest",
    "JobPostPromptRequest", "PromptResponse", "AnalyzeJobPostRequest", "JobPostAnalysisResponse",
    "ToggleSavedQuestionRequest", "ToggleSavedQuestionResponse",
    "AnswerCandidate", "QuestionEntry", "QuestionTag", "PayloadSource", "JobPostAnalysis"
]
