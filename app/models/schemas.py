from pydantic import BaseModel, Field, validator
from typing import List, Optional

from app.models.question_models import AnswerCandidate, JobPostAnalysis, QuestionEntry

# Shared Models
class AnswerPair(BaseModel):
    question: str = Field("", max_length=2000, description="Question the answer was generated for")
    answer: str = Field(..., max_length=10000, description="Suggested answer approach")

    def to_candidate(self) -> AnswerCandidate:
        return AnswerCandidate(question=self.question, answer=self.answer)

    @classmethod
    def from_candidate(cls, candidate: AnswerCandidate) -> "AnswerPair":
        return cls(question=candidate.question, answer=candidate.answer)

# Request Models
class ReconcileQuestionsRequest(BaseModel):
    rawResponse: str = Field(..., max_length=100000, description="Raw text returned by the AI provider")
    savedQuestions: List[str] = Field(default_factory=list, description="Raw values of saved questions, in saved order")
    priorAnswers: List[AnswerPair] = Field(default_factory=list, description="Answers previously generated for the saved questions")
    company: Optional[str] = Field(None, max_length=200, description="Company name used for tagging")
    position: Optional[str] = Field(None, max_length=200, description="Position title used for tagging")

class QuestionPromptRequest(BaseModel):
    position: str = Field(..., min_length=1, max_length=200, description="The job role/title")
    company: str = Field(..., min_length=1, max_length=200, description="The company name")
    jobDescription: Optional[str] = Field(None, max_length=10000, description="Optional job description")
    savedQuestions: List[str] = Field(default_factory=list, description="Questions the model should not repeat")
    count: Optional[int] = Field(None, ge=1, le=30, description="Number of questions to request")

    @validator('position', 'company')
    def validate_names(cls, v):
        if not v or not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()

class JobPostPromptRequest(BaseModel):
    jobPost: str = Field(..., min_length=10, max_length=50000, description="Job post text or URL")
    position: str = Field(..., min_length=1, max_length=200, description="The job role/title")
    company: str = Field(..., min_length=1, max_length=200, description="The company name")

    @validator('jobPost', 'position', 'company')
    def validate_text_fields(cls, v):
        if not v or not v.strip():
            raise ValueError('Field cannot be empty')
        return v.strip()

class AnalyzeJobPostRequest(BaseModel):
    rawResponse: str = Field(..., max_length=100000, description="Raw text returned by the AI provider")

class ToggleSavedQuestionRequest(BaseModel):
    savedQuestions: List[str] = Field(default_factory=list, description="Current saved question raw values")
    rawValue: str = Field(..., min_length=1, description="Raw value of the question to toggle")

# Response Models
class QuestionEntryResponse(BaseModel):
    id: int
    rawValue: str
    text: str
    tags: List[str]
    suggestedApproach: Optional[str] = None

    @classmethod
    def from_entry(cls, entry: QuestionEntry) -> "QuestionEntryResponse":
        return cls(
            id=entry.id,
            rawValue=entry.raw_value,
            text=entry.text,
            tags=entry.tag_values,
            suggestedApproach=entry.suggested_approach
        )

class ReconcileQuestionsResponse(BaseModel):
    questions: List[QuestionEntryResponse] = Field(..., description="Reconciled questions in display order")
    source: str = Field(..., description="How the AI payload was recovered")
    savedCount: int
    freshCount: int

class PromptResponse(BaseModel):
    systemMessage: str
    prompt: str
    temperature: float
    maxTokens: int

class JobPostAnalysisResponse(BaseModel):
    keyPoints: List[str]
    requiredSkills: List[str]
    suggestedQuestions: List[str]
    suggestedAnswers: List[AnswerPair]
    companyInfo: str = ""
    positionDetails: str = ""
    cultureFit: str = ""
    error: Optional[str] = None

    @classmethod
    def from_analysis(cls, analysis: JobPostAnalysis) -> "JobPostAnalysisResponse":
        return cls(
            keyPoints=analysis.key_points,
            requiredSkills=analysis.required_skills,
            suggestedQuestions=analysis.suggested_questions,
            suggestedAnswers=[AnswerPair.from_candidate(c) for c in analysis.suggested_answers],
            companyInfo=analysis.company_info,
            positionDetails=analysis.position_details,
            cultureFit=analysis.culture_fit,
            error=analysis.error
        )

class ToggleSavedQuestionResponse(BaseModel):
    savedQuestions: List[str]
    saved: bool
