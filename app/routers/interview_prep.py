from fastapi import APIRouter, HTTPException, Depends
from app.models.schemas import (
    ReconcileQuestionsRequest, ReconcileQuestionsResponse, QuestionEntryResponse,
    QuestionPromptRequest, JobPostPromptRequest, PromptResponse,
    AnalyzeJobPostRequest, JobPostAnalysisResponse,
    ToggleSavedQuestionRequest, ToggleSavedQuestionResponse
)
from app.services.interview_prep_service import InterviewPrepService
from app.dependencies import get_interview_prep_service
from app.exceptions import PipelineContractError, QuestionGenerationError
from app.utils.fallback_responses import QUESTION_GENERATION_FAILED
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/interview-prep", tags=["interview-prep"])

def _prompt_response(prompt: dict) -> PromptResponse:
    return PromptResponse(
        systemMessage=prompt["system_message"],
        prompt=prompt["prompt"],
        temperature=prompt["temperature"],
        maxTokens=prompt["max_tokens"]
    )

@router.post("/questions/reconcile", response_model=ReconcileQuestionsResponse)
async def reconcile_questions(
    request: ReconcileQuestionsRequest,
    service: InterviewPrepService = Depends(get_interview_prep_service)
):
    """
    Merge a fresh AI response with the user's saved questions.

    Saved questions come first in their saved order, followed by new,
    non-duplicate questions, each with its best matching answer.
    """
    try:
        result = service.regenerate_questions(
            raw_response=request.rawResponse,
            saved_questions=request.savedQuestions,
            prior_answers=[pair.to_candidate() for pair in request.priorAnswers],
            company=request.company,
            position=request.position
        )
    except QuestionGenerationError as e:
        logger.warning(f"Question regeneration produced nothing usable: {e.message} {e.context}")
        raise HTTPException(status_code=422, detail=QUESTION_GENERATION_FAILED)
    except PipelineContractError as e:
        raise HTTPException(status_code=400, detail=e.message)

    logger.info(
        f"Reconciled {len(result.entries)} questions "
        f"({result.saved_count} saved, {result.fresh_count} fresh, source={result.source.value})"
    )
    return ReconcileQuestionsResponse(
        questions=[QuestionEntryResponse.from_entry(entry) for entry in result.entries],
        source=result.source.value,
        savedCount=result.saved_count,
        freshCount=result.fresh_count
    )

@router.post("/questions/prompt", response_model=PromptResponse)
async def build_question_prompt(
    request: QuestionPromptRequest,
    service: InterviewPrepService = Depends(get_interview_prep_service)
):
    """Build the prompt the client sends to the AI provider for new questions."""
    prompt = service.build_regeneration_prompt(
        position=request.position,
        company=request.company,
        saved_questions=request.savedQuestions,
        job_description=request.jobDescription,
        count=request.count
    )
    return _prompt_response(prompt)

@router.post("/job-post/prompt", response_model=PromptResponse)
async def build_job_post_prompt(
    request: JobPostPromptRequest,
    service: InterviewPrepService = Depends(get_interview_prep_service)
):
    """Build the prompt the client sends to the AI provider for job post analysis."""
    prompt = service.build_job_post_prompt(
        job_post=request.jobPost,
        position=request.position,
        company=request.company
    )
    return _prompt_response(prompt)

@router.post("/job-post/analyze", response_model=JobPostAnalysisResponse)
async def analyze_job_post(
    request: AnalyzeJobPostRequest,
    service: InterviewPrepService = Depends(get_interview_prep_service)
):
    """Parse a raw job post analysis response into structured insights."""
    try:
        analysis = service.analyze_job_post(request.rawResponse)
    except PipelineContractError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return JobPostAnalysisResponse.from_analysis(analysis)

@router.post("/saved-questions/toggle", response_model=ToggleSavedQuestionResponse)
async def toggle_saved_question(
    request: ToggleSavedQuestionRequest,
    service: InterviewPrepService = Depends(get_interview_prep_service)
):
    """Save a question, or unsave it if it is already saved."""
    saved = service.toggle_saved_question(request.savedQuestions, request.rawValue)
    return ToggleSavedQuestionResponse(
        savedQuestions=saved,
        saved=request.rawValue in saved
    )
