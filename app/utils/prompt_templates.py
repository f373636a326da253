"""
Centralized prompt templates for job post analysis and question regeneration.
"""
from typing import Optional, Sequence

class PromptTemplates:
    """Centralized prompt templates for all AI requests."""

    JSON_ONLY_SYSTEM = """You are a job posting analyzer that returns ONLY valid JSON.

CRITICAL RULES:
1. Return ONLY valid JSON - no prose, no explanations, no markdown
2. Do NOT write any text before or after the JSON object
3. Do NOT say "Let me analyze...", "Here is...", or any preamble
4. Start your response IMMEDIATELY with { and end with }
5. All string values must be properly escaped"""

    QUESTION_GENERATION_SYSTEM = """You are an expert interview coach preparing a candidate for a specific job.
Your task is to generate interview questions with concrete, question-specific answer approaches.
Return ONLY valid JSON."""

    @staticmethod
    def get_job_post_analysis_prompt(job_post: str, position: str, company: str) -> str:
        """Generate the user prompt for job post analysis."""
        return f"""
Analyze this job posting for a {position} position at {company} and provide interview preparation guidance.

JOB POSTING:
\"\"\"
{job_post}
\"\"\"

Return a JSON object with these fields:
- keyPoints: array of key points about the role
- requiredSkills: array of required skills
- suggestedQuestions: array of interview questions
- suggestedAnswers: array of {{question, answer}} objects
- companyInfo: company summary string
- positionDetails: position details string
- cultureFit: culture fit insights string

Return ONLY the JSON object. No other text.
"""

    @staticmethod
    def get_question_regeneration_prompt(position: str, company: str, count: int,
                                         job_description: Optional[str] = None,
                                         saved_questions: Sequence[str] = ()) -> str:
        """Generate the user prompt for a fresh batch of questions and answers."""
        context = f"\nJob description:\n{job_description}\n" if job_description else ""
        avoid = ""
        if saved_questions:
            listed = "\n".join(f"- {question}" for question in saved_questions)
            avoid = f"\nThe candidate already saved these questions. Do NOT repeat them:\n{listed}\n"

        return f"""
Generate {count} interview questions a candidate is likely to be asked for the {position} position at {company}.
{context}{avoid}
Mix technical, behavioral, company-specific and role-specific questions.
For every question, give a specific answer approach that references the role and company.
Do not answer with generic advice such as "use the STAR method" on its own.

Return exactly this JSON shape:
{{
  "questions": ["question 1", "question 2"],
  "answers": [
    {{"question": "question 1", "answer": "specific approach"}},
    {{"question": "question 2", "answer": "specific approach"}}
  ]
}}
"""
