from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.logging_config import setup_logging
from app.utils.logger import get_logger
from app.middleware.logging_middleware import log_requests
from app.config import get_settings

# Setup logging configuration
setup_logging()
logger = get_logger(__name__)
settings = get_settings()

app = FastAPI(
    title=settings.APP_NAME,
    description="""
    ## PrepDeck API

    Interview preparation helpers for AI-generated questions and answers.

    ### Key Features
    - **Prompt Building**: Strict JSON prompts for question regeneration and job post analysis
    - **Response Parsing**: Recovers questions and answers from malformed model output
    - **Question Reconciliation**: Keeps saved questions, drops duplicates, pairs each question with a specific answer
    - **Saved Questions**: Toggle questions in and out of the saved list
    """,
    version=settings.APP_VERSION
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_config["allow_origins"],
    allow_credentials=settings.cors_config["allow_credentials"],
    allow_methods=settings.cors_config["allow_methods"],
    allow_headers=settings.cors_config["allow_headers"],
    max_age=settings.cors_config["max_age"]
)

def load_routers():
    """Load routers with simplified error handling."""
    from app.routers import interview_prep, health

    routers = [
        ("interview_prep", interview_prep.router),
        ("health", health.router)
    ]

    loaded_routers = []
    for router_name, router in routers:
        app.include_router(router)
        loaded_routers.append(router_name)
        logger.info(f"Loaded {router_name} router")

    logger.info(f"Successfully loaded routers: {', '.join(loaded_routers)}")

load_routers()

@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    return await log_requests(request, call_next)

for issue in settings.validate_configuration():
    logger.warning(f"Configuration issue: {issue}")

@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "features": "Question regeneration, answer matching and job post analysis"
    }
