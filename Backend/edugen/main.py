import logging
from fastapi import FastAPI, HTTPException, Depends
from edugen.schemas import GenerateOptions, GenerateResponse, ApiKeyCheckResponse
from edugen.services.generation_service import GenerationService, GenerationError
from edugen.utils.config import settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

if not settings.google_api_key:
    # Startup continues; the first generation call will fail instead
    logger.warning("GOOGLE_API_KEY environment variable not set.")

app = FastAPI(
    title="AI Edu-Generator API",
    description="Generate study guides and quizzes with Gemini",
)
generation_service = GenerationService()


def get_generation_service() -> GenerationService:
    return generation_service


@app.get("/health")
async def health():
    return {"ok": True}

@app.post("/generate/", response_model=GenerateResponse)
async def generate(
    options: GenerateOptions,
    service: GenerationService = Depends(get_generation_service)
):
    if not options.topic.strip():
        raise HTTPException(400, "Topic is required")
    try:
        content = await service.generate(options)
    except GenerationError as e:
        raise HTTPException(500, e.message)
    return GenerateResponse(content=content, content_type=options.content_type)

@app.get("/test-api-key/", response_model=ApiKeyCheckResponse)
async def test_api_key(service: GenerationService = Depends(get_generation_service)):
    ok, message = await service.check_api_key()
    return ApiKeyCheckResponse(ok=ok, message=message)
