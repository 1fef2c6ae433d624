import time
import logging
from langchain_google_genai import ChatGoogleGenerativeAI
from edugen.schemas import GenerateOptions
from edugen.services.prompt_builder import build_prompt, generation_config
from edugen.utils.config import settings

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = (
    "Failed to generate content from the AI. Please check your connection or API key."
)


class GenerationError(Exception):
    """Raised when the generation API call fails for any reason."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


def response_text(response) -> str:
    """Extract the text payload from a chat model response"""
    content = response.content
    if isinstance(content, list):
        # Newer Gemini responses arrive as a list of content blocks
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


class GenerationService:
    def __init__(self, llm_factory=None):
        self.llm_factory = llm_factory or self.create_llm

    def create_llm(self, **config):
        if settings.google_api_key:
            # otherwise the client falls back to GOOGLE_API_KEY in the environment
            config["google_api_key"] = settings.google_api_key
        return ChatGoogleGenerativeAI(model=settings.llm_model, **config)

    async def generate(self, options: GenerateOptions) -> str:
        """Generate a study guide or quiz and return the raw model text"""
        prompt = build_prompt(options)
        config = generation_config(options.content_type)
        start = time.perf_counter()
        try:
            llm = self.llm_factory(**config)
            response = await llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Error calling Gemini API: {str(e)}", exc_info=True)
            raise GenerationError() from e

        text = response_text(response)
        logger.info(
            f"Generated {options.content_type.value} for '{options.topic}' "
            f"in {time.perf_counter() - start:.2f}s ({len(text)} chars)"
        )
        return text

    async def check_api_key(self) -> tuple[bool, str]:
        """Send a trivial prompt to confirm the configured key works"""
        try:
            llm = self.llm_factory(temperature=0)
            response = await llm.ainvoke('Say "Hello World"')
        except Exception as e:
            logger.error(f"API call failed: {str(e)}")
            return False, GENERATION_FAILED_MESSAGE
        text = response_text(response)
        logger.info(f"API response test: {text}")
        return True, text
