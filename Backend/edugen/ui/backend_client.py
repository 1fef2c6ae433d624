import logging
import requests

from edugen.schemas import GenerateOptions, GenerateResponse
from edugen.services.generation_service import GenerationError, GENERATION_FAILED_MESSAGE

logger = logging.getLogger(__name__)


class BackendClient:
    def __init__(self, base_url: str, session: requests.Session = None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def generate(self, options: GenerateOptions) -> str:
        """Ask the backend for content and return the raw generated text"""
        try:
            response = self.session.post(
                f"{self.base_url}/generate/",
                json=options.model_dump(mode="json"),
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Connection error: {str(e)}")
            raise GenerationError() from e

        if response.status_code != 200:
            try:
                detail = response.json().get("detail", GENERATION_FAILED_MESSAGE)
            except ValueError:
                detail = GENERATION_FAILED_MESSAGE
            if not isinstance(detail, str):
                # validation errors come back as a list
                detail = GENERATION_FAILED_MESSAGE
            raise GenerationError(detail)

        try:
            return GenerateResponse(**response.json()).content
        except (ValueError, TypeError) as e:
            # pydantic's ValidationError is a ValueError
            logger.error(f"Malformed backend response: {str(e)}")
            raise GenerationError() from e

    def check_api_key(self) -> dict:
        response = self.session.get(f"{self.base_url}/test-api-key/", timeout=60)
        response.raise_for_status()
        return response.json()
