from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    google_api_key: str = ""
    llm_model: str = "gemini-2.5-flash"
    quiz_temperature: float = 0.7
    study_guide_temperature: float = 0.6
    backend_url: str = "http://localhost:8000"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
