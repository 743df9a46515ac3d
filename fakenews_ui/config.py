from typing import List, Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    api_url: str = "http://127.0.0.1:5000"
    request_timeout: Optional[float] = None
    allowed_origins: str = "http://localhost:3000"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    class Config:
        env_file = ".env"
