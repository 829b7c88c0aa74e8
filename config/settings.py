"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Supabase Configuration
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_anon_key: str = ""
    daily_recipes_table: str = "daily_recipes"
    
    # AI (OpenRouter-compatible) Configuration
    ai_api_url: str = ""
    ai_api_key: str = ""
    ai_request_timeout: float = 30.0
    site_url: str = "http://localhost:3000"
    app_title: str = "SavoryCircle"
    
    # Bearer secret of the external daily-recipe scheduler
    cron_secret_key: str = ""
    
    # Auth redirect configuration
    dashboard_path: str = "/dashboard"
    login_path: str = "/login"
    auth_code_verifier_cookie: str = "sb-code-verifier"
    
    # Application Configuration
    app_name: str = "SavoryCircle API"
    app_version: str = "1.0.0"
    debug: bool = True
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000
    
    # CORS Configuration
    cors_origins: List[str] = ["http://localhost:3000"]
    
    class Config:
        env_file = ".env"
        case_sensitive = False
    
    def missing_backend_settings(self) -> List[str]:
        """Names of unset settings required to reach Supabase."""
        required = {
            "supabase_url": self.supabase_url,
            "supabase_service_role_key": self.supabase_service_role_key,
        }
        return [name for name, value in required.items() if not value]
    
    def missing_ai_settings(self) -> List[str]:
        """Names of unset settings required to reach the AI endpoint."""
        required = {
            "ai_api_url": self.ai_api_url,
            "ai_api_key": self.ai_api_key,
        }
        return [name for name, value in required.items() if not value]


# Global settings instance
settings = Settings()
