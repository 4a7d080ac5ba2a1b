from pydantic_settings import BaseSettings
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings(BaseSettings):
    # App Settings
    app_name: str = "FocusHub"
    app_version: str = "1.0.0"
    environment: str = os.getenv("ENVIRONMENT", "development")
    debug: bool = True

    # API Settings
    api_host: str = "127.0.0.1"
    api_port: int = 5000
    api_prefix: str = "/api"
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Mock identity used by every request (no auth model)
    mock_user_id: str = "mock-user-123"

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_dir: str = "logs"
    log_to_file: bool = True

    # Analytics Settings
    dashboard_blocker_score: int = 95
    default_blocking_minutes: int = 480
    weekly_labels: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    weekly_productivity: List[int] = [75, 82, 78, 85, 90, 88, 87]

    def log_analytics_config(self):
        """Log analytics configuration for debugging"""
        import logging
        logger = logging.getLogger(__name__)
        logger.info("Analytics Configuration:")
        logger.info(f"  Dashboard blocker score: {self.dashboard_blocker_score}")
        logger.info(
            f"  Default blocking minutes: {self.default_blocking_minutes}")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
        "env_prefix": "",
    }


settings = Settings()
