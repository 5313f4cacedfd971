import logging
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

# Plain module logger: ideator.utils.logger imports this module, so it cannot be used here.
logger = logging.getLogger(__name__)

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("IDEATOR_ENV", "dev")
        self._load_env_file()

        # Google AI settings
        self.gemini_api_key = os.getenv("GEMINI_API_KEY")
        self.evaluation_model = os.getenv("IDEATOR_EVALUATION_MODEL", "gemini-3-flash-preview")
        self.image_model = os.getenv("IDEATOR_IMAGE_MODEL", "gemini-2.5-flash-image")
        self.image_aspect_ratio = os.getenv("IDEATOR_IMAGE_ASPECT_RATIO", "16:9")

        # Unset means calls may wait forever
        self.request_timeout = self._parse_timeout(os.getenv("IDEATOR_REQUEST_TIMEOUT"))

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file

        load_dotenv(env_file)

    @staticmethod
    def _parse_timeout(value: Optional[str]) -> Optional[float]:
        """Parse a timeout in seconds; blank, invalid or non-positive values disable it."""
        if not value or not value.strip():
            return None
        try:
            seconds = float(value)
        except ValueError:
            logger.warning(f"Ignoring invalid IDEATOR_REQUEST_TIMEOUT {value!r}; requests will not time out")
            return None
        if seconds <= 0:
            logger.warning(f"Ignoring non-positive IDEATOR_REQUEST_TIMEOUT {value!r}; requests will not time out")
            return None
        return seconds

# Create a global config instance
config = Config()
