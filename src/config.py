"""
Configuration management for the mining method selector.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    """Application configuration settings."""

    # Base paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    CATALOG_PATH: Path = Path(
        os.getenv("CATALOG_PATH", str(DATA_DIR / "method_selector_config.yaml"))
    )
    DEPOSITS_DIR: Path = Path(os.getenv("DEPOSITS_DIR", str(PROJECT_ROOT / "deposits")))
    RUNS_DIR: Path = Path(os.getenv("RUNS_DIR", str(PROJECT_ROOT / "runs")))

    # API settings
    API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
    API_PORT: int = int(os.getenv("API_PORT", "8000"))
    API_DEBUG: bool = os.getenv("API_DEBUG", "false").lower() == "true"

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @classmethod
    def ensure_directories(cls) -> None:
        """Create the run output directory if it does not exist yet."""
        cls.RUNS_DIR.mkdir(parents=True, exist_ok=True)
