"""Configuration management for the kindctl application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

class Settings:
    """Application settings with sensible defaults."""

    # Node image booted when a config does not name one
    KIND_NODE_IMAGE: str = os.getenv("KIND_NODE_IMAGE", "kindest/node:v1.12.2")

    # Container runtime
    DOCKER_BIN: str = os.getenv("DOCKER_BIN", "docker")
    CLUSTER_LABEL: str = "io.k8s.sigs.kind.cluster"

    # Seconds between readiness checks when --wait is set
    WAIT_POLL_INTERVAL: float = float(os.getenv("WAIT_POLL_INTERVAL", "2.0"))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # HTTP API
    API_HOST: str = os.getenv("KINDCTL_API_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("KINDCTL_API_PORT", "8000"))
