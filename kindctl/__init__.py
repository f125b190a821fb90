"""kindctl - local Kubernetes clusters from Docker container nodes."""

__version__ = "0.1.0"
