"""Cluster lifecycle: configuration and node orchestration."""
