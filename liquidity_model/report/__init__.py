"""Artifact writers for CLI runs."""
