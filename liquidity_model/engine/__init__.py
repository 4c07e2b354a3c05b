"""Curve sampling and point-in-time evaluation."""
