"""Configuration: environment-driven settings dataclasses."""
