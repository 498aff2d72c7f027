"""Kernel: framework-agnostic building blocks (errors, types, DDD, messaging)."""
