"""Application layer: use cases, CQRS building blocks, pipeline, outbox processing."""
