"""mp-orders: order/product backend with a transactional outbox write path.

Layers
------
``kernel``         framework-agnostic building blocks (errors, Result, DDD, messaging ports)
``domain``         Order aggregate and Product entity
``application``    use cases, command pipeline, outbox processor
``adapters``       SQLAlchemy persistence, FastAPI HTTP surface
``config``         environment-driven settings
``observability``  structlog logging and request correlation
"""

__version__ = "1.0.0"
