"""Web boundary layer.

- contracts/: request and response models
- services/: translate between contracts and the widget
- controllers/: FastAPI routers
"""

__all__ = [
    "contracts",
    "services",
    "controllers",
]
