from .base import Base
from .session import (
    create_engine_from_settings,
    create_engine_from_url,
    create_session_factory,
    init_models,
    drop_models,
)

__all__ = [
    "Base",
    "create_engine_from_settings",
    "create_engine_from_url",
    "create_session_factory",
    "init_models",
    "drop_models",
]
