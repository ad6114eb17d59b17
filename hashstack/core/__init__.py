from hashstack.core.config import get_config
from hashstack.core.logging import setup_logging

__all__ = ["get_config", "setup_logging"]
