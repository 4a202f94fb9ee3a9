"""FastAPI dependencies for dependency injection."""

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import IOrderService
from core.application.services.order_service import OrderApplicationService
from core.infrastructure.database.config import get_session_factory


logger = logging.getLogger(__name__)


def get_order_service() -> IOrderService:
    """Get the order workflow service.

    Returns:
        OrderApplicationService bound to the global session factory
    """
    return OrderApplicationService(get_session_factory())
