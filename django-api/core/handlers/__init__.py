from core.handlers.exceptions import domain_exception_handler
from core.handlers.health import HealthView, ReadinessView

__all__ = ["domain_exception_handler", "HealthView", "ReadinessView"]
