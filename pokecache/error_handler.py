"""Error payload helpers for the HTTP layer."""
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while serving %s: %s", (context or {}).get("path", "request"), exc, exc_info=exc)
        return {"error": "internal error"}

    def remote_failure(self, exc: Exception) -> Dict[str, Any]:
        return {"error": str(exc)}

    def not_found(self) -> Dict[str, Any]:
        return {"error": "not found"}
