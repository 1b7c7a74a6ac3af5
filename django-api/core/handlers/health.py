"""Liveness and readiness checks."""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from core.connection import storage_handle
from core.errors import StorageFailureError

logger = logging.getLogger(__name__)


class HealthView(APIView):
    """Handler for GET /api/health"""

    def get(self, request: Request) -> Response:
        return Response({"status": "healthy"})


class ReadinessView(APIView):
    """Handler for GET /api/health/ready"""

    def get(self, request: Request) -> Response:
        try:
            storage_handle.acquire()
        except StorageFailureError:
            logger.warning("Readiness check failed: storage unavailable")
            return Response(
                {"status": "not_ready", "reason": "storage_unavailable"},
                status=status.HTTP_503_SERVICE_UNAVAILABLE,
            )
        return Response({"status": "ready", "checks": {"storage": "healthy"}})
