# backend/app/api/client_ip.py
import logging
from typing import Optional

from fastapi import APIRouter, Request

from ..core.config import settings

router = APIRouter()
logger = logging.getLogger(__name__)

UNKNOWN_IP = "unknown"


def extract_client_ip(forwarded_for: Optional[str]) -> str:
    """
    Returns the first address of an X-Forwarded-For value, i.e. the original client.
    Locally there is usually no such header and the result is 'unknown'.
    """
    if not forwarded_for:
        return UNKNOWN_IP
    first = forwarded_for.split(",")[0].strip()
    return first or UNKNOWN_IP


@router.get("/get-ip")
def get_ip(request: Request):
    """Reports the caller's IP as seen through the proxy chain."""
    ip = extract_client_ip(request.headers.get(settings.FORWARDED_FOR_HEADER))
    logger.debug(f"Resolved client IP: {ip}")
    return {"ip": ip}
