"""
PaletteEngine Request ID Utilities
Generate unique request IDs for tracing palette requests through the logs.
"""
import uuid
from datetime import datetime

REQUEST_ID_PREFIX = "pal"


def generate_request_id() -> str:
    """
    Generate a unique request ID for tracking.

    Returns:
        Request ID of the form ``pal-<YYYYmmddHHMMSS>-<8 hex chars>``
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = uuid.uuid4().hex[:8]
    return f"{REQUEST_ID_PREFIX}-{timestamp}-{short_uuid}"

