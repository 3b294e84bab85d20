"""SDK identification headers sent with every request."""

import platform
from typing import Dict, Optional

from codeengine_client.version import __version__

HEADER_NAME_USER_AGENT = "User-Agent"
HEADER_NAME_SDK_ANALYTICS = "X-IBMCloud-SDK-Analytics"
SDK_NAME = "codeengine-python-sdk"


def get_system_info() -> str:
    return "lang=python; arch={}; os={}; python.version={}".format(
        platform.machine(),
        platform.system(),
        platform.python_version(),
    )


def get_user_agent() -> str:
    return f"{SDK_NAME}/{__version__} ({get_system_info()})"


def get_sdk_headers(
    service_name: str,
    service_version: str,
    operation_id: Optional[str],
) -> Dict[str, str]:
    """
    Build the headers that identify this SDK to the service.

    Args:
        service_name: Service name, e.g. "code_engine"
        service_version: API version label, e.g. "V2"
        operation_id: Name of the operation being invoked

    Returns:
        Dict of header names to values
    """
    analytics = f"service_name={service_name};service_version={service_version}"
    if operation_id:
        analytics += f";operation_id={operation_id}"
    return {
        HEADER_NAME_USER_AGENT: get_user_agent(),
        HEADER_NAME_SDK_ANALYTICS: analytics,
    }
