"""Cliente Python para la API REST de RbxStats (offsets, exploits, versiones)."""

from rbxstats.client import AsyncRbxStatsClient, RbxStatsClient
from rbxstats.core.domain.models import DEFAULT_BASE_URL, ClientConfig
from rbxstats.core.errors import (
    BadStatusError,
    MalformedResponseError,
    RbxStatsError,
    RequestFailedError,
)

__version__ = "0.1.0"

__all__ = [
    "AsyncRbxStatsClient",
    "BadStatusError",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "MalformedResponseError",
    "RbxStatsClient",
    "RbxStatsError",
    "RequestFailedError",
]
