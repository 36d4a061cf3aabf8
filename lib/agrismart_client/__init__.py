from .client import AgriSmartClient
from .config_types import ClientConfig
from .endpoints import API_ENDPOINTS
from .errors import AgriSmartClientError, ApiError, AuthError, NetworkError, StorageError
from .storage import FileTokenStore, MemoryTokenStore, Session

__all__ = [
    "AgriSmartClient",
    "ClientConfig",
    "API_ENDPOINTS",
    "AgriSmartClientError",
    "ApiError",
    "AuthError",
    "NetworkError",
    "StorageError",
    "FileTokenStore",
    "MemoryTokenStore",
    "Session",
]
