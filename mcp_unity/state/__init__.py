from .runtime import RuntimeDeps
from .pending import PendingRequest
from .settings import AppSettings

__all__ = ["AppSettings", "PendingRequest", "RuntimeDeps"]
