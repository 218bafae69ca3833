"""SSI client: signed request URLs and response parsing for SSI credential flows."""

# Hide module imports
from . import client, config, models
from .client import SSIClient
from .config import SSIClientSettings
from .models import (
    CredentialIssueResponse,
    CredentialResponse,
    CredentialVerifyResponse,
    ResponseStatus,
    SSIData,
    SSIFunction,
)

del client, config, models

__version__ = "0.1.0"


__all__ = [
    "__version__",
    # Client
    "SSIClient",
    # Configuration
    "SSIClientSettings",
    # Response types
    "CredentialResponse",
    "CredentialVerifyResponse",
    "CredentialIssueResponse",
    "ResponseStatus",
    "SSIData",
    "SSIFunction",
]
