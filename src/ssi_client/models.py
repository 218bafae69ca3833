"""Claims and response types exchanged with the SSI service provider."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

SSIData = dict[str, Union[str, int, float, bool, None]]

SSIFunction = Literal["verify", "issue"]

VERIFY_REQUEST_SUBJECT = "credential-verify-request"
ISSUE_REQUEST_SUBJECT = "credential-issue-request"
VERIFY_RESPONSE_SUBJECT = "credential-verify-response"
ISSUE_RESPONSE_SUBJECT = "credential-issue-response"


class ResponseStatus(str, Enum):
    """Outcome of a credential request as reported by the provider.

    The provider spells the success status ``"succes"`` on the wire; the
    correct spelling is accepted as well. Responses are validated strictly
    otherwise: an unknown status or a non-string ``requestId`` is rejected
    rather than passed through.
    """

    SUCCESS = "succes"
    ERROR = "error"
    CANCELLED = "cancelled"

    @classmethod
    def _missing_(cls, value: object) -> Optional["ResponseStatus"]:
        if value == "success":
            return cls.SUCCESS
        return None


class CredentialResponse(BaseModel):
    """Fields shared by every provider response."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    type: str
    status: ResponseStatus
    connector: str
    request_id: str = Field(alias="requestId")


class CredentialVerifyResponse(CredentialResponse):
    """Response to a verify request, carrying the disclosed attributes."""

    data: Optional[SSIData] = None


class CredentialIssueResponse(CredentialResponse):
    """Response to an issue request."""
