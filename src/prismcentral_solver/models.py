"""Pydantic models for challenge requests, solver config and trigger payloads."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

TRIGGER_TYPE = "incoming_webhook_trigger"
TRIGGER_OPERATION = "Add"

CHALLENGE_API_VERSION = "acme.cert-manager.io/v1alpha1"

# =============================================================================
# Webhook transport (ChallengePayload envelope)
# =============================================================================


class ChallengeAction(StrEnum):
    """Actions the certificate controller asks a solver to perform."""

    PRESENT = "Present"
    CLEAN_UP = "CleanUp"


class ChallengeRequest(BaseModel):
    """A DNS-01 challenge request as sent by the certificate controller."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    uid: str = ""
    action: str = ""
    type: str = ""
    dns_name: str = Field(default="", alias="dnsName")
    key: str = ""
    resource_namespace: str = Field(default="", alias="resourceNamespace")
    resolved_fqdn: str = Field(default="", alias="resolvedFQDN")
    resolved_zone: str = Field(default="", alias="resolvedZone")
    allow_ambient_credentials: bool = Field(default=False, alias="allowAmbientCredentials")
    config: Any = None


class Status(BaseModel):
    """Failure detail attached to a challenge response."""

    status: str = "Failure"
    message: str = ""
    reason: str = ""


class ChallengeResponse(BaseModel):
    """Outcome of a challenge request."""

    uid: str = ""
    success: bool
    status: Status | None = None


class ChallengePayload(BaseModel):
    """Request/response envelope exchanged with the certificate controller."""

    model_config = ConfigDict(populate_by_name=True)

    api_version: str = Field(default=CHALLENGE_API_VERSION, alias="apiVersion")
    kind: str = "ChallengePayload"
    request: ChallengeRequest | None = None
    response: ChallengeResponse | None = None


# =============================================================================
# Solver configuration
# =============================================================================


class ProviderConfig(BaseModel):
    """Per-issuer solver configuration.

    Decoded from the opaque ``config`` blob of a challenge request. Every
    field is a plain string and an absent (or null) field is empty.
    """

    model_config = ConfigDict(populate_by_name=True)

    username: str = ""
    password: str = Field(default="", repr=False)
    api_endpoint: str = Field(default="", alias="apiEndpoint")
    webhook_id: str = Field(default="", alias="webhookID")
    cleanup_webhook_id: str = Field(default="", alias="cleanupWebhookID")

    @field_validator("*", mode="before")
    @classmethod
    def null_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


# =============================================================================
# Outbound trigger payload
# =============================================================================


class TriggerInstance(BaseModel):
    """A single trigger instance; string1-4 are positional arguments."""

    webhook_id: str
    string1: str
    string2: str
    string3: str
    string4: str


class TriggerPayload(BaseModel):
    """Request body accepted by the incoming webhook trigger endpoint."""

    trigger_type: str = TRIGGER_TYPE
    trigger_instance_list: list[TriggerInstance]

    @classmethod
    def for_challenge(cls, webhook_id: str, request: ChallengeRequest) -> "TriggerPayload":
        """Build the payload announcing a challenge record.

        Args:
            webhook_id: Identifier of the webhook to trigger.
            request: The challenge request being solved.

        Returns:
            A payload with a single trigger instance.
        """
        return cls(
            trigger_instance_list=[
                TriggerInstance(
                    webhook_id=webhook_id,
                    string1=TRIGGER_OPERATION,
                    string2=request.key,
                    string3=request.resolved_fqdn,
                    string4=request.resolved_zone,
                )
            ]
        )
