"""Solver configuration decoding and process settings."""

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from prismcentral_solver.exceptions import ConfigDecodeError, SettingsError
from prismcentral_solver.models import ProviderConfig


def load_config(raw: Any) -> ProviderConfig:
    """Decode the per-issuer config blob of a challenge request.

    Accepts the blob either already parsed (a mapping) or as raw JSON
    text. An absent blob, or a JSON ``null``, yields an empty config.

    Args:
        raw: None, a mapping, or JSON as str/bytes.

    Returns:
        The decoded ProviderConfig.

    Raises:
        ConfigDecodeError: If the blob is not a JSON object with string fields.
    """
    if raw is None:
        return ProviderConfig()

    if isinstance(raw, (str, bytes, bytearray)):
        try:
            raw = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigDecodeError("error decoding solver config", e) from e
        if raw is None:
            return ProviderConfig()

    if not isinstance(raw, Mapping):
        raise ConfigDecodeError(
            f"error decoding solver config: expected a JSON object, got {type(raw).__name__}"
        )

    try:
        return ProviderConfig.model_validate(dict(raw))
    except ValidationError as e:
        raise ConfigDecodeError("error decoding solver config", e) from e


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read once at startup."""

    group_name: str
    host: str = "0.0.0.0"
    port: int = 8443
    tls_cert_file: str | None = None
    tls_key_file: str | None = None
    request_timeout: float = 30.0
    log_level: str = "INFO"

    @property
    def tls_enabled(self) -> bool:
        return bool(self.tls_cert_file and self.tls_key_file)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Read settings from the environment.

        Args:
            environ: Mapping to read from (defaults to os.environ).

        Returns:
            Validated Settings.

        Raises:
            SettingsError: If GROUP_NAME is missing or a value is malformed.
        """
        env = os.environ if environ is None else environ

        group_name = env.get("GROUP_NAME", "").strip()
        if not group_name:
            raise SettingsError("GROUP_NAME must be specified")

        try:
            port = int(env.get("SOLVER_PORT", "8443"))
            request_timeout = float(env.get("REQUEST_TIMEOUT", "30"))
        except ValueError as e:
            raise SettingsError(f"Invalid numeric setting: {e}") from e

        return cls(
            group_name=group_name,
            host=env.get("SOLVER_HOST", "0.0.0.0"),
            port=port,
            tls_cert_file=env.get("TLS_CERT_FILE") or None,
            tls_key_file=env.get("TLS_KEY_FILE") or None,
            request_timeout=request_timeout,
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
