"""Configuration adapter implementation.

Concrete implementation of the ConfigurationPort interface.
Loads configuration from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, cast

from pydantic import ValidationError

from ..domain.exceptions import ConfigurationException
from ..domain.models import LOG_LEVELS, ServiceConfiguration
from ..ports.configuration import ConfigurationPort

DEFAULT_API_DOC_PATH = Path(__file__).resolve().parent.parent / "openapi.json"

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"", "0", "false", "no", "off"})


def parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean flag from an environment variable value.

    Args:
        name: Variable name, used in error messages
        raw: Raw variable value

    Returns:
        bool: Parsed flag

    Raises:
        ValueError: If the value is not a recognized boolean
    """
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw!r}")


class EnvironmentConfigurationAdapter(ConfigurationPort):
    """Adapter that loads configuration from environment variables."""

    def load_configuration(self) -> ServiceConfiguration:
        """Load service configuration from environment variables.

        Returns:
            ServiceConfiguration: Validated configuration

        Raises:
            ConfigurationException: If configuration is invalid
        """
        try:
            raw_port = os.getenv("PORT", "3000").strip()
            try:
                port = int(raw_port)
            except ValueError:
                raise ValueError(f"Invalid port: {raw_port!r}") from None

            host = os.getenv("HOST", "0.0.0.0")  # nosec B104
            # Blank labels count as unset
            environment = (
                os.getenv("ENVIRONMENT", "").strip()
                or os.getenv("NODE_ENV", "").strip()
                or "production"
            )
            trust_proxy = parse_bool("TRUST_PROXY", os.getenv("TRUST_PROXY", "false"))
            log_level = os.getenv("LOG_LEVEL", "INFO").upper()
            api_doc_path = Path(os.getenv("OPENAPI_SPEC_PATH") or DEFAULT_API_DOC_PATH)

            if log_level not in LOG_LEVELS:
                raise ValueError(f"Invalid log level: {log_level}")

            return ServiceConfiguration(
                port=port,
                host=host,
                environment=environment,
                trust_proxy=trust_proxy,
                log_level=cast(Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], log_level),
                api_doc_path=api_doc_path,
            )

        except (ValueError, ValidationError) as e:
            raise ConfigurationException(f"Failed to load configuration: {str(e)}") from e
