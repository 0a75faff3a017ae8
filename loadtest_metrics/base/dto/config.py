"""
Plugin configuration DTO and fail-fast validation.

Purpose
-------
Validate the ``cloudwatch`` plugin block of a load-test script config before
a reporter is built. Any violation raises :class:`ConfigError` so that the
reporter never subscribes to run notifications with an unusable config.

Expected shape::

    {
        "plugins": {
            "cloudwatch": {
                "namespace": "my-service/load",
                "dimensions": [{"Name": "Env", "Value": "staging"}]
            }
        }
    }

Failure messages keep the wording load-test users already know from the
plugin's documentation.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from ...config.defaults import (
    PLUGIN_NAME,
    PLUGIN_PARAM_DIMENSIONS,
    PLUGIN_PARAM_NAMESPACE,
)
from ..errors import ConfigError
from ..models_parts.dimension import Dimension, coerce_dimensions

_THE = 'The "'

MSG_PLUGIN_CONFIG_REQUIRED = (
    f'{_THE}{PLUGIN_NAME}" plugin requires configuration under <script>.config.plugins.{PLUGIN_NAME}'
)
MSG_NAMESPACE_REQUIRED = f'{_THE}{PLUGIN_PARAM_NAMESPACE}" parameter is required'
MSG_NAMESPACE_MUST_BE_STRING = f'{_THE}{PLUGIN_PARAM_NAMESPACE}" param must have a string value'
MSG_NAMESPACE_MIN_LENGTH = f'{_THE}{PLUGIN_PARAM_NAMESPACE}" param must have a length of at least one'
MSG_DIMENSIONS_MUST_BE_ARRAY = f'{_THE}{PLUGIN_PARAM_DIMENSIONS}" param must have an array value'
MSG_DIMENSIONS_INVALID = f'{_THE}{PLUGIN_PARAM_DIMENSIONS}" param must contain name/value pairs'


class MetricsConfig(BaseModel):
    """Validated plugin configuration.

    Attributes:
        namespace: Non-empty metric namespace.
        dimensions: Dimensions attached to every record; empty by default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    namespace: StrictStr = Field(min_length=1)
    dimensions: Tuple[Dimension, ...] = ()

    @field_validator("dimensions", mode="before")
    @classmethod
    def _coerce_dimensions(cls, value: Any) -> Tuple[Dimension, ...]:
        if value is None:
            return ()
        if isinstance(value, (str, bytes, Mapping)):
            raise ValueError(MSG_DIMENSIONS_MUST_BE_ARRAY)
        return coerce_dimensions(value)


def load_plugin_config(block: Any) -> MetricsConfig:
    """Validate a plugin block (the mapping under ``plugins.cloudwatch``).

    Raises:
        ConfigError: with one of the ``MSG_*`` messages.
    """
    if not isinstance(block, Mapping) or PLUGIN_PARAM_NAMESPACE not in block:
        raise ConfigError(message=MSG_NAMESPACE_REQUIRED)
    namespace = block[PLUGIN_PARAM_NAMESPACE]
    if not isinstance(namespace, str):
        raise ConfigError(message=MSG_NAMESPACE_MUST_BE_STRING)
    if len(namespace) == 0:
        raise ConfigError(message=MSG_NAMESPACE_MIN_LENGTH)
    dimensions = block.get(PLUGIN_PARAM_DIMENSIONS)
    if dimensions is not None and not isinstance(dimensions, (list, tuple)):
        raise ConfigError(message=MSG_DIMENSIONS_MUST_BE_ARRAY, namespace=namespace)
    try:
        return MetricsConfig(namespace=namespace, dimensions=dimensions)
    except ValidationError as exc:
        raise ConfigError(message=MSG_DIMENSIONS_INVALID, namespace=namespace, raw=exc) from exc


def validate_config(script_config: Any) -> MetricsConfig:
    """Validate a script config and return the plugin's ``MetricsConfig``.

    ``script_config`` is the ``config`` section of a load-test script, i.e. a
    mapping holding ``plugins``.
    """
    plugins = script_config.get("plugins") if isinstance(script_config, Mapping) else None
    if not isinstance(plugins, Mapping) or PLUGIN_NAME not in plugins:
        raise ConfigError(message=MSG_PLUGIN_CONFIG_REQUIRED)
    return load_plugin_config(plugins[PLUGIN_NAME])


__all__ = [
    "MetricsConfig",
    "load_plugin_config",
    "validate_config",
    "MSG_PLUGIN_CONFIG_REQUIRED",
    "MSG_NAMESPACE_REQUIRED",
    "MSG_NAMESPACE_MUST_BE_STRING",
    "MSG_NAMESPACE_MIN_LENGTH",
    "MSG_DIMENSIONS_MUST_BE_ARRAY",
    "MSG_DIMENSIONS_INVALID",
]
