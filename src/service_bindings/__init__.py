"""Read Service Binding Specification for Kubernetes workload projections."""

from service_bindings.binding import PROVIDER, TYPE, Binding
from service_bindings.bindings import filter, find, from_path, from_service_binding_root
from service_bindings.config import DEFAULT_ROOT, SERVICE_BINDING_ROOT, BindingsConfig, load_config
from service_bindings.errors import (
    BindingEncodingError,
    BindingError,
    BindingIOError,
    ConfigError,
    MissingTypeError,
)
from service_bindings.secret import is_valid_secret_key

__all__ = [
    "Binding",
    "BindingEncodingError",
    "BindingError",
    "BindingIOError",
    "BindingsConfig",
    "ConfigError",
    "DEFAULT_ROOT",
    "MissingTypeError",
    "PROVIDER",
    "SERVICE_BINDING_ROOT",
    "TYPE",
    "filter",
    "find",
    "from_path",
    "from_service_binding_root",
    "is_valid_secret_key",
    "load_config",
]
