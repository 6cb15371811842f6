"""
fanlog Models Package

Provides:
- Pydantic models for logger configuration files
- ValidationEngine for config validation
- Data classes for validation results
"""

from .config import (
    TransportConfig,
    LoggerConfig,
    ValidationResult,
    ValidationError,
    TRANSPORT_TYPES,
)

from .validator import (
    ValidationEngine,
    validate_config_file,
)

__all__ = [
    "TransportConfig",
    "LoggerConfig",
    "ValidationResult",
    "ValidationError",
    "TRANSPORT_TYPES",
    "ValidationEngine",
    "validate_config_file",
]
