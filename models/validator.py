"""
ValidationEngine for fanlog configuration files.
Runs Pydantic model validation, then consistency checks across transports.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union
from pydantic import ValidationError as PydanticValidationError

from .config import LoggerConfig, ValidationResult


class ValidationEngine:
    """
    Two-layer validation for logger configs.

    Validation layers:
    1. Pydantic model validation (types, required fields, allowed values)
    2. Consistency checks (duplicate files, empty transport list)
    """

    def validate(self, data: Any) -> Tuple[ValidationResult, Optional[LoggerConfig]]:
        """
        Validate parsed configuration data

        Args:
            data: Parsed YAML document (dict, or None for an empty file)

        Returns:
            Tuple of (result, config); config is None when invalid
        """
        result = ValidationResult(is_valid=True)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            result.add_error("root", f"expected a mapping, got {type(data).__name__}")
            return result, None

        try:
            config = LoggerConfig.model_validate(data)
        except PydanticValidationError as e:
            for err in e.errors():
                loc = ".".join(str(part) for part in err["loc"]) or "root"
                result.add_error(loc, err["msg"])
            return result, None

        self._check_consistency(config, result)
        result.transports = [t.summary() for t in config.transports]
        return result, config

    def _check_consistency(self, config: LoggerConfig, result: ValidationResult):
        if not config.transports:
            result.add_warning("transports", "no transports configured; messages will be discarded")

        seen: Dict[str, int] = {}
        for i, path in enumerate(config.file_paths()):
            key = os.path.abspath(path)
            if key in seen:
                result.add_warning(f"transports.{i}.path", f"'{path}' is already used by another file transport")
            seen[key] = i

    def validate_file(self, path: Union[str, Path]) -> Tuple[ValidationResult, Optional[LoggerConfig]]:
        """Load a YAML file and validate it"""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            result = ValidationResult(is_valid=True)
            result.add_error("file", f"config file not found: {path}")
            return result, None
        except (OSError, UnicodeDecodeError) as e:
            result = ValidationResult(is_valid=True)
            result.add_error("file", f"cannot read config file {path}: {e}")
            return result, None
        except yaml.YAMLError as e:
            result = ValidationResult(is_valid=True)
            result.add_error("yaml", str(e))
            return result, None
        return self.validate(data)


def validate_config_file(path: Union[str, Path]) -> ValidationResult:
    """Convenience: validate a config file and return only the result"""
    result, _ = ValidationEngine().validate_file(path)
    return result
