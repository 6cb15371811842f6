"""
Pydantic models for fanlog configuration files.

A configuration lists the transports a Logger writes to:

    transports:
      - type: stdout
      - type: file
        path: logs/app.log
"""

from typing import List, Optional
from dataclasses import dataclass, field
from pydantic import BaseModel, ConfigDict, Field, field_validator


TRANSPORT_TYPES = ("stdout", "stderr", "file")


class TransportConfig(BaseModel):
    """One output destination"""
    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., pattern=r'^(stdout|stderr|file)$')
    path: Optional[str] = Field(None, validate_default=True)
    mode: str = Field(default="a", pattern=r'^[aw]$')
    encoding: str = Field(default="utf-8", min_length=1)
    interactive: Optional[bool] = None  # None = detect from the stream

    @field_validator('path')
    @classmethod
    def path_required_for_files(cls, v, info):
        """Files need a path; streams must not have one"""
        kind = info.data.get('type')
        if kind == "file" and not v:
            raise ValueError("'path' is required when type=file")
        if kind in ("stdout", "stderr") and v:
            raise ValueError(f"'path' is not valid for type={kind}")
        return v

    def summary(self) -> str:
        text = f"file {self.path} ({self.mode})" if self.type == "file" else self.type
        if self.interactive is not None:
            text += " interactive" if self.interactive else " plain"
        return text


class LoggerConfig(BaseModel):
    """Complete logger configuration"""
    model_config = ConfigDict(extra="forbid")

    transports: List[TransportConfig] = Field(default_factory=list)

    def file_paths(self) -> List[str]:
        return [t.path for t in self.transports if t.type == "file"]


@dataclass
class ValidationError:
    """Represents a validation error"""
    field: str
    message: str
    severity: str = "error"  # error, warning


@dataclass
class ValidationResult:
    """Outcome of checking a config: problems found and the transports it would open"""
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)
    warnings: List[ValidationError] = field(default_factory=list)
    transports: List[str] = field(default_factory=list)  # "stdout", "file logs/app.log (a)", ...

    def add_error(self, field: str, message: str):
        self.errors.append(ValidationError(field, message, "error"))
        self.is_valid = False

    def add_warning(self, field: str, message: str):
        self.warnings.append(ValidationError(field, message, "warning"))

    def format_report(self) -> str:
        """Report for `fanlog --validate`"""
        if self.is_valid:
            lines = [f"[OK] Config validation passed ({len(self.transports)} transports)"]
            lines.extend(f"  - {summary}" for summary in self.transports)
        else:
            lines = ["[ERROR] Config validation failed"]
            lines.extend(f"  {error.field}: {error.message}" for error in self.errors)

        if self.warnings:
            lines.append("[WARNINGS]")
            lines.extend(f"  {warning.field}: {warning.message}" for warning in self.warnings)

        return "\n".join(lines)
