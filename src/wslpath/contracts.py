"""Unified tool response envelope contracts.

Every MCP tool wraps its payload through this module so success and error
responses keep the same shape.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

FormatName = Literal["windows", "unix", "any"]


class ToolError(BaseModel):
    """Structured business error for tool payloads."""

    code: str = Field(description="Stable machine-readable error code")
    message: str = Field(description="Human-readable error summary")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional structured error details"
    )


class ToolEnvelope(BaseModel):
    """Unified response shape for all tool results."""

    ok: bool = Field(description="Business-level success flag")
    data: Any | None = Field(default=None, description="Tool-specific payload")
    error: ToolError | None = Field(default=None, description="Structured error payload")

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("ok=true responses must not include error")
        if not self.ok and self.error is None:
            raise ValueError("ok=false responses must include error")
        return self


class TranslationData(BaseModel):
    """Inner `data` schema for path tools."""

    input: str
    output: str
    source_format: FormatName
    target_format: FormatName
    rootfs_fallback: bool = False


class MappingsData(BaseModel):
    """Inner `data` schema for the environment snapshot tool."""

    volumes: dict[str, str]
    unc_volumes: dict[str, str]
    rootfs_path: str | None = None
    resolve_relative: bool


def build_ok(data: Any) -> dict[str, Any]:
    """Build and validate a success envelope."""
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    *,
    data: Any | None = None,
) -> dict[str, Any]:
    """Build and validate an error envelope."""
    return ToolEnvelope(
        ok=False,
        data=data,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_translation_data(
    *,
    input: str,
    output: str,
    source_format: FormatName,
    target_format: FormatName,
    rootfs_fallback: bool = False,
) -> dict[str, Any]:
    """Build and validate path tool `data` payloads."""
    return TranslationData(
        input=input,
        output=output,
        source_format=source_format,
        target_format=target_format,
        rootfs_fallback=rootfs_fallback,
    ).model_dump()
