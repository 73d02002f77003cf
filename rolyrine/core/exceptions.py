"""Unified codec exception taxonomy.

Provides a shared base exception hierarchy for the codec, its adapters
and the HTTP boundary.  Every domain exception inherits from
``CodecError`` and carries structured context fields so that each host
boundary can translate it into its own error convention without string
parsing.

Taxonomy categories
-------------------
- ``ValidationError``   — caller input violations (bad string, bad
  coordinate, bad precision), never retryable.
- ``ContractError``     — request/payload shape drift at a boundary,
  never retryable.

Anything raised directly from ``CodecError`` reports the ``permanent``
category.

Codec errors are deterministic: the same input always fails the same
way, so nothing in this hierarchy is retryable by default.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for HTTP responses and logging.
"""

from __future__ import annotations


class CodecError(Exception):
    """Base exception for all codec-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Operation where the error occurred
            (e.g. ``"encode"``, ``"decode"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"POLYLINE_MALFORMED"``).
        retryable: Whether retrying the same call could succeed.
        correlation_id: Request correlation identifier.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        self.correlation_id = correlation_id
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
            "correlation_id": self.correlation_id,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(CodecError):
    """Caller input failed validation. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(CodecError):
    """Request or payload shape drift at a boundary. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]
