"""
Exception hierarchy for registration, composition, and invocation failures.

Depends on: (nothing, leaf module)
"""

from typing import Any, Optional


class ActionKitError(Exception):
    """Base class for every error raised by actionkit."""


class ActionRegistrationError(ActionKitError, ValueError):
    """An action spec is malformed or its name is already taken on the provider type."""


class ActionNameCollisionError(ActionRegistrationError):
    """Two descriptors in one flattened action list share a name."""

    def __init__(self, name: str, owners: tuple[str, str]):
        self.name = name
        self.owners = owners
        super().__init__(
            f"Action name '{name}' is exposed by both '{owners[0]}' and '{owners[1]}'"
        )


class ActionProviderError(ActionKitError, ValueError):
    """A provider was constructed or used incorrectly."""


class ActionValidationError(ActionKitError, ValueError):
    """Raw input did not satisfy the action's schema.

    ``errors`` holds one dict per violation with ``loc`` (field path),
    ``msg`` and ``type`` keys, in the order the validator reported them.
    """

    def __init__(self, action_name: str, errors: list[dict[str, Any]]):
        self.action_name = action_name
        self.errors = errors
        details = "; ".join(
            f"{'.'.join(str(p) for p in e['loc']) or '<input>'}: {e['msg']}"
            for e in errors
        )
        super().__init__(f"Invalid input for action '{action_name}': {details}")

    @property
    def fields(self) -> list[str]:
        """Top-level field names that failed validation."""
        return [str(e["loc"][0]) for e in self.errors if e["loc"]]

    def to_dict(self) -> dict:
        return {
            "action": self.action_name,
            "errors": [
                {"field": ".".join(str(p) for p in e["loc"]), "message": e["msg"], "type": e["type"]}
                for e in self.errors
            ],
        }


class ActionResultError(ActionKitError, TypeError):
    """An action returned something other than a string."""

    def __init__(self, action_name: str, result: Any):
        self.action_name = action_name
        self.result_type = type(result).__name__
        super().__init__(
            f"Action '{action_name}' must return str, got {self.result_type}"
        )


class ActionNotFoundError(ActionKitError, KeyError):
    """No action with the requested name is exposed."""

    def __init__(self, name: str, available: Optional[list[str]] = None):
        self.name = name
        self.available = available or []
        super().__init__(name)

    def __str__(self) -> str:
        if self.available:
            return f"Unknown action: {self.name}. Available: {', '.join(self.available)}"
        return f"Unknown action: {self.name}"
