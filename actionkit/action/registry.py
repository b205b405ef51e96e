"""
Process-wide table of registered actions, keyed by provider class.

Filled once per class at class-definition time and read by get_actions().

Depends on: errors, models, action/decorator
"""

from actionkit.errors import ActionRegistrationError
from actionkit.models import ActionSpec
from actionkit.action.decorator import get_action_spec

_registry: dict[type, tuple[ActionSpec, ...]] = {}


def _resolve_attr(cls: type, attr: str):
    for klass in cls.__mro__:
        if attr in vars(klass):
            return vars(klass)[attr]
    return None


def collect_actions(cls: type) -> tuple[ActionSpec, ...]:
    """Gather the action specs visible on ``cls``.

    Order is base classes first, each in class-body order. An attribute
    overridden in a subclass keeps its base-class position; overriding it
    with a plain method removes the action.

    Raises:
        ActionRegistrationError: if two attributes register the same name.
    """
    attrs: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        for attr in vars(klass):
            attrs.setdefault(attr, None)

    specs: list[ActionSpec] = []
    owners: dict[str, str] = {}
    for attr in attrs:
        spec = get_action_spec(_resolve_attr(cls, attr))
        if spec is None:
            continue
        if spec.name in owners:
            raise ActionRegistrationError(
                f"Duplicate action name '{spec.name}' on {cls.__qualname__}: "
                f"registered by both {owners[spec.name]}() and {attr}()"
            )
        owners[spec.name] = attr
        specs.append(spec)
    return tuple(specs)


def register_provider_class(cls: type) -> tuple[ActionSpec, ...]:
    """Collect and store the specs for ``cls``. Called from __init_subclass__."""
    specs = collect_actions(cls)
    _registry[cls] = specs
    return specs


def registered_actions(cls: type) -> tuple[ActionSpec, ...]:
    """Specs registered for ``cls``; empty for classes with no actions."""
    specs = _registry.get(cls)
    if specs is None:
        specs = register_provider_class(cls)
    return specs
