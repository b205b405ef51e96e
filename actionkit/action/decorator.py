"""
The create_action decorator: turns a provider method into a registered action.

The decorator only records metadata. Collection into the per-class table
happens in ActionProvider.__init_subclass__ (see action/registry.py).

Depends on: config, errors, models, action/schema
"""

import functools
import inspect
from typing import Any, Callable, Optional

from actionkit.config import ACTION_NAME_PATTERN, MAX_ACTION_NAME_LENGTH
from actionkit.errors import ActionRegistrationError
from actionkit.models import ActionKind, ActionSpec
from actionkit.action.schema import is_schema, validate_args

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)

# Positional parameter count (including self) for each kind
_ARITY = {ActionKind.UNBOUND: 2, ActionKind.WALLET_BOUND: 3}


def _check_spec(name: Any, description: Any, schema: Any) -> None:
    if not isinstance(name, str) or not name.strip():
        raise ActionRegistrationError("Action name must be a non-empty string")
    if len(name) > MAX_ACTION_NAME_LENGTH:
        raise ActionRegistrationError(
            f"Action name '{name}' exceeds {MAX_ACTION_NAME_LENGTH} characters"
        )
    if not ACTION_NAME_PATTERN.match(name):
        raise ActionRegistrationError(
            f"Action name '{name}' may only contain letters, digits, '_' and '-'"
        )
    if not isinstance(description, str) or not description.strip():
        raise ActionRegistrationError(f"Action '{name}' needs a non-empty description")
    if not is_schema(schema):
        raise ActionRegistrationError(
            f"Action '{name}' schema must be a pydantic BaseModel subclass, got {schema!r}"
        )


def _resolve_kind(name: str, func: Callable, kind: Optional[ActionKind]) -> tuple[ActionKind, str]:
    """Return the action kind and the name of the input parameter."""
    params = [
        p for p in inspect.signature(func).parameters.values()
        if p.kind in _POSITIONAL
    ]
    arity = len(params)
    if kind is None:
        for candidate, expected in _ARITY.items():
            if arity == expected:
                kind = candidate
                break
        else:
            raise ActionRegistrationError(
                f"Action '{name}' ({func.__qualname__}) must take (self, args) or "
                f"(self, wallet_provider, args); got {arity} positional parameter(s)"
            )
    else:
        try:
            kind = ActionKind(kind)
        except (ValueError, TypeError):
            raise ActionRegistrationError(
                f"Action '{name}' has unknown kind {kind!r}; expected one of "
                f"{[k.value for k in ActionKind]}"
            ) from None
        if arity != _ARITY[kind]:
            raise ActionRegistrationError(
                f"Action '{name}' is declared {kind.value} but {func.__qualname__} "
                f"takes {arity} positional parameter(s), expected {_ARITY[kind]}"
            )
    return kind, params[-1].name


def create_action(
    name: str,
    description: str,
    schema: type,
    kind: Optional[ActionKind] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Declare a provider method as an action.

    Args:
        name: Action name, unique within the provider type.
        description: What the action does, written for the model that calls it.
        schema: pydantic model class the input must satisfy.
        kind: ActionKind.WALLET_BOUND or ActionKind.UNBOUND. When omitted the
            kind is taken from the method's positional parameters:
            ``(self, args)`` is unbound, ``(self, wallet_provider, args)`` is
            wallet-bound.

    The method keeps its signature. Calling it directly still validates the
    input argument, so ``provider.greet({"name": ""})`` raises
    ActionValidationError the same way invoking the action does, naming the
    qualified action (``example_greet``).

    Example:
        class MyProvider(ActionProvider[WalletProvider]):
            @create_action(name="greet", description="Say hello", schema=GreetInput)
            async def greet(self, args: GreetInput) -> str:
                return f"Hello, {args.name}!"
    """
    _check_spec(name, description, schema)

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if not callable(func):
            raise ActionRegistrationError(f"Action '{name}' must decorate a function")
        action_kind, input_param = _resolve_kind(name, func, kind)
        spec = ActionSpec(
            name=name,
            description=description,
            schema=schema,
            method=func,
            kind=action_kind,
        )
        n_positional = _ARITY[action_kind]

        def _validated(args: tuple, kwargs: dict) -> tuple[tuple, dict]:
            # Errors carry the same qualified name invoke() reports
            qualify = getattr(args[0], "qualified_name", None) if args else None
            label = qualify(name) if callable(qualify) else name
            if len(args) >= n_positional:
                args = args[:n_positional - 1] + (validate_args(label, schema, args[n_positional - 1]),) + args[n_positional:]
            elif input_param in kwargs:
                kwargs = dict(kwargs)
                kwargs[input_param] = validate_args(label, schema, kwargs[input_param])
            return args, kwargs

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def wrapper(*args, **kwargs):
                args, kwargs = _validated(args, kwargs)
                return await func(*args, **kwargs)
        else:
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                args, kwargs = _validated(args, kwargs)
                return func(*args, **kwargs)

        wrapper.__action_spec__ = spec
        return wrapper

    return decorator


def get_action_spec(obj: Any) -> Optional[ActionSpec]:
    """Return the ActionSpec attached by create_action, or None."""
    return getattr(obj, "__action_spec__", None)
