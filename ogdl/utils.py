from typing import TypedDict, TypeVar

T = TypeVar("T", bound=TypedDict("T", {}))
U = TypeVar("U", bound=TypedDict("U", {}))


def resolve_config(config: T, default_config: U) -> U:
    """Copy of `default_config` with the values `config` sets; keys the defaults lack are dropped."""
    return {key: config.get(key, default) for key, default in default_config.items()}  # type: ignore[return-value]
