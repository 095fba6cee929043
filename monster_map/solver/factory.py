"""
Strategy Factory Module - Name-keyed registry of puzzle strategies.

Strategies register themselves on import of the strategies package;
"roughness" is always present and is the default.
"""

from typing import Any, Dict, List, Optional, Type

from .base import SolverStrategy


_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}

DEFAULT_STRATEGY = "roughness"


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a strategy to the registry under `cls.name`.

    Raises:
        ValueError: If another class already uses that name
    """
    existing = _STRATEGIES.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(
            f"Strategy name '{cls.name}' already registered by {existing.__name__}"
        )
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: Optional[str] = None, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name; None selects DEFAULT_STRATEGY
        **kwargs: Passed to the strategy constructor

    Raises:
        ValueError: If the name is not registered
    """
    name = name or DEFAULT_STRATEGY
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown strategy: {name}. Available: {', '.join(_STRATEGIES)}"
        ) from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    return list(_STRATEGIES)


def get_strategy_info() -> List[Dict[str, str]]:
    """Name and description of each strategy, for --list-strategies."""
    return [
        {"name": cls.name, "description": cls.description}
        for cls in _STRATEGIES.values()
    ]


def get_default_strategy_name() -> str:
    return DEFAULT_STRATEGY
