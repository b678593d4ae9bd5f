"""Solver configuration and validated partial updates of it."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional, Tuple


def _option(default: Any, doc: Tuple[str, ...], low: Any, high: Any = None) -> Any:
    return field(default=default, metadata={"doc": doc, "range": (low, high)})


@dataclass
class SolverConfig:
    """Configurable parameters used during solving."""

    vsids_decay: float = _option(
        0.95,
        (
            " Multiplicative decay for the VSIDS decision heuristic.",
            "",
            " [default: 0.95]  [range: 0.5..1.0]",
        ),
        0.5,
        1.0,
    )
    clause_activity_decay: float = _option(
        0.999,
        (
            " Multiplicative decay for clause activities.",
            "",
            " [default: 0.999]  [range: 0.5..1.0]",
        ),
        0.5,
        1.0,
    )
    reduce_locals_interval: int = _option(
        15000,
        (
            " Number of conflicts between local clause reductions.",
            "",
            " [default: 15000]  [range: 1..]",
        ),
        1,
    )
    reduce_mids_interval: int = _option(
        10000,
        (
            " Number of conflicts between mid clause reductions.",
            "",
            " [default: 10000]  [range: 1..]",
        ),
        1,
    )
    luby_restart_interval_scale: int = _option(
        128,
        (
            " Scaling factor for luby sequence based restarts (number of conflicts).",
            "",
            " [default: 128]  [range: 1..]",
        ),
        1,
    )


def _range_text(low: Any, high: Any) -> str:
    return f"{low}..{'' if high is None else high}"


def _check_value(name: str, value: Any, default: Any, low: Any, high: Any) -> None:
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer but was set to {value!r}")
    elif isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number but was set to {value!r}")
    if value < low or (high is not None and value >= high):
        raise ValueError(
            f"{name} must be in range {_range_text(low, high)} but was set to {value!r}"
        )


@dataclass
class SolverConfigUpdate:
    """Updates configuration values of :class:`SolverConfig`.

    Fields left as ``None`` keep the value of the configuration they are applied to.
    """

    vsids_decay: Optional[float] = None
    clause_activity_decay: Optional[float] = None
    reduce_locals_interval: Optional[int] = None
    reduce_mids_interval: Optional[int] = None
    luby_restart_interval_scale: Optional[int] = None

    def _set_values(self) -> dict:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def apply(self, config: SolverConfig) -> None:
        """Apply the update to ``config``.

        Every value is checked before any is written, so on error the
        configuration is left unchanged.
        """
        updates = self._set_values()
        for config_field in fields(SolverConfig):
            if config_field.name in updates:
                low, high = config_field.metadata["range"]
                _check_value(
                    config_field.name,
                    updates[config_field.name],
                    config_field.default,
                    low,
                    high,
                )
        for name, value in updates.items():
            setattr(config, name, value)

    def merge(self, other: SolverConfigUpdate) -> None:
        """Add ``other`` to this update, its set values taking precedence."""
        for name, value in other._set_values().items():
            setattr(self, name, value)


def config_help() -> str:
    """Return a text describing all supported configuration options."""
    parts = []
    for config_field in fields(SolverConfig):
        parts.append(f"{config_field.name}:\n")
        for line in config_field.metadata["doc"]:
            parts.append(f"   {line}\n" if line else "\n")
        parts.append("\n")
    return "".join(parts)