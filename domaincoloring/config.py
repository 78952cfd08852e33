"""
Shader configuration records.

Keyword flags such as ``all``, ``rect`` or ``phase`` are shorthands; they are
expanded and their precedence resolved once, when the record is built, so the
shaders only ever read plain resolved fields.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Tuple, Union

from .types.shader_kind import MagnitudeMode, ShaderKind

DEFAULT_AXES: Tuple[float, float, float, float] = (-1.0, 1.0, -1.0, 1.0)
DEFAULT_PIXELS: Tuple[int, int] = (720, 720)

DEFAULT_GRID_TOLERANCE = 0.03
STRIPES_PER_UNIT = 5.0
STRIPES_PER_TURN = 32.0


@dataclass(frozen=True, slots=True)
class DomainColorConfig:
    """Resolved options of the domain coloring shader."""
    magnitude: MagnitudeMode = MagnitudeMode.NONE
    grid: bool = False
    grid_tolerance: float = DEFAULT_GRID_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, "magnitude", MagnitudeMode(self.magnitude))
        if not self.grid_tolerance >= 0:
            raise ValueError(f"grid_tolerance must be >= 0, got {self.grid_tolerance}")

    @classmethod
    def from_flags(
        cls,
        *,
        abs: bool = False,
        logabs: bool = False,
        grid: bool = False,
        all: bool = False,
        grid_tolerance: float = DEFAULT_GRID_TOLERANCE,
    ) -> DomainColorConfig:
        """
        Resolve the user-facing flags.

        ``all`` means ``abs=True, grid=True``; ``logabs`` takes precedence over ``abs``.
        """
        if all:
            abs = True
            grid = True
        if logabs:
            magnitude = MagnitudeMode.LOGABS
        elif abs:
            magnitude = MagnitudeMode.ABS
        else:
            magnitude = MagnitudeMode.NONE
        return cls(magnitude=magnitude, grid=bool(grid), grid_tolerance=float(grid_tolerance))


@dataclass(frozen=True, slots=True)
class CheckerConfig:
    """Resolved stripe tests of the checker plot shader."""
    real: bool = True
    imag: bool = True
    angle: bool = False
    abs: bool = False
    real_rate: float = STRIPES_PER_UNIT
    imag_rate: float = STRIPES_PER_UNIT
    angle_rate: float = STRIPES_PER_TURN
    abs_rate: float = STRIPES_PER_UNIT

    def __post_init__(self):
        for name in ("real_rate", "imag_rate", "angle_rate", "abs_rate"):
            rate = getattr(self, name)
            if not rate > 0:
                raise ValueError(f"{name} must be positive, got {rate}")

    @property
    def enabled(self) -> Tuple[str, ...]:
        return tuple(
            name for name in ("real", "imag", "angle", "abs") if getattr(self, name)
        )

    @classmethod
    def from_flags(
        cls,
        *,
        real: bool = False,
        imag: bool = False,
        rect: bool = False,
        angle: bool = False,
        abs: bool = False,
        phase: bool = False,
        polar: bool = False,
        **rates: float,
    ) -> CheckerConfig:
        """
        Resolve the user-facing flags.

        ``rect`` expands to ``real`` + ``imag``, ``phase`` (alias ``polar``) to
        ``angle`` + ``abs``. With no flag set the plot defaults to ``rect``.
        Stripe rates may be overridden with ``real_rate``, ``imag_rate``,
        ``angle_rate`` and ``abs_rate``.
        """
        if not (real or imag or rect or angle or abs or phase or polar):
            rect = True
        phase = phase or polar
        return cls(
            real=bool(real or rect),
            imag=bool(imag or rect),
            angle=bool(angle or phase),
            abs=bool(abs or phase),
            **{name: float(rate) for name, rate in rates.items()},
        )


@dataclass(frozen=True, slots=True)
class PhaseConfig:
    """The colorblind-safe phase plots take no options."""

    @classmethod
    def from_flags(cls) -> PhaseConfig:
        return cls()


ShaderConfig = Union[DomainColorConfig, CheckerConfig, PhaseConfig]

_config_classes = {
    ShaderKind.DOMAINCOLOR: DomainColorConfig,
    ShaderKind.CHECKER: CheckerConfig,
    ShaderKind.PDPHASE: PhaseConfig,
    ShaderKind.TPHASE: PhaseConfig,
}


def config_for(kind: Union[ShaderKind, str], **flags: Any) -> ShaderConfig:
    """
    Build the resolved configuration for a shader kind from keyword flags.

    Raises:
        TypeError: for flags the shader does not understand.
        ValueError: for an unknown shader kind or invalid parameter values.
    """
    return _config_classes[ShaderKind(kind)].from_flags(**flags)


def validate_config(kind: Union[ShaderKind, str], config: ShaderConfig) -> ShaderConfig:
    """Check that ``config`` belongs to ``kind``."""
    expected = _config_classes[ShaderKind(kind)]
    if not isinstance(config, expected):
        raise TypeError(
            f"{ShaderKind(kind).value} shader expects {expected.__name__}, got {type(config).__name__}"
        )
    return config
