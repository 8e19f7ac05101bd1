"""Choice of volume algorithm, random walk and their parameters."""

from __future__ import annotations

import enum
import warnings
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_BILLIARD_WINDOW = 250
_HPOLY_ORDER_LIMIT = 5
_CG_DIMENSION_LIMIT = 200


class Representation(enum.Enum):
    """How the convex body is described."""

    HPOLYTOPE = "Hpolytope"
    VPOLYTOPE = "Vpolytope"
    ZONOTOPE = "Zonotope"
    VPOLYTOPE_INTERSECTION = "VpolytopeIntersection"


class Algorithm(enum.Enum):
    """Volume algorithms: cooling bodies, sequence of balls, cooling Gaussians."""

    CB = "CB"
    SOB = "SOB"
    CG = "CG"


class WalkKind(enum.Enum):
    """Random walks: coordinate or random directions hit-and-run, ball and billiard walk."""

    CDHR = "CDHR"
    RDHR = "RDHR"
    BALL = "BaW"
    BILLIARD = "BiW"


@dataclass(frozen=True)
class VolumeSettings:
    """Fully resolved parameters of a volume computation."""

    algorithm: Algorithm
    walk: WalkKind
    walk_length: int
    error: float
    win_len: int
    seed: int | None = None


def _representation(value: Representation | str) -> Representation:
    if isinstance(value, Representation):
        return value
    try:
        return Representation(value)
    except ValueError:
        raise ValueError("Unknown polytope representation!") from None


def _algorithm(value: Algorithm | str) -> Algorithm:
    if isinstance(value, Algorithm):
        return value
    try:
        return Algorithm(value)
    except ValueError:
        raise ValueError("Unknown method!") from None


def _walk(value: WalkKind | str) -> WalkKind:
    if isinstance(value, WalkKind):
        return value
    try:
        return WalkKind(value)
    except ValueError:
        raise ValueError("Unknown walk type!") from None


def resolve_settings(
    representation: Representation | str,
    dim: int,
    settings: Mapping[str, Any] | None = None,
) -> VolumeSettings:
    """Fill in the defaults for a body of dimension ``dim``.

    ``settings`` may hold ``algorithm``, ``error``, ``random_walk``,
    ``walk_length``, ``win_len`` and ``seed``.
    """
    rep = _representation(representation)
    if dim < 1:
        raise ValueError("dimension must be at least 1")
    settings = settings or {}
    n = dim
    win_len = 4 * n * n + 500

    seed = int(float(settings["seed"])) if "seed" in settings else None

    if "algorithm" not in settings:
        if rep is not Representation.HPOLYTOPE or n <= _CG_DIMENSION_LIMIT:
            algorithm = Algorithm.CB
        else:
            algorithm = Algorithm.CG
    else:
        algorithm = _algorithm(settings["algorithm"])

    if algorithm is Algorithm.SOB:
        default_length, default_error = 10 + n // 10, 1.0
    else:
        default_length, default_error = 1, 0.1
    walk_length = int(settings.get("walk_length", default_length))
    error = float(settings.get("error", default_error))

    cb = algorithm is Algorithm.CB
    if "random_walk" not in settings:
        if rep is Representation.HPOLYTOPE:
            walk = WalkKind.CDHR
            if cb:
                win_len = 3 * n * n + 400
        elif cb:
            walk = WalkKind.BILLIARD
            win_len = _BILLIARD_WINDOW
        else:
            walk = WalkKind.RDHR
    else:
        walk = _walk(settings["random_walk"])
        if walk in (WalkKind.CDHR, WalkKind.RDHR):
            if cb:
                win_len = 3 * n * n + 400
        elif walk is WalkKind.BILLIARD:
            if algorithm is Algorithm.CG:
                if rep is not Representation.HPOLYTOPE:
                    warnings.warn(
                        "Billiard walk is not supported for CG algorithm. RDHR is used.",
                        stacklevel=2,
                    )
                    walk = WalkKind.RDHR
                else:
                    warnings.warn(
                        "Billiard walk is not supported for CG algorithm. CDHR is used.",
                        stacklevel=2,
                    )
                    walk = WalkKind.CDHR
            else:
                win_len = _BILLIARD_WINDOW

    if error <= 0.0:
        raise ValueError("The error parameter has to be a positive number!")

    if "win_len" in settings:
        win_len = int(settings["win_len"])
        if algorithm is Algorithm.SOB:
            warnings.warn("flag 'win_len' can be used only for CG or CB algorithms.", stacklevel=2)

    return VolumeSettings(
        algorithm=algorithm,
        walk=walk,
        walk_length=walk_length,
        error=error,
        win_len=win_len,
        seed=seed,
    )


def use_hpoly(
    num_generators: int,
    dim: int,
    settings: Mapping[str, Any] | None,
    algorithm: Algorithm,
) -> bool:
    """Whether to use H-polytopes in the cooling of a zonotope.

    An explicit ``hpoly`` entry wins; otherwise it is used when the zonotope
    has order ``num_generators // dim`` below 5.
    """
    if dim < 1:
        raise ValueError("dimension must be at least 1")
    settings = settings or {}
    if "hpoly" in settings:
        hpoly = bool(settings["hpoly"])
        if hpoly and algorithm is not Algorithm.CB:
            warnings.warn(
                "flag 'hpoly' can be used to only in MMC of CB algorithm for zonotopes.",
                stacklevel=2,
            )
        return hpoly
    return num_generators // dim < _HPOLY_ORDER_LIMIT