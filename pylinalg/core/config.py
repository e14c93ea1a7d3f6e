"""
Environment-driven defaults for the factory layer.

Explicit keyword arguments at the factory boundary always win; these only
supply the defaults. Parsing is forgiving: unset or invalid values fall back
to the built-in defaults rather than raising.

Variables:
    PYLINALG_BACKEND: 'auto' (default), 'managed' or 'accelerated'
    PYLINALG_PRECISION: 'fp64' (default) or 'fp32'
    PYLINALG_DEVICE: 'auto' (default), 'cpu' or 'gpu' for the native kernels
    PYLINALG_NATIVE_THRESHOLD: minimum entry count before the accelerated
        backend delegates to the native kernels (default 1)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal

BackendChoice = Literal['auto', 'managed', 'accelerated']

BACKENDS = ('auto', 'managed', 'accelerated')
PRECISIONS = ('fp64', 'fp32')
DEVICES = ('auto', 'cpu', 'gpu')

DEFAULT_NATIVE_THRESHOLD = 1


@dataclass(frozen=True)
class Settings:
    """Resolved defaults for one factory call."""
    backend: str = 'auto'
    precision: str = 'fp64'
    device: str = 'auto'
    native_threshold: int = DEFAULT_NATIVE_THRESHOLD


def parse_choice_env(name: str, *, choices: tuple[str, ...], default: str) -> str:
    """
    Parse an environment variable restricted to a set of choices.

    Matching is case-insensitive. Unset, empty or unknown values yield default.
    """
    raw = os.environ.get(name, "").strip().lower()
    if raw in choices:
        return raw
    return default


def parse_int_env(name: str, *, default: int, minimum: int = 0) -> int:
    """
    Parse an integer environment variable with a lower bound.

    Unset or non-integer values yield default; parsed values are clamped
    to at least minimum.
    """
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, value)


def load_settings() -> Settings:
    """Read the current environment into a Settings value."""
    return Settings(
        backend=parse_choice_env('PYLINALG_BACKEND', choices=BACKENDS, default='auto'),
        precision=parse_choice_env('PYLINALG_PRECISION', choices=PRECISIONS, default='fp64'),
        device=parse_choice_env('PYLINALG_DEVICE', choices=DEVICES, default='auto'),
        native_threshold=parse_int_env(
            'PYLINALG_NATIVE_THRESHOLD', default=DEFAULT_NATIVE_THRESHOLD, minimum=0
        ),
    )
