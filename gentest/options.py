"""Command-line option helpers for the test runner."""

from __future__ import annotations

import math
import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

_UINT64_MASK = (1 << 64) - 1
_SIZE_LIMIT = 1 << 62
_REPEAT_CAP = 1_000_000

_DOUBLE_PREFIX = re.compile(
    r"\s*([+-]?(?:"
    r"0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?"
    r"|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan"
    r"))",
    re.IGNORECASE,
)


@dataclass
class BenchConfig:
    """Timing limits and epoch counts for benchmark runs."""

    min_epoch_time_s: float = 0.01
    max_total_time_s: float = 1.0
    warmup_epochs: int = 1
    measure_epochs: int = 12


def get_arg_value(args: Sequence[str], prefix: str) -> Optional[str]:
    """The remainder of the first argument starting with ``prefix``, or None."""
    for arg in args:
        if arg is not None and arg.startswith(prefix):
            return arg[len(prefix):]
    return None


def has_flag(args: Sequence[str], flag: str) -> bool:
    """True if ``flag`` appears exactly as one of the arguments."""
    return any(arg == flag for arg in args if arg is not None)


def _digits_only(text: str) -> bool:
    return all("0" <= ch <= "9" for ch in text)


def parse_seed(args: Sequence[str]) -> int:
    """The first non-zero decimal value following ``--seed``, or 0."""
    for flag, value in zip(args, args[1:]):
        if flag == "--seed" and value is not None and _digits_only(value):
            seed = int(value) & _UINT64_MASK if value else 0
            if seed:
                return seed
    return 0


def parse_repeat(args: Sequence[str]) -> int:
    """The ``--repeat=N`` count, capped at one million; 1 when absent or invalid."""
    value = get_arg_value(args, "--repeat=")
    if value is None:
        return 1
    n = 0
    for ch in value:
        if not "0" <= ch <= "9":
            n = 0
            break
        n = n * 10 + (ord(ch) - ord("0"))
        if n > _REPEAT_CAP:
            n = _REPEAT_CAP
            break
    return n or 1


def _parse_size(text: Optional[str], default: int) -> int:
    if text is None:
        return default
    n = 0
    for ch in text:
        if not "0" <= ch <= "9":
            return default
        n = n * 10 + (ord(ch) - ord("0"))
        if n > _SIZE_LIMIT:
            return default
    return n


def _parse_double(text: Optional[str], default: float) -> float:
    if text is None:
        return default
    match = _DOUBLE_PREFIX.match(text)
    if not match:
        return default
    token = match.group(1)
    try:
        if "x" in token.lower():
            value = float.fromhex(token)
        else:
            value = float(token)
    except (ValueError, OverflowError):
        return default
    if math.isinf(value) and "inf" not in token.lower():
        return default
    return value


def parse_bench_config(args: Sequence[str]) -> BenchConfig:
    """Build a BenchConfig from ``--bench-*`` options; invalid values keep defaults."""
    cfg = BenchConfig()
    cfg.min_epoch_time_s = _parse_double(
        get_arg_value(args, "--bench-min-epoch-time-s="), cfg.min_epoch_time_s
    )
    cfg.max_total_time_s = _parse_double(
        get_arg_value(args, "--bench-max-total-time-s="), cfg.max_total_time_s
    )
    cfg.warmup_epochs = _parse_size(get_arg_value(args, "--bench-warmup="), cfg.warmup_epochs)
    cfg.measure_epochs = _parse_size(get_arg_value(args, "--bench-epochs="), cfg.measure_epochs)
    if cfg.measure_epochs == 0:
        cfg.measure_epochs = 1
    return cfg


def use_color(args: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> bool:
    """Colour is on unless ``--no-color`` is given or NO_COLOR/GENTEST_NO_COLOR is set."""
    env = os.environ if environ is None else environ
    if has_flag(args, "--no-color"):
        return False
    return not (env.get("NO_COLOR") or env.get("GENTEST_NO_COLOR"))


def github_annotations_enabled(
    args: Sequence[str], environ: Optional[Mapping[str, str]] = None
) -> bool:
    """True with ``--github-annotations`` or when GITHUB_ACTIONS is set non-empty."""
    env = os.environ if environ is None else environ
    return has_flag(args, "--github-annotations") or bool(env.get("GITHUB_ACTIONS"))