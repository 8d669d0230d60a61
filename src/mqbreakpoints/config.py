"""
Transform configuration.

Defaults for behaviour the stylesheet does not decide itself. Option
declarations inside a stylesheet (breakpoints-device, breakpoints-use-only)
override use_only and device_width for that run.

Config file format (YAML):

    breakpoints:
      use_only: false
      device_width: false
      prune_empty_rules: true
      fractional_delta: "0.0001"
      match_mode: word
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

import yaml

from mqbreakpoints.errors import BreakpointConfigError
from mqbreakpoints.model import DEFAULT_FRACTIONAL_DELTA, MediaOptions
from mqbreakpoints.rewriter import MatchMode


@dataclass(frozen=True)
class TransformConfig:
    """
    Properties:
        use_only:
            Default media type is "only screen" instead of "screen"
        device_width:
            Default to *-device-width features
        prune_empty_rules:
            Drop rules left without declarations once breakpoints are removed
        fractional_delta:
            Tie-break delta between adjacent em/rem tiers
        match_mode:
            MatchMode used when rewriting media selectors
    """

    use_only: bool = False
    device_width: bool = False
    prune_empty_rules: bool = True
    fractional_delta: Decimal = DEFAULT_FRACTIONAL_DELTA
    match_mode: MatchMode = MatchMode.WORD

    @property
    def media_options(self) -> MediaOptions:
        return MediaOptions(device_width=self.device_width, use_only=self.use_only)

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> "TransformConfig":
        if not d:
            return cls()
        if not isinstance(d, dict):
            raise BreakpointConfigError(f"Config must be a mapping, got {type(d).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise BreakpointConfigError(f"Unknown config keys: {unknown}")

        kwargs: Dict[str, Any] = {}
        for key in ("use_only", "device_width", "prune_empty_rules"):
            if key in d:
                if not isinstance(d[key], bool):
                    raise BreakpointConfigError(f"{key} must be true or false, got {d[key]!r}")
                kwargs[key] = d[key]

        if "fractional_delta" in d:
            try:
                delta = Decimal(str(d["fractional_delta"]))
            except InvalidOperation:
                raise BreakpointConfigError(f"Invalid fractional_delta: {d['fractional_delta']!r}")
            if not delta.is_finite() or delta <= 0:
                raise BreakpointConfigError(f"fractional_delta must be positive, got {delta}")
            kwargs["fractional_delta"] = delta

        if "match_mode" in d:
            try:
                kwargs["match_mode"] = MatchMode(str(d["match_mode"]).lower())
            except ValueError:
                raise BreakpointConfigError(f"Invalid match_mode: {d['match_mode']!r}")

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "use_only": self.use_only,
            "device_width": self.device_width,
            "prune_empty_rules": self.prune_empty_rules,
            "fractional_delta": str(self.fractional_delta),
            "match_mode": self.match_mode.value,
        }


def config_from_yaml(s: str) -> TransformConfig:
    d = yaml.safe_load(s)
    if isinstance(d, dict) and "breakpoints" in d:
        d = d["breakpoints"]
    return TransformConfig.from_dict(d)


def config_to_yaml(config: TransformConfig) -> str:
    return yaml.safe_dump({"breakpoints": config.to_dict()}, sort_keys=False)


def load_config(filepath: str) -> TransformConfig:
    """
    Load a TransformConfig from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        BreakpointConfigError: If the file content is invalid
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        return config_from_yaml(content)
    except yaml.YAMLError as e:
        raise BreakpointConfigError(f"Invalid YAML in {filepath}: {e}")
