import os
from dataclasses import dataclass, fields

DEFAULT_TOLERANCE = 1E-6
"""
Relative tolerance for floating point comparisons in validators.

Relatively large because some implementations store their values as
single-precision numbers.
"""


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    require_mandatory: bool = True          # missing mandatory attribute is a failure
    enforce_forbidden: bool = True          # present forbidden attribute is a failure
    enforce_standard_names: bool = False    # axis names restricted to ISO 19111 names
    tolerance: float = DEFAULT_TOLERANCE
    max_depth: int = 64                     # bound on nested dispatch
    fail_fast: bool = False                 # raise the first failure instead of collecting

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from GEOCONFORM_* environment variables."""
        defaults = cls()
        return cls(
            require_mandatory=_env_flag("GEOCONFORM_REQUIRE_MANDATORY", defaults.require_mandatory),
            enforce_forbidden=_env_flag("GEOCONFORM_ENFORCE_FORBIDDEN", defaults.enforce_forbidden),
            enforce_standard_names=_env_flag("GEOCONFORM_STANDARD_NAMES", defaults.enforce_standard_names),
            tolerance=float(os.getenv("GEOCONFORM_TOLERANCE", defaults.tolerance)),
            max_depth=int(os.getenv("GEOCONFORM_MAX_DEPTH", defaults.max_depth)),
            fail_fast=_env_flag("GEOCONFORM_FAIL_FAST", defaults.fail_fast),
        )

    def policy_flags(self) -> dict:
        """Flags that are copied onto every validator of a container."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in ("max_depth", "fail_fast")
        }
