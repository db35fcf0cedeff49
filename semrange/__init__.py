# semrange/__init__.py
from .core.errors import InvalidRange, InvalidVersion, ReactorScramError
from .semver.version import MAX_COMPONENT, Version, compareVersions, parseVersion
from .semver.range import (
    Range,
    RangeDifference,
    RangeKind,
    firstBadVersionFor,
    parseRange,
    parseRestrictedRange,
)
from .semver.resolver import MatchResult, RangeResolver

__all__ = [
    "InvalidRange",
    "InvalidVersion",
    "ReactorScramError",
    "MAX_COMPONENT",
    "Version",
    "compareVersions",
    "parseVersion",
    "Range",
    "RangeDifference",
    "RangeKind",
    "firstBadVersionFor",
    "parseRange",
    "parseRestrictedRange",
    "MatchResult",
    "RangeResolver",
]
