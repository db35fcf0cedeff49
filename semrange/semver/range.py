# semrange/semver/range.py
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum

from semrange.core.errors import InvalidRange, InvalidVersion, ReactorScramError
from semrange.core.logging.util import getTraceLogger
from .version import MAX_COMPONENT, Version, parseVersion

logger = logging.getLogger(__name__)
tracer = getTraceLogger(__name__)

__all__ = [
    "RangeKind",
    "Range",
    "RangeDifference",
    "firstBadVersionFor",
    "parseRange",
    "parseRestrictedRange",
]



class RangeKind(Enum):
    EXACT = "exact"
    SAME_MINOR = "same-minor"
    SAME_MAJOR = "same-major"
    OPEN_ENDED = "open-ended"

    @property
    def symbol(self) -> str:
        return _SYMBOL_BY_KIND[self]



_SYMBOL_BY_KIND: dict[RangeKind, str] = {
    RangeKind.EXACT: "=",
    RangeKind.SAME_MINOR: "~",
    RangeKind.SAME_MAJOR: "^",
    RangeKind.OPEN_ENDED: "+",
}
_KIND_BY_SYMBOL: dict[str, RangeKind] = {symbol: kind for kind, symbol in _SYMBOL_BY_KIND.items()}

# Shapes with a bounded high, tried in this order when recognizing a kind
_BOUNDED_KINDS: tuple[RangeKind, ...] = (RangeKind.EXACT, RangeKind.SAME_MINOR, RangeKind.SAME_MAJOR)



def firstBadVersionFor(base: Version, kind: RangeKind) -> Version | None:
    """
    The smallest version that no longer satisfies `kind` anchored at `base`,
    or None when the kind has no upper bound.

        exact       1.2.3 -> 1.2.4
        same-minor ~1.2.3 -> 1.3.0
        same-major ^1.2.3 -> 2.0.0
        open-ended +1.2.3 -> None

    The base's prerelease identifiers are carried onto the bound.
    """
    if kind is RangeKind.EXACT:
        return base.nextAfter()
    if kind is RangeKind.SAME_MINOR:
        return replace(base, patch=MAX_COMPONENT).nextAfter()
    if kind is RangeKind.SAME_MAJOR:
        return replace(base, minor=MAX_COMPONENT, patch=MAX_COMPONENT).nextAfter()
    if kind is RangeKind.OPEN_ENDED:
        return None
    raise ValueError(f"Unknown range kind {kind!r}")



def _recognizeKind(low: Version, high: Version | None) -> RangeKind | None:
    if high is None:
        return RangeKind.OPEN_ENDED
    for kind in _BOUNDED_KINDS:
        if firstBadVersionFor(low, kind) == high:
            return kind
    return None



def _releaseOf(version: Version) -> Version:
    # Smallest release above every prerelease of the same major.minor.patch
    return replace(version, prerelease=(), build=())



def _mergesWhenTouching(earlier: Range, later: Range) -> bool:
    if later.high is None:
        return True
    if later.kind is RangeKind.SAME_MAJOR:
        return earlier.kind is not RangeKind.SAME_MAJOR
    if later.kind is RangeKind.SAME_MINOR:
        return earlier.kind is RangeKind.EXACT
    return False



@dataclass(frozen=True)
class RangeDifference:
    """Parts of a range left over after removing another one."""
    before: Range | None = None
    after: Range | None = None



@dataclass(frozen=True)
class Range:
    """
    Half-open interval [low, high) over the version order.

    high is None for ranges without an upper bound. `kind` is recognized
    from the bounds when they match one of the shorthand shapes, and is None
    for literal intervals such as those left over by difference(). Equality
    and hashing only look at the bounds.
    """
    low: Version
    high: Version | None = None
    kind: RangeKind | None = field(default=None, init=False, compare=False)

    def __post_init__(self) -> None:
        if self.high is not None and not self.high > self.low:
            raise ReactorScramError(
                f"Range bounds are inverted: [{self.low}, {self.high}).\n"
                "The algebra produced an empty range, which it promised never to do.\n"
                "AZ-5 pressed."
            )
        object.__setattr__(self, "kind", _recognizeKind(self.low, self.high))

    # ------------------------------------------------
    #                  Construction
    # ------------------------------------------------

    @classmethod
    def everything(cls) -> Range:
        return cls(Version(0, 0, 0), None)

    @classmethod
    def exactly(cls, version: Version) -> Range:
        return cls.ofKind(version, RangeKind.EXACT)

    @classmethod
    def ofKind(cls, base: Version, kind: RangeKind) -> Range:
        return cls(base, firstBadVersionFor(base, kind))

    @classmethod
    def parse(cls, text: str) -> Range:
        return parseRange(text)

    @classmethod
    def parseRestricted(cls, text: str) -> Range:
        return parseRestrictedRange(text)

    # ------------------------------------------------
    #                   Accessors
    # ------------------------------------------------

    @property
    def base(self) -> Version:
        return self.low

    @property
    def firstBadVersion(self) -> Version | None:
        return self.high

    @property
    def isUnbounded(self) -> bool:
        return self.high is None

    def __str__(self) -> str:
        if self.kind is RangeKind.EXACT:
            return str(self.low)
        if self.kind is not None:
            return f"{self.kind.symbol}{self.low}"
        return f"{self.low}<{self.high}"

    def __repr__(self) -> str:
        return f"Range({str(self)!r})"

    # ------------------------------------------------
    #                  Containment
    # ------------------------------------------------

    def _spans(self, version: Version) -> bool:
        """Plain interval membership, without prerelease gating."""
        if version < self.low:
            return False
        return self.high is None or version < self.high

    def contains(self, other: Version | Range) -> bool:
        """
        Version: a prerelease only satisfies a range whose low bound is also
        a prerelease; past that gate it is interval membership.

        Range: every version of `other` lies inside this range.
        """
        if isinstance(other, Range):
            if other.low < self.low:
                return False
            if self.high is None:
                return True
            return other.high is not None and self.high >= other.high
        if not isinstance(other, Version):
            raise TypeError(f"Expected Version or Range, got {type(other).__name__}")
        if other.isPrerelease() and not self.low.isPrerelease():
            return False
        return self._spans(other)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (Version, Range)):
            return False
        return self.contains(item)

    def overlaps(self, other: Range) -> bool:
        """True when either range admits the other's low bound."""
        return self.contains(other.low) or other.contains(self.low)

    # ------------------------------------------------
    #                    Algebra
    # ------------------------------------------------

    def intersection(self, other: Range) -> Range | None:
        """
        The range of versions satisfying both, or None when they are disjoint.

            ^1.2.3 & ~1.3.0       -> ~1.3.0
            ^1.7.2 & +1.9.2       -> ^1.9.2
            ^1.2.3 & 2.0.0        -> None
            ^1.2.3 & +2.0.0-alpha -> None
            ^1.2.3 & ~1.5.0-alpha -> ~1.5.0

        A receiver anchored on a release admits no prerelease, so a
        prerelease low on the other side is raised to its release.
        Once the low is a release, a prerelease high is raised the same way.
        """
        if other.low < self.low:
            return other.intersection(self)

        low = other.low
        if low.isPrerelease() and not self.low.isPrerelease():
            low = _releaseOf(low)

        high: Version | None
        if self.high is None:
            high = other.high
        elif other.high is None:
            high = self.high
        else:
            high = min(self.high, other.high)
        if high is not None and high.isPrerelease() and not low.isPrerelease():
            high = _releaseOf(high)

        result = None if high is not None and low >= high else Range(low, high)
        tracer.trace("intersection", "%s & %s -> %s", self, other, result)
        return result

    def union(self, other: Range) -> Range | None:
        """
        The single range covering both, or None when no single range can.

        A gap between the two is never bridged. Ranges that only touch
        end-to-end merge in three cases: the later one is open-ended, the
        later one is same-major and the earlier one is not, or the later one
        is same-minor and the earlier one is exact. The merged range must
        still be one of the shorthand shapes, so 1.x and 2.x never merge:

            ~1.2.0 | 1.2.3      -> ~1.2.0
            ^1.2.0 | ~1.1.0     -> ^1.1.0
            ~1.2.0 | ~1.3.0     -> None
            ^1.6.2 | ~2.0.0     -> None
            ^1.6.2 | 4.1.2      -> None
        """
        if other.low < self.low:
            return other.union(self)

        result: Range | None
        if self.high is None:
            result = self
        elif other.low > self.high:
            result = None
        elif other.high is not None and self.high >= other.high:
            result = self
        else:
            hull = Range(self.low, other.high)
            if other.low == self.high and not (hull.kind is not None and _mergesWhenTouching(self, other)):
                result = None
            else:
                result = hull
        tracer.trace("union", "%s | %s -> %s", self, other, result)
        return result

    def difference(self, other: Range) -> RangeDifference:
        """
        The parts of this range not covered by `other`.

            ^1.2.3 - 1.4.6 -> before 1.2.3<1.4.6, after ^1.4.7
        """
        if not self.overlaps(other):
            if self.low < other.low:
                result = RangeDifference(before=self)
            else:
                result = RangeDifference(after=self)
        else:
            before = Range(self.low, other.low) if self.low < other.low else None
            after = None
            if other.high is not None and (self.high is None or self.high > other.high):
                after = Range(other.high, self.high)
            result = RangeDifference(before=before, after=after)
        tracer.trace("difference", "%s - %s -> %s", self, other, result)
        return result

    def maxSatisfying(self, versions: Iterable[Version]) -> Version | None:
        best: Version | None = None
        for version in versions:
            if not self.contains(version):
                continue
            if best is None or version > best:
                best = version
        return best



# ------------------------------------------------
#                    Parsing
# ------------------------------------------------

def parseRestrictedRange(text: str) -> Range:
    """
    Parse the shorthand forms:

        "*"          -> everything (+0.0.0)
        "1.2.3"      -> exact
        "=1.2.3"     -> exact
        "~1.2.3"     -> same major and minor
        "^1.2.3"     -> same major
        "+1.2.3"     -> 1.2.3 and anything newer
    """
    if not isinstance(text, str):
        raise TypeError(f"Range string must be a string type, got {type(text).__name__}")
    if text == "*":
        return Range.everything()
    if not text:
        raise InvalidRange(text, "empty range")

    head = text[0]
    if "0" <= head <= "9":
        kind, versionText = RangeKind.EXACT, text
    elif head in _KIND_BY_SYMBOL:
        kind, versionText = _KIND_BY_SYMBOL[head], text[1:]
    else:
        logger.debug("Rejected range %r: unknown prefix %r", text, head)
        raise InvalidRange(text, f"unknown prefix {head!r}")

    try:
        base = parseVersion(versionText)
    except InvalidVersion as err:
        logger.debug("Rejected range %r: %s", text, err)
        raise InvalidRange(text, str(err)) from err
    return Range.ofKind(base, kind)



def parseRange(text: str) -> Range:
    """
    Parse a range string: any shorthand form, or a literal "low<high"
    interval whose high must be greater than its low.
    """
    if not isinstance(text, str):
        raise TypeError(f"Range string must be a string type, got {type(text).__name__}")
    if "<" not in text:
        return parseRestrictedRange(text)

    lowText, _, highText = text.partition("<")
    try:
        low = parseVersion(lowText)
        high = parseVersion(highText)
    except InvalidVersion as err:
        logger.debug("Rejected range %r: %s", text, err)
        raise InvalidRange(text, str(err)) from err
    if not high > low:
        raise InvalidRange(text, "upper bound must be greater than lower bound")
    return Range(low, high)
