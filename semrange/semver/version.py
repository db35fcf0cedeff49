# semrange/semver/version.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import total_ordering

from semrange.core.errors import InvalidVersion

__all__ = [
    "MAX_COMPONENT",
    "Version",
    "compareVersions",
    "parseVersion",
]



# Reserved for bounds built by ranges. Parsing never produces it.
MAX_COMPONENT = 2**31 - 1



@total_ordering
@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    # Build metadata is carried for formatting only
    build: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, text: str) -> Version:
        return parseVersion(text)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        prerelease = f"-{'.'.join(self.prerelease)}" if self.prerelease else ""
        build = f"+{'.'.join(self.build)}" if self.build else ""
        return f"{base}{prerelease}{build}"

    def __repr__(self) -> str:
        return f"Version({str(self)!r})"

    def isPrerelease(self) -> bool:
        return bool(self.prerelease)

    def nextAfter(self) -> Version:
        """
        Returns the successor used for exclusive upper bounds.

        Bumps patch. A patch sitting on MAX_COMPONENT carries into minor,
        and a minor sitting on MAX_COMPONENT carries into major, so a
        shorthand bound is built by pinning trailing components to the
        sentinel and taking a single step:

            1.2.3                 -> 1.2.4
            1.2.MAX               -> 1.3.0
            1.MAX.MAX             -> 2.0.0

        Prerelease identifiers stay, build metadata is dropped.
        """
        major, minor, patch = self.major, self.minor, self.patch + 1
        if self.patch == MAX_COMPONENT:
            patch = 0
            minor += 1
            if self.minor == MAX_COMPONENT:
                minor = 0
                major += 1
        return replace(self, major=major, minor=minor, patch=patch, build=())

    def _prereleaseCmpKey(self) -> tuple:
        # Numeric identifiers have lower precedence than non-numeric.
        # We encode numeric as (0, int), non-numeric as (1, str),
        # so numeric < non-numeric in tuple comparison.
        parts: list[tuple[int, int | str]] = []
        for ident in self.prerelease:
            if ident.isdigit():
                parts.append((0, int(ident)))
            else:
                parts.append((1, ident))
        return tuple(parts)

    def _cmpKey(self) -> tuple:
        # Build is ignored for ordering
        # No prerelease version is preferred over any prerelease version
        releaseFlag = 1 if not self.prerelease else 0
        return (
            self.major,
            self.minor,
            self.patch,
            releaseFlag,
            self._prereleaseCmpKey()
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._cmpKey() < other._cmpKey()



def compareVersions(lhs: Version, rhs: Version) -> int:
    """Three-way comparison: -1, 0 or 1."""
    left, right = lhs._cmpKey(), rhs._cmpKey()
    return (left > right) - (left < right)



# ------------------------------------------------
#                    Parsing
# ------------------------------------------------

def _reject(text: str, pos: int) -> InvalidVersion:
    return InvalidVersion(text, len(text[:pos].encode("utf-8")))



def _isIdentChar(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "-")



def _scanNumber(text: str, pos: int) -> tuple[int, int]:
    start = pos
    while pos < len(text) and "0" <= text[pos] <= "9":
        pos += 1
    if pos == start:
        raise _reject(text, pos)
    # Leading zeroes: "01" is rejected at the digit after the zero
    if text[start] == "0" and pos - start > 1:
        raise _reject(text, start + 1)
    value = int(text[start:pos])
    if value >= MAX_COMPONENT:
        raise _reject(text, start)
    return value, pos



def _scanIdentifiers(text: str, pos: int, *, allowLeadingZero: bool) -> tuple[tuple[str, ...], int]:
    idents: list[str] = []
    while True:
        start = pos
        while pos < len(text) and _isIdentChar(text[pos]):
            pos += 1
        if pos == start:
            # Empty identifier: "1.2.3-", "1.2.3-a..b", "1.2.3+"
            raise _reject(text, pos)
        ident = text[start:pos]
        if not allowLeadingZero and ident.isdigit() and len(ident) > 1 and ident[0] == "0":
            raise _reject(text, start + 1)
        idents.append(ident)
        if pos < len(text) and text[pos] == ".":
            pos += 1
            continue
        return tuple(idents), pos



def parseVersion(text: str) -> Version:
    """
    Parse `MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]` into a Version.

    Accepted forms (examples):
        "1.2.3"
        "0.0.1"
        "1.2.3-alpha"
        "1.2.3-alpha.1"
        "1.2.3+build.1"
        "1.2.3-alpha+build.01"

    Rejected with InvalidVersion (offset of the first bad character):
        "1.2"       -> 3
        "01.2.3"    -> 1
        "1.2.3-"    -> 6
        "1.2.3-01"  -> 7
        "1.2.x"     -> 4
        "1.2.3 "    -> 5
    """
    if text is None:
        raise TypeError("Version string cannot be None")
    if not isinstance(text, str):
        raise TypeError(f"Version string must be a string type, got {type(text).__name__}")

    pos = 0
    numericParts: list[int] = []
    for index in range(3):
        if index > 0:
            if pos >= len(text) or text[pos] != ".":
                raise _reject(text, pos)
            pos += 1
        value, pos = _scanNumber(text, pos)
        numericParts.append(value)

    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()
    if pos < len(text) and text[pos] == "-":
        prerelease, pos = _scanIdentifiers(text, pos + 1, allowLeadingZero=False)
    if pos < len(text) and text[pos] == "+":
        build, pos = _scanIdentifiers(text, pos + 1, allowLeadingZero=True)
    if pos != len(text):
        raise _reject(text, pos)

    major, minor, patch = numericParts
    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=prerelease,
        build=build
    )
