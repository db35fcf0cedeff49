# semrange/semver/resolver.py
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .range import Range
from .version import Version

__all__ = ["MatchResult", "RangeResolver"]



T = TypeVar("T")



@dataclass(frozen=True)
class MatchResult(Generic[T]):
    """
    Result of range-based selection among candidate versions.

    - requirement: the range used (None means "any version").
    - candidates: all candidates seen by the resolver.
    - matches: candidates the requirement admits, in input order.
    - best: the single best match by version, or None if no matches.
            If multiple candidates share the same best version, the
            first one in the input order is returned.
    """
    requirement: Range | None
    candidates: tuple[tuple[Version, T], ...]
    matches: tuple[tuple[Version, T], ...]
    best: tuple[Version, T] | None



class RangeResolver:
    @staticmethod
    def matchCandidates(
        candidates: Iterable[tuple[Version, T]],
        requirement: Range | None,
    ) -> MatchResult[T]:
        """
        Filter (version, payload) pairs by requirement and select the best one.

        Matching goes through Range.contains, so prerelease candidates only
        match requirements anchored on a prerelease. With no requirement
        every candidate matches, prereleases included.
        """
        candidatesList: list[tuple[Version, T]] = list(candidates)

        matchList: list[tuple[Version, T]] = []
        for version, payload in candidatesList:
            if requirement is None or requirement.contains(version):
                matchList.append((version, payload))

        best: tuple[Version, T] | None = None
        for version, payload in matchList:
            if best is None or version > best[0]:
                best = (version, payload)

        return MatchResult(
            requirement=requirement,
            candidates=tuple(candidatesList),
            matches=tuple(matchList),
            best=best
        )
