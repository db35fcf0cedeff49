import pytest

from semrange.core.errors import InvalidRange, InvalidVersion, ReactorScramError
from semrange.semver.range import Range, RangeKind, firstBadVersionFor, parseRange, parseRestrictedRange
from semrange.semver.version import Version, parseVersion


@pytest.mark.parametrize(
    "raw, kind, base",
    [
        ("1.2.3",   RangeKind.EXACT,      "1.2.3"),
        ("=1.2.3",  RangeKind.EXACT,      "1.2.3"),
        ("~1.2.3",  RangeKind.SAME_MINOR, "1.2.3"),
        ("^1.2.3",  RangeKind.SAME_MAJOR, "1.2.3"),
        ("+1.2.3",  RangeKind.OPEN_ENDED, "1.2.3"),
        ("*",       RangeKind.OPEN_ENDED, "0.0.0"),
    ],
)
def test_parseRange_shorthand_kinds(raw, kind, base):
    rng = parseRange(raw)
    assert rng.kind is kind
    assert rng.base == parseVersion(base)
    assert rng.low == parseVersion(base)


def test_parse_asterisk_is_everything():
    rng = parseRange("*")
    assert rng == Range.everything()
    assert rng.base == Version(0, 0, 0)
    assert rng.isUnbounded
    assert rng.high is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.0.0", "1.0.1"),
        ("~1.0.0", "1.1.0"),
        ("^1.0.0", "2.0.0"),
        ("1.2.3", "1.2.4"),
        ("~1.2.3", "1.3.0"),
        ("^1.2.3", "2.0.0"),
        ("^0.0.1", "1.0.0"),
    ],
)
def test_first_bad_version(raw, expected):
    rng = parseRange(raw)
    assert rng.firstBadVersion == parseVersion(expected)
    assert rng.high == parseVersion(expected)


def test_open_ended_has_no_first_bad_version():
    assert parseRange("+1.2.3").firstBadVersion is None
    assert firstBadVersionFor(parseVersion("1.2.3"), RangeKind.OPEN_ENDED) is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.2.3-alpha", "1.2.4-alpha"),
        ("~1.2.3-alpha", "1.3.0-alpha"),
        ("^1.2.3-alpha.1", "2.0.0-alpha.1"),
    ],
)
def test_first_bad_version_carries_base_prerelease(raw, expected):
    rng = parseRange(raw)
    assert rng.firstBadVersion == parseVersion(expected)
    # still recognized as the shorthand it was written as
    assert str(rng) == raw


def test_same_minor_on_prerelease_base():
    rng = parseRange("~1.2.3-alpha")
    assert rng.contains(parseVersion("1.2.3-alpha"))
    assert rng.contains(parseVersion("1.2.3-beta"))
    assert rng.contains(parseVersion("1.2.9"))
    assert not rng.contains(parseVersion("1.3.0"))
    assert not rng.contains(parseVersion("1.2.3-alph"))


def test_bounds_drop_build_metadata():
    rng = parseRange("^1.2.3+build.9")
    assert rng.base.build == ("build", "9")
    assert rng.high is not None and rng.high.build == ()
    assert str(rng) == "^1.2.3+build.9"


def test_literal_interval():
    rng = parseRange("1.2.3<1.4.6")
    assert rng.low == parseVersion("1.2.3")
    assert rng.high == parseVersion("1.4.6")
    assert rng.kind is None
    assert str(rng) == "1.2.3<1.4.6"


@pytest.mark.parametrize(
    "raw, kind",
    [
        ("1.2.3<1.2.4", RangeKind.EXACT),
        ("1.2.3<1.3.0", RangeKind.SAME_MINOR),
        ("1.2.3<2.0.0", RangeKind.SAME_MAJOR),
    ],
)
def test_literal_interval_recognizes_shorthand_shapes(raw, kind):
    rng = parseRange(raw)
    assert rng.kind is kind
    assert rng == Range.ofKind(rng.low, kind)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1.2.3", "1.2.3"),
        ("=1.2.3", "1.2.3"),
        ("~1.2.3", "~1.2.3"),
        ("^1.2.3", "^1.2.3"),
        ("+1.2.3", "+1.2.3"),
        ("*", "+0.0.0"),
        ("1.2.3<1.3.0", "~1.2.3"),
        ("1.2.3<1.3.5", "1.2.3<1.3.5"),
        ("1.0.0-rc.1<1.0.0", "1.0.0-rc.1<1.0.0"),
    ],
)
def test_str_is_canonical_and_reparses(raw, expected):
    rng = parseRange(raw)
    assert str(rng) == expected
    assert parseRange(str(rng)) == rng


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "x1.2.3",
        ">=1.2.3",
        "^",
        "~",
        "=",
        "+",
        "^1.2",
        "~v1.2.3",
        "1.2.3 ",
        "**",
        "1.2.3<",
        "<1.2.3",
        "1.2.3<1.2.3",
        "1.4.0<1.2.0",
        "1.2.3<1.2.3+build",
        "1.2.3<^1.4.0",
        "1.2.3<1.4.0<1.5.0",
    ],
)
def test_parseRange_invalid(raw):
    with pytest.raises(InvalidRange) as excInfo:
        parseRange(raw)
    assert excInfo.value.text == raw


def test_invalid_version_inside_range_is_chained():
    with pytest.raises(InvalidRange) as excInfo:
        parseRange("^1.02.3")
    cause = excInfo.value.__cause__
    assert isinstance(cause, InvalidVersion)
    assert cause.text == "1.02.3"
    assert cause.offset == 3


def test_parseRestricted_rejects_literal_interval():
    assert parseRestrictedRange("^1.2.3") == parseRange("^1.2.3")
    assert Range.parseRestricted("~1.2.3") == Range.parse("~1.2.3")
    with pytest.raises(InvalidRange):
        parseRestrictedRange("1.2.3<1.4.0")


@pytest.mark.parametrize("raw", [None, 12, b"^1.2.3"])
def test_parseRange_rejects_non_strings(raw):
    with pytest.raises(TypeError):
        parseRange(raw)


def test_inverted_bounds_are_an_invariant_violation():
    with pytest.raises(ReactorScramError):
        Range(parseVersion("1.2.3"), parseVersion("1.2.3"))
    with pytest.raises(ReactorScramError):
        Range(parseVersion("2.0.0"), parseVersion("1.0.0"))


def test_equality_ignores_spelling_and_build():
    assert parseRange("=1.2.3") == parseRange("1.2.3")
    assert parseRange("1.2.3+a") == parseRange("1.2.3")
    assert hash(parseRange("~1.2.3")) == hash(parseRange("1.2.3<1.3.0"))
    assert parseRange("~1.2.3") != parseRange("^1.2.3")
    assert parseRange("+1.2.3") != parseRange("^1.2.3")


def test_factories():
    v = parseVersion("1.2.3")
    assert Range.exactly(v) == parseRange("1.2.3")
    assert Range.ofKind(v, RangeKind.SAME_MINOR) == parseRange("~1.2.3")
    assert Range.ofKind(v, RangeKind.SAME_MAJOR) == parseRange("^1.2.3")
    assert Range.ofKind(v, RangeKind.OPEN_ENDED) == parseRange("+1.2.3")


def test_kind_symbols():
    assert [kind.symbol for kind in RangeKind] == ["=", "~", "^", "+"]
    assert repr(parseRange("^1.2.3")) == "Range('^1.2.3')"
