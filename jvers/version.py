"""Library version information and comparison."""

MAJOR_VERSION = 2
MINOR_VERSION = 14
MICRO_VERSION = 1

VERSION = f"{MAJOR_VERSION}.{MINOR_VERSION}.{MICRO_VERSION}"


def version_str():
    """Return the library version as a dotted string."""
    return VERSION


def version_cmp(major, minor, micro):
    """Compare the library version with the given one.

    Return zero when they are equal, a positive number when the library
    version is newer and a negative number when it is older. The result is
    the difference in the first component that differs.
    """
    for ours, theirs in (
        (MAJOR_VERSION, major),
        (MINOR_VERSION, minor),
    ):
        diff = ours - theirs
        if diff:
            return diff
    return MICRO_VERSION - micro