# jvers

Small helpers for reporting and comparing the library version, 2.14.1.

## Installation

```
pip install jvers
```

## Usage

```python
from jvers.version import version_str, version_cmp

print(version_str())          # "2.14.1"

version_cmp(2, 14, 1)         # 0: exactly this version
version_cmp(2, 13, 0) > 0     # True: the library is newer than 2.13.0
version_cmp(3, 0, 0) < 0      # True: the library is older than 3.0.0
```

`version_str()` returns the version as a dotted string.

`version_cmp(major, minor, micro)` compares the library version with the
given one. It checks major first, then minor, then micro, and returns the
difference in the first part that differs: positive if the library is
newer, negative if it is older, and zero if the versions are equal. For
example, `version_cmp(2, 10, 0)` returns `4`.

The module also exposes the constants `MAJOR_VERSION`, `MINOR_VERSION`,
`MICRO_VERSION` and `VERSION`.

## What this package does not do

It only reports and compares its own version. It has no JSON encoding,
decoding, packing or unpacking functions and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```