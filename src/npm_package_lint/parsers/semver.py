"""npm semver checks used by the format and dependency rules.

Versions are validated with the ``semver`` package (Semantic Versioning 2.0.0,
strict ``MAJOR.MINOR.PATCH``). Ranges are validated with ``node-semver``,
a port of npm's own range grammar. Supported expressions:
- exact versions (e.g., "1.2.3", "1.2.3-beta.1+build.5")
- caret ranges ^x.y.z and tilde ranges ~x.y.z
- x-ranges such as "1.x", "1.2.*" and "*"
- primitive comparators (=, >, >=, <, <=), space separated into sets
- hyphen ranges, e.g., "1.0.0 - 2.0.0"
- alternatives joined by "||"

Dist-tags ("latest"), URLs and file paths are not ranges.
"""

from __future__ import annotations

import semver
from nodesemver import valid_range as _node_valid_range


def valid(version: str) -> bool:
    """Return True if ``version`` is a strict MAJOR.MINOR.PATCH semantic version."""
    if not isinstance(version, str):
        return False
    return semver.Version.is_valid(version)


def valid_range(expr: str) -> bool:
    """Return True if ``expr`` parses as an npm version range."""
    if not isinstance(expr, str):
        return False
    # strict (non-loose) parsing, as npm does by default
    return _node_valid_range(expr, False) is not None
