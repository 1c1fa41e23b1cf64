"""Version information for groupgrid."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to API or data structures
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - In-memory player registry with bounded id issuance
#         - Proximity grouping engine (axis-aligned square neighbourhood)
#         - Integration API: /api/v1/init/player, /api/v1/group, /api/v1/info
