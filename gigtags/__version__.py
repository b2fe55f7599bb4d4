"""Version information for gigtags."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to the tag grammar or canonical form
# MINOR: New features, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.1.0 - Initial release
#         - Single-pass scanner for #facet:term tags embedded in prose
#         - Percent codec for terms, canonical serializer
#         - Timestamp and URL interpretation of terms
#         - Facet date-like suffixes (~yyyyMMdd)
