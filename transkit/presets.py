"""Package-wide defaults."""

# Context used when a caller does not name one. The empty string is an
# ordinary bucket, not a marker for "no context".
DEFAULT_CONTEXT = ""
