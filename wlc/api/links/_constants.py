"""Constants for the links domain (private)."""

# Resolution methods, in precedence order
RESOLVED_BY_LINKPATH = "linkpath"
RESOLVED_BY_NAME = "name"
RESOLVED_BY_FILENAME = "filename"
BROKEN = "broken"

MARKDOWN_SUFFIX = ".md"

# Lock file in WLC home guarding mutating passes
LOCK_FILENAME = "links.lock"

# A lock without a readable pid is only stale once it is this old; its
# creator may not have written the pid yet
LOCK_GRACE_SECS = 5.0

# Number of keys shown by the show command
PREVIEW_LIMIT = 10

LOG_DOMAIN = "links"
