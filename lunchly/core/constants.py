"""Application-wide constants."""

# ──────────────────────────────────────────────────────────────────────
# Customer ranking
# ──────────────────────────────────────────────────────────────────────

# Size of the "top customers" leaderboard
TOP_CUSTOMERS_LIMIT = 10

# ──────────────────────────────────────────────────────────────────────
# Search
# ──────────────────────────────────────────────────────────────────────

# Appended to a search term to turn it into a prefix pattern
PREFIX_WILDCARD = "%"
