# src/multitext/observability/names.py

"""Standard metric names for multitext observability.

Durations are in milliseconds.
"""

# ============================================================================
# Parser Metrics
# ============================================================================

# Duration
PARSE_DURATION = "multitext_parse_duration"

# Counters
PARSE_LINES_TOTAL = "multitext_parse_lines_total"
PARSE_SECTIONS_CREATED = "multitext_parse_sections_created"
PARSE_ERRORS_TOTAL = "multitext_parse_errors_total"


# ============================================================================
# Source Metrics
# ============================================================================

# Counters
SOURCE_ERRORS_TOTAL = "multitext_source_errors_total"
SOURCE_LINES_SKIPPED = "multitext_source_lines_skipped"
