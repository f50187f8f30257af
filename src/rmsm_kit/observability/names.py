# src/rmsm_kit/observability/names.py

"""Standard metric names for rmsm-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Single-document compilation
# ============================================================================

# Duration
PARSE_DURATION = "parse_duration"

# Counters
CODE_BLOCKS_TOTAL = "code_blocks_total"
CODE_BLOCKS_INCLUDED = "code_blocks_included"
FILES_WRITTEN_TOTAL = "files_written_total"
PARSE_DIAGNOSTICS_TOTAL = "parse_diagnostics_total"


# ============================================================================
# Multi-document merging
# ============================================================================

# Duration
MULTIPARSE_DURATION = "multiparse_duration"

# Counters
MERGE_CONFLICTS_TOTAL = "merge_conflicts_total"

# Gauges
MULTIPARSE_DOCUMENTS = "multiparse_documents"
