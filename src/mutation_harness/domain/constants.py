from __future__ import annotations

"""
Domain Constants.

Centralizes the naming conventions shared by discovery, filtering and the
command line: default case file names, the root label and the separator
used to compose qualified names.
"""

# Display label of the root hierarchy node
ROOT_LABEL = "cases"

# Joins labels from the root to a node into its qualified name
QUALIFIED_NAME_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# DEFAULT CASE FILE NAMES
# -----------------------------------------------------------------------------
DEFAULT_ORIGINAL_FILE = "original.txt"
DEFAULT_EXPECTED_FILE = "expected.txt"
DEFAULT_ACTUAL_FILE = "actual.txt"
DEFAULT_SETTINGS_FILE = "settings.json"

# Upper bound of mutation waves before a provider is considered runaway
DEFAULT_MAX_WAVES = 1000

SKIP_REASON_FILTERED = "Excluded by include patterns"
