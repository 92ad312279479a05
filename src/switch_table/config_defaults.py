# Data-only defaults for switch_table (no logic in this module).

# How a switch that appears more than once on one command line is recorded.
#   keep  - first occurrence owns the entry; a repeat's first argument is
#           dropped, the bare arguments after it are appended to the entry
#   merge - first occurrence owns the entry, later arguments are appended to it
#   first - later occurrences and their arguments are ignored
#   last  - a later occurrence replaces the earlier arguments
DUPLICATE_KEEP = "keep"
DUPLICATE_MERGE = "merge"
DUPLICATE_FIRST = "first"
DUPLICATE_LAST = "last"

DUPLICATE_POLICIES = (DUPLICATE_KEEP, DUPLICATE_MERGE, DUPLICATE_FIRST, DUPLICATE_LAST)

DEFAULT_DUPLICATE_POLICY = DUPLICATE_KEEP

# Environment overrides read by the inspection CLI (a .env file in the
# working directory is honoured too).
ENV_DUPLICATES = "SWITCH_TABLE_DUPLICATES"
ENV_LOG_LEVEL = "SWITCH_TABLE_LOG_LEVEL"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

OUTPUT_FORMATS = ("text", "json")
DEFAULT_OUTPUT_FORMAT = "text"
