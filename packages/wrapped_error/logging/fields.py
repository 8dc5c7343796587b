"""Canonical structured-log field names."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EXCEPTION = "exception"

SERVICE = "service"
ENVIRONMENT = "environment"

# Callback boundary fields.
ERROR_TYPE = "error_type"
ROOT_CAUSE = "root_cause"
ROOT_CAUSE_TYPE = "root_cause_type"
WRAP_DEPTH = "wrap_depth"
