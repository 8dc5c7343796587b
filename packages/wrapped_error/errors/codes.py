"""Stable machine-readable error codes.

Codes are attached to ``InvalidArgumentError`` instances and to normalized
``ErrorDetail`` values so callers can branch without parsing messages.
"""

# Construction / validation
INVALID_ARGUMENT = "INVALID_ARGUMENT"
MISSING_CAUSE = "MISSING_CAUSE"

# Lookup
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

# Authorization
PERMISSION_DENIED = "PERMISSION_DENIED"

# External systems
DEPENDENCY_TIMEOUT = "DEPENDENCY_TIMEOUT"
DEPENDENCY_UNAVAILABLE = "DEPENDENCY_UNAVAILABLE"

# Internal
CYCLIC_CAUSE_CHAIN = "CYCLIC_CAUSE_CHAIN"
UNEXPECTED_EXCEPTION = "UNEXPECTED_EXCEPTION"
