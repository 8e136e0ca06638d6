"""Internal modules for Courier SDK.

WARNING: This package contains system-level modules.
These are not intended for direct use in application code.

Modules:
    execution - Request dispatch and response normalization
    http - Shared HTTP client configuration
"""
