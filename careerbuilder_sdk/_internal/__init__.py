"""Internal modules for the CareerBuilder SDK.

WARNING: These modules are implementation details of WebServiceClient and
are not intended for direct use in application code.

Modules:
    auth - Token provider contract
    builders - Verb-specific request builders
    encoding - Form and JSON encoding helpers
    http - Shared HTTP client configuration and transport
    redaction - Credential redaction for debug output
"""
