"""Shared constants for client-facing error responses."""

# Error type constants (the "type" field of an error body)
ERROR_TYPE_API = "api_error"
ERROR_TYPE_INVALID_REQUEST = "invalid_request_error"
ERROR_TYPE_NOT_IMPLEMENTED = "not_implemented_error"
ERROR_TYPE_CONNECTION = "api_connection_error"
ERROR_TYPE_PROVIDER = "provider_error"

# Generic messages used when internal detail must not reach the client
MESSAGE_INTERNAL = "Internal server error"
