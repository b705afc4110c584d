"""HTTP request/response schemas (presentation layer)."""
