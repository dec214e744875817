"""Credential access, secret redaction and outbound HTTP."""
