"""
Shared utilities for the CRPT document submitter.

This package aggregates common building blocks consumed by the service:

- config: Service configuration via pydantic-settings
- logging: Structured logging with submission correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Any cross-service logic should live here. Do not import from service_*
packages into shared/.
"""
