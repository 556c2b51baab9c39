"""
CRPT document submission service.

Serializes documents, admits them through a refill-to-capacity permit gate
and dispatches them fire-and-forget to the CRPT document endpoint.
"""
