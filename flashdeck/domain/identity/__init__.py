"""
Identity bounded context - Domain layer.

Identities are issued by an external identity provider; this context only
models who is calling and which plan entitlements they hold.
"""
