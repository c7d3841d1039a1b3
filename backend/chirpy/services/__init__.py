"""Service layer.

Subpackages
-----------
- ``_shared``: base service, domain errors, ports and policies.
- ``identity``: user lifecycle (create, update, authenticate, upgrade).
- ``chirps``: chirp lifecycle and the profanity filter.
- ``tokens``: refresh-token revocation table.
- ``auth``: login / refresh / revoke session flows.

Import concrete services from their subpackages; this module stays free of
imports so the store can depend on ``_shared.errors`` without cycles.
"""
