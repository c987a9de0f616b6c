"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities, ports, and external systems.

This layer contains:
- special_features/: scan and reconciliation of a movie's special features
- refresh/: refresh hooks and the metadata refresh service

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""
