"""Interfaces (collaborator boundary) for DASHKIT.

Defines framework-free contracts for the collaborators the toolkit relies on:
cache stores, timers, documents/elements/events, and HTTP fetchers, plus the
shared error hierarchy. Behaviour lives in `dashkit.toolkit`; concrete
implementations live in `dashkit.adapters`.

Dependency rule: this package is independent; do not import from any other
`dashkit.*` package. It may be imported by `dashkit.toolkit`,
`dashkit.adapters`, and `dashkit.bootstrap`.
"""
