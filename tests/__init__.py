"""RELMATCH test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Matchers run against real SQLite schemas and ORM mappings.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic; prefer in-memory fakes at boundaries.
- Integration hits a real database with realistic setup/teardown.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, contract, property
"""
