"""COSTCALC test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows driven through the `costcalc` CLI.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; the domain layer does no I/O.
- Functional tests assert what the user sees, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, functional, property
"""
