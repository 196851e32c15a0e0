"""DATAMOUNT test suite.

Folder taxonomy
- unit/ : Isolated, fast checks of a single module/class/function.
- e2e/  : The ``datamount`` command driven through Click's CliRunner.

General guidance
- Keep unit tests fast and deterministic (no real I/O).
- End-to-end tests assert user-observable output and exit codes, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
