"""SCALARCODEC test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- contract/     : Behavior every stream adapter must share, parametrized over
                  the implementations.
- e2e/          : The ``scalarcodec`` command driven through click's CliRunner.
- helpers/      : Shared utilities (no tests here).

Property-based tests live with the layer they exercise and use
@pytest.mark.property.
"""
