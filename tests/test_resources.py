from alnmatrix.utils.resources import RESOURCES, Resources, jit


class TestResources:
    def test_has_module(self):
        assert RESOURCES.has_module('numpy')
        assert not RESOURCES.has_module('alnmatrix_no_such_module')

    def test_no_package_attribute(self):
        assert not hasattr(Resources(), 'package')


class TestJit:
    def test_bare_decorator(self):
        @jit
        def add(a, b): return a + b
        assert add(2, 3) == 5

    def test_configured_decorator(self):
        @jit(nopython=True, cache=False)
        def mul(a, b): return a * b
        assert mul(2, 3) == 6
