"""Tests for the typeclass decorator."""

import pytest
from rustype import typeclass
from rustype.typeclass import NoInstanceError, TypeClass


class TestTypeclassDispatch:
    """Tests for instance lookup."""

    def test_default_used_when_no_instance(self):
        @typeclass
        def describe(value) -> str:
            return 'thing'

        assert describe(3) == 'thing'
        assert isinstance(describe, TypeClass)

    def test_registered_instance_wins(self):
        @typeclass
        def describe(value) -> str:
            return 'thing'

        @describe.instance(int)
        def _describe_int(value: int) -> str:
            return f'int {value}'

        assert describe(3) == 'int 3'
        assert describe('x') == 'thing'

    def test_lookup_follows_mro(self):
        """bool is an int, so the int instance serves it."""

        @typeclass
        def describe(value) -> str:
            return 'thing'

        @describe.instance(int)
        def _describe_int(value: int) -> str:
            return 'int'

        assert describe(True) == 'int'

    def test_no_default_raises(self):
        @typeclass(default=False)
        def describe(value) -> str:
            raise AssertionError('unreachable')

        with pytest.raises(NoInstanceError, match="No instance of 'describe' for type 'float'"):
            describe(1.5)

    def test_requires_an_argument(self):
        @typeclass
        def describe(value) -> str:
            return 'thing'

        with pytest.raises(TypeError):
            describe()

    def test_proxy_keeps_metadata_and_repr(self):
        @typeclass
        def describe(value) -> str:
            """Describe a value."""
            return 'thing'

        @describe.instance(str)
        def _describe_str(value: str) -> str:
            return 'str'

        assert describe.__name__ == 'describe'
        assert describe.__doc__ == 'Describe a value.'
        assert repr(describe) == '<typeclass describe with 1 instances>'
