"""Property tests for the functor, applicative and monad laws.

Both Option and Result must satisfy them for every value and function the
strategies produce, along with the transpose round trip and flatten.
"""

from hypothesis import given
from rustype import Err, Nothing, Ok, Option, Result, Some

from tests.strategies import (
    int_functions,
    int_options,
    int_results,
    integers,
    option_functions,
    result_functions,
    text_functions,
    texts,
)


def compose(f):
    return lambda g: lambda x: f(g(x))


class TestOptionFunctorLaws:
    """map preserves identity and composition."""

    @given(int_options)
    def test_identity(self, option):
        assert option.map(lambda x: x) == option

    @given(int_options, int_functions, int_functions)
    def test_composition(self, option, f, g):
        assert option.map(lambda x: f(g(x))) == option.map(g).map(f)


class TestOptionApplicativeLaws:
    """ap satisfies identity, homomorphism, interchange and composition."""

    @given(int_options)
    def test_identity(self, option):
        assert option.ap(Some(lambda x: x)) == option

    @given(integers, int_functions)
    def test_homomorphism(self, x, f):
        assert Some(x).ap(Some(f)) == Some(f(x))

    @given(integers, int_functions)
    def test_interchange(self, x, f):
        u = Some(f)
        assert Some(x).ap(u) == u.ap(Some(lambda fn: fn(x)))

    @given(int_options, int_functions, int_functions)
    def test_composition(self, w, f, g):
        u, v = Some(f), Some(g)
        assert w.ap(v.ap(u.ap(Some(compose)))) == w.ap(v).ap(u)

    def test_composition_with_nothing(self):
        assert Some(1).ap(Nothing.ap(Some(lambda x: x).ap(Some(compose)))) is Nothing


class TestOptionMonadLaws:
    """and_then satisfies left identity, right identity and associativity."""

    @given(integers, option_functions)
    def test_left_identity(self, x, f):
        assert Some(x).and_then(f) == f(x)

    @given(int_options)
    def test_right_identity(self, option):
        assert option.and_then(Some) == option

    @given(int_options, option_functions, option_functions)
    def test_associativity(self, option, f, g):
        assert option.and_then(f).and_then(g) == option.and_then(lambda x: f(x).and_then(g))

    @given(int_options, option_functions)
    def test_and_then_is_flatten_of_map(self, option, f):
        assert option.and_then(f) == Option.flatten(option.map(f))


class TestResultFunctorLaws:
    """map preserves identity and composition."""

    @given(int_results)
    def test_identity(self, res):
        assert res.map(lambda x: x) == res

    @given(int_results, int_functions, int_functions)
    def test_composition(self, res, f, g):
        assert res.map(lambda x: f(g(x))) == res.map(g).map(f)


class TestResultMapErrFunctorLaws:
    """map_err is a functor over the Err side and leaves Ok alone."""

    @given(int_results)
    def test_identity(self, res):
        assert res.map_err(lambda e: e) == res

    @given(int_results, text_functions, text_functions)
    def test_composition(self, res, f, g):
        assert res.map_err(lambda e: f(g(e))) == res.map_err(g).map_err(f)

    @given(integers, text_functions)
    def test_ok_untouched(self, x, f):
        assert Ok(x).map_err(f) == Ok(x)


class TestResultApplicativeLaws:
    """ap satisfies identity, homomorphism, interchange and composition."""

    @given(int_results)
    def test_identity(self, res):
        assert res.ap(Ok(lambda x: x)) == res

    @given(integers, int_functions)
    def test_homomorphism(self, x, f):
        assert Ok(x).ap(Ok(f)) == Ok(f(x))

    @given(integers, int_functions)
    def test_interchange(self, x, f):
        u = Ok(f)
        assert Ok(x).ap(u) == u.ap(Ok(lambda fn: fn(x)))

    @given(int_results, int_functions, int_functions)
    def test_composition(self, w, f, g):
        u, v = Ok(f), Ok(g)
        assert w.ap(v.ap(u.ap(Ok(compose)))) == w.ap(v).ap(u)


class TestResultMonadLaws:
    """and_then satisfies left identity, right identity and associativity."""

    @given(integers, result_functions)
    def test_left_identity(self, x, f):
        assert Ok(x).and_then(f) == f(x)

    @given(int_results)
    def test_right_identity(self, res):
        assert res.and_then(Ok) == res

    @given(int_results, result_functions, result_functions)
    def test_associativity(self, res, f, g):
        assert res.and_then(f).and_then(g) == res.and_then(lambda x: f(x).and_then(g))


class TestTranspose:
    """Option.transpose and Result.transpose undo each other on well-shaped input."""

    @given(int_results)
    def test_option_of_result_round_trip(self, res):
        option = Some(res)
        assert Result.transpose(Option.transpose(option)) == option

    @given(int_options)
    def test_ok_of_option_round_trip(self, option):
        wrapped = Ok(option)
        assert Option.transpose(Result.transpose(wrapped)) == wrapped

    @given(texts)
    def test_err_goes_through_some(self, error):
        assert Option.transpose(Result.transpose(Err(error))) == Err(error)

    def test_asymmetry(self):
        """Nothing transposes to Ok(Nothing), but Ok(Nothing) transposes to Nothing."""
        assert Option.transpose(Nothing) == Ok(Nothing)
        assert Result.transpose(Ok(Nothing)) is Nothing


class TestFlatten:
    """flatten removes exactly one layer of nesting."""

    @given(int_options)
    def test_option_flatten_of_some(self, option):
        assert Option.flatten(Some(option)) == option

    @given(int_options)
    def test_option_flatten_idempotent_on_flat(self, option):
        assert Option.flatten(Option.flatten(option)) == Option.flatten(option)

    @given(int_results)
    def test_result_flatten_of_ok(self, res):
        assert Result.flatten(Ok(res)) == res

    @given(int_results)
    def test_result_flatten_idempotent_on_flat(self, res):
        assert Result.flatten(Result.flatten(res)) == Result.flatten(res)


class TestScenarios:
    """End-to-end examples of everyday use."""

    def test_chained_and_then(self):
        assert Ok(25).and_then(lambda x: Ok(x * x)).and_then(lambda x: Ok(x + 5)).unwrap() == 630

    def test_ok_or(self):
        assert Some(5).ok_or('Failed') == Ok(5)
        assert Nothing.ok_or('Failed') == Err('Failed')

    def test_transpose(self):
        assert Result.transpose(Ok(Some(5))) == Some(Ok(5))
        assert Result.transpose(Err('e')) == Some(Err('e'))
        assert Result.transpose(Ok(Nothing)) == Nothing

    def test_string_forms(self):
        assert str(Err(5)) == 'Err(5)'
        assert str(Ok(Ok(5))) == 'Ok(Ok(5))'

    def test_filter_with_default(self):
        assert Some(200).filter(lambda v: v == 200).unwrap_or(500) == 200
        assert Some(199).filter(lambda v: v == 200).unwrap_or(500) == 500
