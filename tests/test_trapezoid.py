import pytest

from core import Operation, InvalidIntegrationError, RPNEvaluator, convert
from integration import TrapezoidIntegrator, integrate

CONSTANT_TWO = [1.0, 2.0, Operation.MULTIPLY]


class CountingEvaluator:
    def __init__(self):
        self.calls = 0

    def evaluate(self, token_sequence, x):
        self.calls += 1
        return RPNEvaluator.evaluate(token_sequence, x)


def test_small_range():
    assert integrate(CONSTANT_TWO, 0, 1, 1000) == pytest.approx(2.0, abs=0.01)


def test_large_range_allows_accumulated_drift():
    # x 反复累加 h，最后可能多出一个小区间（20.02）
    assert integrate(CONSTANT_TWO, 0, 10, 1000) == pytest.approx(20.0, abs=0.05)


def test_range_across_zero():
    assert integrate(CONSTANT_TWO, -1, 1, 1000) == pytest.approx(4.0, abs=0.01)


def test_zero_width_interval():
    for a in (0, -3.5, 12):
        assert integrate(CONSTANT_TWO, a, a, 1000) == 0
        assert integrate(convert("x ^ 2"), a, a, 7) == 0


def test_reversed_interval_is_zero():
    assert integrate(CONSTANT_TWO, 1, 0, 1000) == 0
    assert integrate(CONSTANT_TWO, 1, 0, 1000, stepping="indexed") == 0


def test_accumulate_mode_may_run_an_extra_step():
    # 0.1 累加十次得到 0.9999999999999999 < 1，于是多跑一次
    assert integrate(CONSTANT_TWO, 0, 1, 10) == pytest.approx(2.2)
    assert integrate(CONSTANT_TWO, 0, 1, 10, stepping="indexed") == pytest.approx(2.0)


def test_indexed_mode_is_exact_for_constants():
    assert integrate(CONSTANT_TWO, 0, 10, 1000, stepping="indexed") == pytest.approx(20.0, rel=1e-9)
    assert integrate(CONSTANT_TWO, -1, 0, 1000, stepping="indexed") == pytest.approx(2.0, rel=1e-9)


def test_constant_integral_is_linear_in_width():
    integrator = TrapezoidIntegrator(stepping="indexed")
    for width in (0.5, 1, 2, 5, 40):
        result = integrator.integrate(CONSTANT_TWO, 3, 3 + width, 1000)
        assert result == pytest.approx(2.0 * width, rel=1e-9)


def test_linear_function_is_integrated_exactly():
    integrator = TrapezoidIntegrator(stepping="indexed")

    assert integrator.integrate(convert("2 * x + 1"), 0, 3, 50) == pytest.approx(12.0, rel=1e-9)


def test_quadratic_converges():
    integrator = TrapezoidIntegrator(stepping="indexed")

    assert integrator.integrate(convert("x ^ 2"), 0, 1, 1000) == pytest.approx(1 / 3, abs=1e-6)


def test_default_steps_from_config():
    integrator = TrapezoidIntegrator(stepping="indexed")

    assert integrator.integrate(CONSTANT_TWO, 0, 1) == pytest.approx(2.0)


def test_pole_does_not_abort_integration():
    # 1 / x 在 x = 0 处记为 0
    integrator = TrapezoidIntegrator(stepping="indexed")

    assert integrator.integrate(convert("1 / x"), -1, 1, 2) == pytest.approx(0.0)


@pytest.mark.parametrize("steps", [0, -1, 2.5, True, "10"])
def test_invalid_steps_raise(steps):
    with pytest.raises(InvalidIntegrationError):
        integrate(CONSTANT_TWO, 0, 1, steps)


def test_infinite_bounds_raise():
    with pytest.raises(InvalidIntegrationError):
        integrate(CONSTANT_TWO, 0, float("inf"), 10)
    with pytest.raises(InvalidIntegrationError):
        integrate(CONSTANT_TWO, float("nan"), 1, 10)


def test_unknown_stepping_mode_raises():
    with pytest.raises(InvalidIntegrationError):
        TrapezoidIntegrator(stepping="simpson")


def test_boundary_values_are_reused():
    cached = TrapezoidIntegrator(cache_boundary=True)
    cached.evaluator = CountingEvaluator()
    uncached = TrapezoidIntegrator(cache_boundary=False)
    uncached.evaluator = CountingEvaluator()

    program = convert("x ^ 3 - x")
    # h = 0.25 可精确表示，恰好4个小区间
    result_cached = cached.integrate(program, 0, 1, 4)
    result_uncached = uncached.integrate(program, 0, 1, 4)

    assert result_cached == result_uncached
    assert cached.evaluator.calls == 5
    assert uncached.evaluator.calls == 8


def test_step_too_small_to_advance_raises():
    with pytest.raises(InvalidIntegrationError):
        integrate(CONSTANT_TWO, 1e20, 1e20 + 1e6, 10 ** 7)


def test_zero_width_interval_ignores_nan_samples():
    program = convert("-8 ^ 0.5")

    assert integrate(program, 2, 2, 10, stepping="indexed") == 0
