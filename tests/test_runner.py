from __future__ import annotations

import threading

import pytest

from points_engine.conversion import RateTable, convert
from points_engine.core.entities import Currency, Frequency, MarketRegime, RunStatus
from points_engine.core.errors import InvalidMarketState, InvalidTransition
from points_engine.simulation import MarketModel, SimulationParams, SimulationRunner


def _params(**overrides) -> SimulationParams:
    values = dict(
        currency=Currency.FIAT,
        points_per_event=6000,
        frequency=Frequency.DAILY,
        duration_days=7,
        bonus_enabled=True,
        regime=MarketRegime.STABLE,
    )
    values.update(overrides)
    return SimulationParams(**values)


def test_new_runner_is_idle(runner: SimulationRunner) -> None:
    assert runner.status is RunStatus.IDLE
    assert runner.current_day == 0
    assert runner.results == ()
    assert runner.progress == 0.0
    assert runner.tick() is None


def test_daily_seven_day_run(runner: SimulationRunner) -> None:
    runner.start(_params())
    results = runner.run_to_completion()

    assert runner.status is RunStatus.COMPLETE
    assert [r.day for r in results] == [1, 2, 3, 4, 5, 6, 7]

    first = results[0]
    assert first.cumulative_input == first.input_points
    assert first.cumulative_output == first.net
    assert first.cumulative_fees == first.fee
    assert first.cumulative_bonus == first.bonus


def test_one_time_run_completes_after_horizon(runner: SimulationRunner) -> None:
    runner.start(_params(frequency=Frequency.ONE_TIME, duration_days=10))

    first = runner.tick()
    assert first is not None and first.day == 1

    for _ in range(8):
        assert runner.tick() is None
        assert runner.status is RunStatus.RUNNING

    assert runner.tick() is None
    assert runner.current_day == 10
    assert runner.status is RunStatus.COMPLETE
    assert len(runner.results) == 1


def test_weekly_and_monthly_event_days(rate_table: RateTable) -> None:
    weekly = SimulationRunner(rate_table)
    weekly.start(_params(frequency=Frequency.WEEKLY, duration_days=30))
    assert [r.day for r in weekly.run_to_completion()] == [1, 8, 15, 22, 29]

    monthly = SimulationRunner(rate_table)
    monthly.start(_params(frequency=Frequency.MONTHLY, duration_days=90))
    assert [r.day for r in monthly.run_to_completion()] == [1, 31, 61]


@pytest.mark.parametrize("regime", list(MarketRegime))
def test_cumulatives_are_monotonic(rate_table: RateTable, regime: MarketRegime) -> None:
    runner = SimulationRunner(rate_table, market=MarketModel(seed=11))
    runner.start(_params(duration_days=120, regime=regime, currency=Currency.TOKEN, points_per_event=2500))
    results = runner.run_to_completion()

    for prev, cur in zip(results, results[1:]):
        assert cur.cumulative_input >= prev.cumulative_input
        assert cur.cumulative_output >= prev.cumulative_output
        assert cur.cumulative_fees >= prev.cumulative_fees
        assert cur.cumulative_bonus >= prev.cumulative_bonus
        assert cur.cumulative_output == pytest.approx(prev.cumulative_output + cur.net)


def test_day_results_use_market_multiplier(rate_table: RateTable) -> None:
    market = MarketModel(seed=5)
    runner = SimulationRunner(rate_table, market=market)
    params = _params(regime=MarketRegime.VOLATILE)
    runner.start(params)
    results = runner.run_to_completion()

    entry = rate_table.lookup(Currency.FIAT)
    for r in results:
        expected = convert(6000, entry, market.multiplier(r.day, MarketRegime.VOLATILE), True)
        assert r.market_rate == expected.effective_rate
        assert r.net == expected.net


def test_pause_and_resume_reproduce_uninterrupted_run(rate_table: RateTable) -> None:
    params = _params(duration_days=20, regime=MarketRegime.VOLATILE)

    straight = SimulationRunner(rate_table, market=MarketModel(seed=3))
    straight.start(params)
    expected = straight.run_to_completion()

    interrupted = SimulationRunner(rate_table, market=MarketModel(seed=3))
    interrupted.start(params)
    for _ in range(6):
        interrupted.tick()

    interrupted.pause()
    assert interrupted.status is RunStatus.PAUSED
    assert interrupted.tick() is None
    assert interrupted.current_day == 6
    assert interrupted.run_to_completion() == interrupted.results

    interrupted.resume()
    assert interrupted.status is RunStatus.RUNNING
    assert interrupted.run_to_completion() == expected


def test_pause_and_resume_are_no_ops_in_other_states(runner: SimulationRunner) -> None:
    runner.pause()
    runner.resume()
    assert runner.status is RunStatus.IDLE

    runner.start(_params())
    runner.resume()
    assert runner.status is RunStatus.RUNNING

    runner.run_to_completion()
    runner.pause()
    assert runner.status is RunStatus.COMPLETE


def test_reset_discards_state(runner: SimulationRunner) -> None:
    runner.start(_params())
    runner.tick()
    runner.tick()

    runner.reset()
    assert runner.status is RunStatus.IDLE
    assert runner.current_day == 0
    assert runner.results == ()
    assert runner.params is None


def test_start_requires_idle(runner: SimulationRunner) -> None:
    runner.start(_params())
    with pytest.raises(InvalidTransition):
        runner.start(_params())

    runner.run_to_completion()
    with pytest.raises(InvalidTransition):
        runner.start(_params())

    runner.reset()
    runner.start(_params(duration_days=3))
    assert runner.status is RunStatus.RUNNING
    assert runner.current_day == 0


def test_duration_is_capped(rate_table: RateTable) -> None:
    runner = SimulationRunner(rate_table, max_duration_days=30)
    with pytest.raises(ValueError):
        runner.start(_params(duration_days=31))
    assert runner.status is RunStatus.IDLE


def test_progress_tracks_days(runner: SimulationRunner) -> None:
    runner.start(_params(duration_days=4))
    runner.tick()
    assert runner.progress == 0.25
    runner.run_to_completion()
    assert runner.progress == 1.0
    assert runner.latest.day == 4


def test_simulation_ignores_validator_bounds(runner: SimulationRunner) -> None:
    # Far above the fiat maximum and any plausible balance
    runner.start(_params(points_per_event=10_000_000, duration_days=2))
    assert len(runner.run_to_completion()) == 2


class _BrokenMarket(MarketModel):
    def multiplier(self, day, regime):
        return 0.0 if day == 3 else 1.0


def test_invalid_market_state_is_fatal_and_leaves_state_untouched(rate_table: RateTable) -> None:
    runner = SimulationRunner(rate_table, market=_BrokenMarket())
    runner.start(_params())
    runner.tick()
    runner.tick()

    with pytest.raises(InvalidMarketState) as excinfo:
        runner.tick()

    assert excinfo.value.day == 3
    assert runner.current_day == 2
    assert len(runner.results) == 2


def test_params_are_validated() -> None:
    with pytest.raises(ValueError):
        SimulationParams(points_per_event=0)
    with pytest.raises(ValueError):
        SimulationParams(duration_days=0)
    with pytest.raises(ValueError):
        SimulationParams(points_per_event=float("inf"))
    with pytest.raises(ValueError):
        SimulationParams(frequency="hourly")


class _BlockingMarket(MarketModel):
    """Blocks inside multiplier() until the test releases it."""

    def __init__(self) -> None:
        super().__init__(seed=1)
        self.entered = threading.Event()
        self.release = threading.Event()

    def multiplier(self, day, regime):
        self.entered.set()
        self.release.wait(timeout=5)
        return 1.0


def _tick_while_control_call_waits(runner: SimulationRunner, control) -> list:
    market = runner.market
    ticked = []

    tick_thread = threading.Thread(target=lambda: ticked.append(runner.tick()))
    tick_thread.start()
    assert market.entered.wait(timeout=5)

    control_thread = threading.Thread(target=control)
    control_thread.start()
    control_thread.join(timeout=0.1)
    # The control call cannot get in while the tick is mid-flight
    assert control_thread.is_alive()

    market.release.set()
    tick_thread.join(timeout=5)
    control_thread.join(timeout=5)
    assert not tick_thread.is_alive() and not control_thread.is_alive()
    return ticked


def test_pause_waits_for_in_flight_tick(rate_table: RateTable) -> None:
    runner = SimulationRunner(rate_table, market=_BlockingMarket())
    runner.start(_params())

    ticked = _tick_while_control_call_waits(runner, runner.pause)

    assert len(ticked) == 1 and ticked[0].day == 1
    assert runner.status is RunStatus.PAUSED
    assert runner.current_day == 1
    assert runner.results == (ticked[0],)


def test_reset_waits_for_in_flight_tick(rate_table: RateTable) -> None:
    runner = SimulationRunner(rate_table, market=_BlockingMarket())
    runner.start(_params())

    ticked = _tick_while_control_call_waits(runner, runner.reset)

    # The tick finished its append before reset discarded the run
    assert len(ticked) == 1 and ticked[0].day == 1
    assert ticked[0].cumulative_input == ticked[0].input_points
    assert runner.status is RunStatus.IDLE
    assert runner.current_day == 0
    assert runner.results == ()
