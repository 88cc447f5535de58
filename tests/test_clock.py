from pixel_snake.clock import GameClock


def test_first_frame_has_no_delta():
    clock = GameClock()
    assert clock.delta(5000) == 0
    assert clock.delta(5016) == 16
    assert clock.delta(5010) == 0     # host clock went backwards


def test_runs_as_many_steps_as_accumulated():
    clock = GameClock()
    clock.advance(350)
    steps = []
    n = clock.run_steps(step=lambda: steps.append(1), rate=lambda: 10, running=lambda: True)
    assert n == 3 == len(steps)
    assert clock.accumulator == 50
    assert clock.now == 350


def test_zero_steps_when_short():
    clock = GameClock()
    clock.advance(99)
    assert clock.run_steps(step=lambda: None, rate=lambda: 10, running=lambda: True) == 0
    clock.advance(1)
    assert clock.run_steps(step=lambda: None, rate=lambda: 10, running=lambda: True) == 1


def test_rate_is_read_before_every_step():
    rates = iter([10, 5, 5, 5])
    clock = GameClock()
    clock.advance(350)
    # 100 ms, then 200 ms per step
    assert clock.run_steps(step=lambda: None, rate=lambda: next(rates), running=lambda: True) == 2
    assert clock.accumulator == 50


def test_stops_when_no_longer_running():
    alive = [True]

    def step():
        alive[0] = False

    clock = GameClock()
    clock.advance(1000)
    assert clock.run_steps(step=step, rate=lambda: 10, running=lambda: alive[0]) == 1
    assert clock.accumulator == 900


def test_reset_drops_backlog():
    clock = GameClock()
    clock.advance(700)
    clock.reset()
    assert clock.accumulator == 0
    assert clock.now == 700
