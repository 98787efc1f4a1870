from beast_escape.grid import Grid
from beast_escape.runner import run_case, run_scenarios
from beast_escape.scenarios import Scenario, load_scenarios


def test_bundled_corpus_passes():
    report = run_scenarios(load_scenarios())

    assert (report.ok, report.failed) == (30, 0)
    assert report.summary() == "Passed all 30 tests!"


def test_parallel_run_matches_serial():
    scenarios = load_scenarios()
    serial = run_scenarios(scenarios, workers=1)
    parallel = run_scenarios(scenarios, workers=4)

    assert [(r.scenario, r.can_step_on_trap, r.route) for r in parallel.results] == [
        (r.scenario, r.can_step_on_trap, r.route) for r in serial.results
    ]


def test_failures_are_counted_and_described():
    scenario = Scenario(
        name="corridor",
        grid=Grid.from_text("E     H              B"),
        trap_beast=7,
        wary_beast=5,
    )
    report = run_scenarios([scenario])

    assert (report.ok, report.failed) == (1, 1)
    assert report.summary() == "1 of 2 tests failed"
    (failure,) = report.failures
    assert not failure.can_step_on_trap
    assert "expected size 5, got 7" in failure.describe()


def test_case_size_uses_corpus_convention():
    trapped = Scenario(name="t", grid=Grid.from_text("E  W  H              B"), trap_beast=0, wary_beast=0)
    result = run_case(trapped, can_step_on_trap=True)

    assert result.route == []
    assert result.size == 0
    assert result.passed
