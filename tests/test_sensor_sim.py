import asyncio
import random

from sensor_sim import SensorSimulator
from sensor_state import DeviceState, SensorModel


class FixedRng:
    """Always drops moisture by the same amount."""
    def __init__(self, drop):
        self.drop = drop

    def uniform(self, a, b):
        return self.drop


class FakeApp:
    class LogMsg:
        def __init__(self, text, style=""):
            self.text = text
            self.style = style

    def __init__(self):
        self.posted = []

    def post_message(self, msg):
        self.posted.append(msg)


def test_next_reading_subtracts_drop():
    sim = SensorSimulator(rng=FixedRng(1.0))
    assert sim.next_reading() == 49.0


def test_next_reading_clamps_at_zero():
    sim = SensorSimulator(sensor=SensorModel(moisture=0.3), rng=FixedRng(0.5))
    assert sim.next_reading() == 0.0


def test_drop_stays_in_range():
    sim = SensorSimulator(rng=random.Random(1234))
    for _ in range(200):
        drop = sim.sensor.moisture - sim.next_reading()
        assert 0.5 - 1e-9 <= drop <= 2.0


def test_tick_updates_status_and_logs(capsys):
    sim = SensorSimulator(sensor=SensorModel(moisture=30.5),
                          rng=FixedRng(1.0), tick_interval=0)
    message = asyncio.run(sim.tick())
    assert message == "Moisture low (29.5%), activating..."
    assert sim.sensor.state == DeviceState.ACTIVATING
    assert sim.status_message == message
    assert sim.tick_count == 1
    assert message in capsys.readouterr().out


def test_quiet_tick_keeps_last_message():
    sim = SensorSimulator(rng=FixedRng(1.0), tick_interval=0)
    sim.status_message = "earlier"
    assert asyncio.run(sim.tick()) is None
    assert sim.status_message == "earlier"


def test_status_text():
    sim = SensorSimulator()
    assert sim.status_text() == "State: Monitoring\nMoisture: 50.0%\nStatus: "
    sim.sensor.moisture = 44.04
    sim.status_message = "Watering... Moisture now 44.0%"
    assert sim.status_text().splitlines() == [
        "State: Monitoring",
        "Moisture: 44.0%",
        "Status: Watering... Moisture now 44.0%",
    ]


def test_log_routes_to_app():
    sim = SensorSimulator()
    app = FakeApp()
    sim.app = app
    sim.log("hello", style="green")
    assert len(app.posted) == 1
    assert app.posted[0].text == "hello"
    assert app.posted[0].style == "green"


def test_inject_error_logs_once():
    sim = SensorSimulator()
    app = FakeApp()
    sim.app = app
    sim.inject_error()
    sim.inject_error()
    assert sim.sensor.state == DeviceState.ERROR
    assert [m.text for m in app.posted] == ["Error injected (was Monitoring)"]


def test_error_ticks_repeat_message():
    sim = SensorSimulator(rng=FixedRng(1.0), tick_interval=0)
    sim.app = FakeApp()
    sim.inject_error()
    for _ in range(3):
        assert asyncio.run(sim.tick()) == "Error state, no transitions"
    assert sim.sensor.state == DeviceState.ERROR


def test_full_watering_cycle():
    sim = SensorSimulator(sensor=SensorModel(moisture=30.5),
                          rng=FixedRng(1.0), tick_interval=0)
    sim.app = FakeApp()
    states = []
    for _ in range(4):
        asyncio.run(sim.tick())
        states.append(sim.sensor.state)
    # 29.5 -> activate, 28.5 + 15 = 43.5 -> adjust, held at 43.5 -> idle
    assert states == [
        DeviceState.ACTIVATING,
        DeviceState.ADJUSTING,
        DeviceState.IDLE,
        DeviceState.IDLE,
    ]
    assert sim.sensor.moisture == 42.5


def test_run_console_stops_after_ticks(capsys):
    sim = SensorSimulator(rng=FixedRng(1.0), tick_interval=0)
    asyncio.run(sim.run_console(ticks=3))
    assert sim.tick_count == 3
    out = capsys.readouterr().out
    assert "Soil Moisture Simulator (Console)" in out
    assert "47.0%" in out
