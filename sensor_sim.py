"""Simulation driver for a single soil moisture sensor.

Owns the SensorModel and the random moisture-drop source, runs one tick at a
time through the state machine, and routes status messages either to the
TUI log panel or to stdout in console mode.
"""

import random
from datetime import datetime
from typing import Optional

from constants import DROP_MAX, DROP_MIN, TICK_INTERVAL
from sensor_state import DeviceState, SensorModel
from state_machine import force_error, transition

# Rich markup style used when logging a message produced in each state
STATE_LOG_STYLES = {
    DeviceState.MONITORING: "yellow",
    DeviceState.ACTIVATING: "bold blue",
    DeviceState.ADJUSTING: "cyan",
    DeviceState.IDLE: "green",
    DeviceState.ERROR: "bold red",
}


class SensorSimulator:
    def __init__(self, sensor: Optional[SensorModel] = None,
                 rng: Optional[random.Random] = None,
                 tick_interval: float = TICK_INTERVAL):
        self.sensor = sensor or SensorModel()
        self.rng = rng or random.Random()
        self.tick_interval = tick_interval
        self.status_message = ""  # Latest non-empty transition message
        self.tick_count = 0
        self.running = True
        self.app = None  # Reference to TUI app (set by SimulatorApp)

    def log(self, text: str, style: str = ""):
        """Post a log message to the TUI, or print() if no TUI."""
        if self.app:
            self.app.post_message(self.app.LogMsg(text, style))
        else:
            print(f"  {text}")

    def next_reading(self) -> float:
        """Current moisture minus a random drop in [DROP_MIN, DROP_MAX)."""
        drop = self.rng.uniform(DROP_MIN, DROP_MAX)
        return max(self.sensor.moisture - drop, 0.0)

    async def tick(self) -> Optional[str]:
        """Run one simulation tick. Returns the tick's message, if any."""
        message = await transition(self.sensor, self.next_reading(),
                                   delay=self.tick_interval)
        self.tick_count += 1
        if message:
            self.status_message = message
            timestamp = datetime.now().strftime("%H:%M:%S")
            self.log(f"[{timestamp}] {message}",
                     style=STATE_LOG_STYLES[self.sensor.state])
        return message

    def inject_error(self):
        """Force the sensor into ERROR (the 'e' key)."""
        was = self.sensor.state
        force_error(self.sensor)
        if was != DeviceState.ERROR:
            self.log(f"Error injected (was {was.value})", style="bold red")

    def status_text(self) -> str:
        s = self.sensor
        return (f"State: {s.state.value}\n"
                f"Moisture: {s.moisture:.1f}%\n"
                f"Status: {self.status_message}")

    async def run_console(self, ticks: Optional[int] = None):
        """Plain console loop: one status line per tick until stopped."""
        print("\n" + "=" * 50)
        print("  Soil Moisture Simulator (Console)")
        print("=" * 50)
        print(f"  Threshold: {self.sensor.threshold:.1f}%")
        print("  Ctrl+C to stop")
        print()

        while self.running and (ticks is None or self.tick_count < ticks):
            await self.tick()
            s = self.sensor
            print(f"[{self.tick_count:>4}] {s.state.value:<10} {s.moisture:5.1f}%")
