"""Textual TUI application for the soil moisture simulator."""

from textual import work
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Footer, Header, RichLog, Static

from constants import APP_TITLE, ERROR_KEY, FLOWER_TITLE, QUIT_KEY
from flower import render_flower
from sensor_sim import SensorSimulator


class SimulatorApp(App):
    """Textual TUI for the soil moisture simulator."""

    TITLE = APP_TITLE

    CSS = """
    #main {
        width: 1fr;
    }
    #status {
        height: 5;
        border: solid $primary;
        padding: 0 1;
    }
    #flower {
        height: 1fr;
        border: solid $accent;
        padding: 0 1;
    }
    #log {
        width: 44;
        border: solid $primary;
    }
    """

    BINDINGS = [
        (QUIT_KEY, "quit", "Quit"),
        (ERROR_KEY, "inject_error", "Inject error"),
        ("f3", "clear_log", "Clear"),
    ]

    # ---- Custom Messages ----

    class TickMsg(Message):
        """A simulation tick finished."""

    class LogMsg(Message):
        """Generic log line for the RichLog panel."""
        def __init__(self, text: str, style: str = ""):
            super().__init__()
            self.text = text
            self.style = style

    # ---- Init ----

    def __init__(self, simulator: SensorSimulator):
        super().__init__()
        self.simulator = simulator
        self.simulator.app = self  # Back-reference for log routing

    # ---- Layout ----

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="main"):
                yield Static("", id="status")
                yield Static("", id="flower")
            yield RichLog(id="log", wrap=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        """Set panel titles, paint the initial state and start ticking."""
        self.query_one("#status", Static).border_title = APP_TITLE
        self.query_one("#flower", Static).border_title = FLOWER_TITLE
        self.query_one("#log", RichLog).border_title = "Events"
        self.update_panels()
        self.run_ticks()

    # ---- Tick Worker ----

    @work(exclusive=True, group="ticker")
    async def run_ticks(self) -> None:
        """Drive the simulation; each tick sleeps for the tick interval."""
        sim = self.simulator
        while sim.running:
            await sim.tick()
            self.post_message(self.TickMsg())

    # ---- Message Handlers ----

    def on_simulator_app_tick_msg(self, msg: TickMsg) -> None:
        self.update_panels()

    def on_simulator_app_log_msg(self, msg: LogMsg) -> None:
        """Handle generic log messages."""
        log = self.query_one("#log", RichLog)
        if msg.style:
            log.write(f"[{msg.style}]{msg.text}[/{msg.style}]")
        else:
            log.write(msg.text)

    # ---- UI Updates ----

    def update_panels(self) -> None:
        """Refresh the status block and the flower."""
        sim = self.simulator
        sensor = sim.sensor
        try:
            self.query_one("#status", Static).update(sim.status_text())
            self.query_one("#flower", Static).update(
                render_flower(sensor.state, sensor.animation_phase))
        except NoMatches:
            pass  # Not mounted yet, or already torn down

    # ---- Actions ----

    def action_inject_error(self) -> None:
        """Force the device into the Error state."""
        self.simulator.inject_error()
        self.update_panels()

    def action_clear_log(self) -> None:
        """Clear the log panel."""
        self.query_one("#log", RichLog).clear()

    def on_unmount(self) -> None:
        """Stop the tick loop when the app exits."""
        self.simulator.running = False
