#!/usr/bin/env python3
"""
Soil Moisture Sensor Simulator
Simulates one irrigation device's control loop and animates its state

Usage:
    python simulator.py                     # TUI mode (default)
    python simulator.py --no-tui            # Plain console mode
    python simulator.py --no-tui --ticks 30 # Console mode, stop after 30 ticks

TUI keys: q quits, e forces the device into the Error state.
"""

import argparse
import asyncio

from sensor_sim import SensorSimulator


def main():
    """Entry point: decides between TUI and console mode."""
    parser = argparse.ArgumentParser(description="Soil moisture sensor simulator")
    parser.add_argument("--no-tui", action="store_true",
                        help="Use plain console mode instead of TUI")
    parser.add_argument("--ticks", type=int,
                        help="Stop after this many ticks (console mode only)")
    args = parser.parse_args()

    if args.ticks is not None and args.ticks < 1:
        parser.error("--ticks must be at least 1")
    if args.ticks is not None and not args.no_tui:
        parser.error("--ticks requires --no-tui")

    simulator = SensorSimulator()

    if not args.no_tui:
        # Textual's app.run() manages its own event loop
        from tui_app import SimulatorApp
        SimulatorApp(simulator).run()
        return

    asyncio.run(simulator.run_console(ticks=args.ticks))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\nGoodbye!")
