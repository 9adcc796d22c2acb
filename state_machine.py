"""Transition logic for the soil moisture sensor.

One call to step() is one tick:
  - Apply the proposed reading (clamped at 0) unless the last tick watered
  - Run the current state's action and guards
  - Return a status message if the tick produced one

Hysteresis: Adjusting stays put while threshold <= moisture < threshold + 10,
so the device neither re-waters nor goes idle inside that band.
"""

import asyncio
from typing import Optional

from constants import OPTIMAL_MARGIN, TICK_INTERVAL, WATERING_BOOST
from sensor_state import DeviceState, SensorModel

ERROR_MESSAGE = "Error state, no transitions"


def _toggle_phase(sensor: SensorModel):
    sensor.animation_phase = (sensor.animation_phase + 1) % 2


def step(sensor: SensorModel, proposed_moisture: float) -> Optional[str]:
    """Advance the sensor by one tick. Never raises."""
    if not sensor.just_watered:
        sensor.moisture = max(proposed_moisture, 0.0)
    sensor.just_watered = False

    state = sensor.state
    if state == DeviceState.MONITORING:
        _toggle_phase(sensor)
        if sensor.moisture < sensor.threshold:
            sensor.state = DeviceState.ACTIVATING
            sensor.animation_phase = 0
            return f"Moisture low ({sensor.moisture:.1f}%), activating..."
        return None

    if state == DeviceState.ACTIVATING:
        sensor.moisture += WATERING_BOOST
        sensor.state = DeviceState.ADJUSTING
        sensor.just_watered = True
        _toggle_phase(sensor)
        return f"Watering... Moisture now {sensor.moisture:.1f}%"

    if state == DeviceState.ADJUSTING:
        sensor.animation_phase = 0
        if sensor.moisture >= sensor.threshold + OPTIMAL_MARGIN:
            sensor.state = DeviceState.IDLE
            return f"Moisture optimal ({sensor.moisture:.1f}%), going idle"
        if sensor.moisture < sensor.threshold:
            sensor.state = DeviceState.MONITORING
            return f"Moisture still low ({sensor.moisture:.1f}%), back to monitoring"
        return None

    if state == DeviceState.IDLE:
        sensor.animation_phase = 0
        if sensor.moisture < sensor.threshold:
            sensor.state = DeviceState.MONITORING
            return "Moisture dropping, back to monitoring"
        return None

    # ERROR is a sink: blink and repeat the same message forever
    _toggle_phase(sensor)
    return ERROR_MESSAGE


async def transition(sensor: SensorModel, proposed_moisture: float,
                     delay: float = TICK_INTERVAL) -> Optional[str]:
    """Run step() then hold for the tick interval before returning."""
    message = step(sensor, proposed_moisture)
    await asyncio.sleep(delay)
    return message


def force_error(sensor: SensorModel):
    """Jump straight to ERROR, skipping every guard."""
    sensor.state = DeviceState.ERROR
