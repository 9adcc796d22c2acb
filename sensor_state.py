"""Device state enum and the data class tracking a simulated sensor."""

from dataclasses import dataclass
from enum import Enum

from constants import INITIAL_MOISTURE, THRESHOLD


class DeviceState(Enum):
    """Control states of the irrigation device.

    States:
    - MONITORING: Checking soil moisture
    - ACTIVATING: Starting a watering pass
    - ADJUSTING: Waiting for moisture to settle after watering
    - IDLE: Moisture is optimal
    - ERROR: Injected fault, no way out
    """

    MONITORING = "Monitoring"
    ACTIVATING = "Activating"
    ADJUSTING = "Adjusting"
    IDLE = "Idle"
    ERROR = "Error"


@dataclass
class SensorModel:
    """Mutable state of the simulated soil moisture sensor."""
    state: DeviceState = DeviceState.MONITORING
    moisture: float = INITIAL_MOISTURE   # %, only clamped at 0
    threshold: float = THRESHOLD         # Fixed after construction
    just_watered: bool = False           # Ignore the next reading once
    animation_phase: int = 0             # 0 or 1, blink styling only
