"""Environment systems.

Systems hold the environmental state that modulates organism behavior and
advance it once per step, before any organism acts:

```
STEP_START ─▶ TIME_UPDATE (ClockSystem) ─▶ ENVIRONMENT (WeatherSystem)
           ─▶ ANIMAL_ACT ─▶ PLANT_ACT ─▶ BUFFER_SWAP ─▶ STEP_END
```
"""

from reef.systems.base import BaseSystem, SystemResult

__all__ = [
    "BaseSystem",
    "SystemResult",
]
