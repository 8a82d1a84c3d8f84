import platform
import time

import psutil

from models.schemas import HealthSnapshot


class HealthProvider:
    """Reads uptime and hostname from the host OS."""

    def get_health(self) -> HealthSnapshot:
        # boot_time() is wall-clock based; clamp in case the clock moved backwards
        uptime = max(0.0, time.time() - psutil.boot_time())
        return HealthSnapshot(uptime=round(uptime, 2), name=platform.node())
