"""Display ETAs for ranked vehicle offers."""

from .schemas import EtaConfig


class EtaEstimator:
    """Base minutes per vehicle plus a fixed step per rank position."""

    def __init__(self, config: EtaConfig):
        self.config = config

    def minutes(self, vehicle_name: str, rank: int) -> int:
        base = self.config.base_minutes.get(vehicle_name, self.config.default_base_minutes)
        return base + rank * self.config.rank_step_minutes  # later ranks arrive later

    def estimate(self, vehicle_name: str, rank: int) -> str:
        return f"{self.minutes(vehicle_name, rank)} min"
