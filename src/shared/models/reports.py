"""Report models rendered from calculated activity metrics."""

from pydantic import BaseModel, Field

from .units import format_km


class TrainingReport(BaseModel):
    """Summary of a single training session."""

    kind: str = Field(description="Training kind as written in the record")
    duration_hours: float = Field(description="Session duration in hours")
    distance_km: float = Field(description="Distance covered in kilometers")
    speed_kmh: float = Field(description="Mean speed in kilometers per hour")
    calories: float = Field(description="Calories burned in kcal")

    model_config = {"frozen": True}

    def render(self) -> str:
        """Render the report as fixed-order text lines."""
        return (
            f"Тип тренировки: {self.kind}\n"
            f"Длительность: {self.duration_hours:.2f} ч.\n"
            f"Дистанция: {format_km(self.distance_km)}.\n"
            f"Скорость: {self.speed_kmh:.2f} км/ч\n"
            f"Сожгли калорий: {self.calories:.2f}\n"
        )


class DailyStepsReport(BaseModel):
    """Summary of a day's walking."""

    steps: int = Field(description="Number of steps taken")
    distance_km: float = Field(description="Distance covered in kilometers")
    calories: float = Field(description="Calories burned in kcal")

    model_config = {"frozen": True}

    def render(self) -> str:
        """Render the report as fixed-order text lines."""
        return (
            f"Количество шагов: {self.steps}.\n"
            f"Дистанция составила {format_km(self.distance_km)}.\n"
            f"Вы сожгли {self.calories:.2f} ккал.\n"
        )
