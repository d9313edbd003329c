"""Enumeration types for activity records."""

from enum import Enum


class TrainingKind(str, Enum):
    """Type of training session with a known calorie formula."""

    RUNNING = "running"
    WALKING = "walking"

    @classmethod
    def from_label(cls, label: str) -> "TrainingKind | None":
        """
        Resolve a record label to a training kind, ignoring case.

        Both English labels and the Russian labels used in
        tracker records ("бег", "ходьба") are recognised.

        Args:
            label: Kind as written in the record

        Returns:
            Matching kind, or None if the label is unknown
        """
        return _LABELS.get(label.lower())


_LABELS: dict[str, TrainingKind] = {
    "running": TrainingKind.RUNNING,
    "бег": TrainingKind.RUNNING,
    "walking": TrainingKind.WALKING,
    "ходьба": TrainingKind.WALKING,
}
