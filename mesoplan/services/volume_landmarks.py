"""
Volume Landmarks

Weekly working-set landmarks per muscle (maintenance, minimum effective,
adaptive range and maximum recoverable volume) and the zone classifier used
by the volume dashboards and the deload detector.
"""

from __future__ import annotations

from dataclasses import dataclass

from mesoplan.models.enums import Muscle, VolumeZone


@dataclass(frozen=True)
class VolumeLandmarks:
    """Weekly set landmarks, ordered mv <= mev <= mav_low <= mav_high <= mrv."""

    mv: int
    mev: int
    mav_low: int
    mav_high: int
    mrv: int

    def __post_init__(self):
        values = (self.mv, self.mev, self.mav_low, self.mav_high, self.mrv)
        if any(v < 0 for v in values):
            raise ValueError(f"Volume landmarks must be non-negative, got {values}")
        if list(values) != sorted(values):
            raise ValueError(
                f"Volume landmarks must satisfy mv <= mev <= mav_low <= mav_high <= mrv, got {values}"
            )


VOLUME_LANDMARKS: dict[Muscle, VolumeLandmarks] = {
    Muscle.CHEST: VolumeLandmarks(8, 10, 12, 20, 22),
    Muscle.UPPER_BACK: VolumeLandmarks(4, 5, 6, 10, 12),
    Muscle.LATS: VolumeLandmarks(6, 8, 10, 16, 20),
    Muscle.LOWER_BACK: VolumeLandmarks(2, 3, 4, 8, 10),
    Muscle.SHOULDERS: VolumeLandmarks(6, 8, 16, 22, 26),
    Muscle.BICEPS: VolumeLandmarks(4, 6, 10, 14, 20),
    Muscle.TRICEPS: VolumeLandmarks(4, 6, 10, 14, 18),
    Muscle.FOREARMS: VolumeLandmarks(2, 4, 6, 10, 14),
    Muscle.QUADS: VolumeLandmarks(6, 8, 12, 18, 20),
    Muscle.HAMSTRINGS: VolumeLandmarks(4, 6, 10, 16, 20),
    Muscle.GLUTES: VolumeLandmarks(0, 0, 4, 12, 16),
    Muscle.CALVES: VolumeLandmarks(4, 6, 8, 16, 20),
    Muscle.ABS: VolumeLandmarks(0, 0, 8, 16, 20),
    Muscle.OBLIQUES: VolumeLandmarks(0, 0, 4, 10, 14),
}


def get_landmarks(muscle: Muscle | str) -> VolumeLandmarks | None:
    """Look up landmarks for a muscle key; unknown keys return None."""
    try:
        key = Muscle(muscle)
    except ValueError:
        return None
    return VOLUME_LANDMARKS.get(key)


def get_volume_zone(current_sets: int, landmarks: VolumeLandmarks) -> VolumeZone:
    """Classify a weekly set count against a muscle's landmarks.

    Boundaries: below mv, then [mv, mev), then [mev, mav_high],
    then (mav_high, mrv], then above mrv.
    """
    if current_sets < landmarks.mv:
        return VolumeZone.BELOW_MV
    if current_sets < landmarks.mev:
        return VolumeZone.MV_MEV
    if current_sets <= landmarks.mav_high:
        return VolumeZone.MEV_MAV
    if current_sets <= landmarks.mrv:
        return VolumeZone.MAV_MRV
    return VolumeZone.ABOVE_MRV
