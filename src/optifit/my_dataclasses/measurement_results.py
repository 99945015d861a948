from dataclasses import dataclass


@dataclass(frozen=True)
class MeasurementResults:
    """Lens fitting values in mm, rounded to one decimal."""
    dp: float           # total pupillary distance
    dpn_left: float     # nasal pupillary distance, left eye
    dpn_right: float    # nasal pupillary distance, right eye
    height_left: float  # optical height, left eye
    height_right: float # optical height, right eye

    def as_dict(self) -> dict[str, float]:
        """Keys as used by the mobile app."""
        return {
            "dp": self.dp,
            "dpnLeft": self.dpn_left,
            "dpnRight": self.dpn_right,
            "heightLeft": self.height_left,
            "heightRight": self.height_right,
        }
