# measurement_config.py
from dataclasses import dataclass, asdict
from pathlib import Path

import tomli
import tomli_w

from optifit.helpers.thread_safe_config import ThreadSafeConfig
from optifit.logging_utils.logging_setup import get_logger
from optifit.measurement.scale import CARD_WIDTH_MM

log = get_logger(__name__)

MEASUREMENT_TOML_PATH = Path(__file__).parent / "measurement_config.toml"
SECTION = "measurement"


@dataclass
class MeasurementConfig:
    """
    reference_width_mm: physical width of the reference object in the photo
        (ID-1 card by default)
    min_pixel_distance: card edges this close or closer give a degenerate
        calibration
    """
    reference_width_mm: float = CARD_WIDTH_MM
    min_pixel_distance: float = 0.0

    def __post_init__(self):
        self.reference_width_mm = float(self.reference_width_mm)
        self.min_pixel_distance = float(self.min_pixel_distance)
        if self.reference_width_mm <= 0:
            raise ValueError(f"reference_width_mm must be > 0, got {self.reference_width_mm}")
        if self.min_pixel_distance < 0:
            raise ValueError(f"min_pixel_distance must be >= 0, got {self.min_pixel_distance}")


def load_measurement_config(path: Path = MEASUREMENT_TOML_PATH) -> MeasurementConfig:
    try:
        with path.open("rb") as f:
            raw = tomli.load(f).get(SECTION, {})
    except FileNotFoundError:
        log.warning("Config file %s not found, using defaults", path)
        raw = {}

    known = {k: v for k, v in raw.items() if k in MeasurementConfig.__dataclass_fields__}
    for k in raw.keys() - known.keys():
        log.warning("Ignoring unknown key '%s' in [%s] of %s", k, SECTION, path)
    return MeasurementConfig(**known)


def save_measurement_config(path: Path, config: ThreadSafeConfig[MeasurementConfig]):
    try:
        with path.open("rb") as f:
            data = tomli.load(f)
    except FileNotFoundError:
        data = {}

    data[SECTION] = asdict(config.get_raw())

    with path.open("wb") as f:
        tomli_w.dump(data, f)


# Global instance
measurement_config = ThreadSafeConfig(load_measurement_config(MEASUREMENT_TOML_PATH))
