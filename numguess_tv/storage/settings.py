import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

LOG = logging.getLogger("numguess.settings")


@dataclass
class AppSettings:
    seed: int | None = None

    kiosk_mode: bool = False
    window_width: int = 960
    window_height: int = 720

    click_sound: bool = True
    click_volume: float = 0.3
    speaker_device: str = ""

    log_level: str = "INFO"


class SettingsManager:
    def __init__(self, data_dir: Path | None = None):
        self.data_dir = data_dir or self._default_data_dir()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.data_dir / "settings.json"

    def _default_data_dir(self) -> Path:
        return Path.home() / ".numguess_tv"

    def load(self) -> AppSettings:
        if not self.path.exists():
            return AppSettings()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError):
            LOG.exception("Could not read %s, using defaults", self.path)
            return AppSettings()
        if not isinstance(data, dict):
            LOG.warning("Ignoring %s: expected a JSON object", self.path)
            return AppSettings()
        return self._from_dict(data)

    def save(self, settings: AppSettings):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, indent=2)

    def _from_dict(self, data: dict) -> AppSettings:
        settings = AppSettings()
        for key, value in data.items():
            if not hasattr(settings, key):
                continue
            if not self._valid(key, getattr(settings, key), value):
                LOG.warning("Ignoring %s=%r in %s: wrong type", key, value, self.path)
                continue
            if isinstance(getattr(settings, key), float):
                value = float(value)
            setattr(settings, key, value)
        return settings

    def _valid(self, key: str, default, value) -> bool:
        # bool is an int subclass, so it is checked first both ways
        if isinstance(value, bool) or isinstance(default, bool):
            return isinstance(value, bool) and isinstance(default, bool)
        if key == "seed":
            return value is None or isinstance(value, int)
        if isinstance(default, float):
            return isinstance(value, (int, float))
        return isinstance(value, type(default))
