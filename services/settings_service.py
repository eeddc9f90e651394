import json
import logging
from pathlib import Path
from typing import Optional

from models.settings_model import Settings

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / '.csv_finder' / 'settings.json'


class SettingsStore:
    """
    Persistencia de Settings en un JSON. Siempre best-effort:
    load() devuelve los valores por defecto ante cualquier problema y save() solo registra el error.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = Path(path) if path else DEFAULT_SETTINGS_PATH

    def load(self) -> Settings:
        if not self.path.exists(): return Settings()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("No se pudo leer %s: %s", self.path, e)
            return Settings()
        return Settings.from_dict(data)

    def save(self, settings: Settings) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(settings.to_dict(), f, indent=2)
            logger.info("Configuración guardada en %s", self.path)
        except (OSError, TypeError) as e:
            logger.warning("No se pudo guardar la configuración: %s", e)


class MemorySettingsStore:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self.saves = 0

    def load(self) -> Settings:
        return self.settings

    def save(self, settings: Settings) -> None:
        self.settings = settings
        self.saves += 1
