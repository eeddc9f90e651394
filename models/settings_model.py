from dataclasses import dataclass, asdict, fields, replace
from typing import Any, Dict

DELIMITER_CHOICES = {
    "auto": "Automático",
    ",": "Coma (,)",
    "\t": "Tabulador",
    ";": "Punto y coma (;)",
    "|": "Barra (|)",
}


@dataclass(frozen=True)
class Settings:
    """
    Opciones del proceso. Se cargan una vez al iniciar y se pasan por valor;
    cada cambio genera un Settings nuevo.
    """
    has_header: bool = True
    exact_match: bool = False
    skip_empty_rows: bool = True
    simplify_numbers: bool = True
    delimiter: str = "auto"

    def with_changes(self, **changes) -> "Settings":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        # Claves desconocidas se ignoran; valores con tipo incorrecto vuelven al default
        defaults = Settings()
        values = {}
        for f in fields(Settings):
            default = getattr(defaults, f.name)
            value = data.get(f.name, default) if isinstance(data, dict) else default
            if type(value) is not type(default): value = default
            values[f.name] = value
        if values["delimiter"] not in DELIMITER_CHOICES: values["delimiter"] = defaults.delimiter
        return Settings(**values)
