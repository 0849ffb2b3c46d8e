"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first via ``python-dotenv`` so local development does not need
exported variables.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


load_dotenv()


def _optional_int(value: Optional[str]) -> Optional[int]:
    if value is None or value.strip() == "":
        return None
    return int(value)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Mailing Lists API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path of the JSON file holding every mailing list.  A relative path
    # is resolved against the project root by ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", "mailing-lists.json")

    # Indentation used when rewriting the data file.  Unset keeps the
    # compact single-line format.
    json_indent: Optional[int] = _optional_int(os.getenv("JSON_INDENT"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_data_path(data_file: Optional[str] = None) -> Path:
    """Compute the path to the mailing list data file.

    If the configured value is an absolute path, use it directly.
    Otherwise resolve it relative to the project root (the directory
    containing the ``mailing_lists_api`` package).
    """
    data_file = data_file or settings.data_file
    if os.path.isabs(data_file):
        return Path(data_file)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / data_file).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
