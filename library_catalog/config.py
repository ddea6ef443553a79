import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from library_catalog import __version__

load_dotenv()


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    app_version: str = os.getenv("APP_VERSION", __version__)
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Data file settings
    data_file: Optional[str] = os.getenv("LIBRARY_DATA_FILE")
    file_encoding: str = os.getenv("LIBRARY_FILE_ENCODING", "utf-8")

    # CLI preferences and aliases live here
    cli_config_dir: str = os.getenv("LIBRARY_CLI_CONFIG_DIR", str(Path.home() / ".library-catalog"))


settings = Settings()
