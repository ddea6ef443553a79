"""
CLI Configuration Manager for the Library Catalog CLI
Manages user preferences and command aliases
"""

import copy
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any, Optional, Union
from rich.console import Console

from library_catalog.config import settings

logger = logging.getLogger(__name__)
console = Console()

DEFAULT_CONFIG: Dict[str, Any] = {
    "preferences": {
        "prompt": "> ",
        "output_mode": "plain",
        "show_banner": True,
        "confirm_remove": False,
    },
    "aliases": {
        "a": "add",
        "l": "list",
        "r": "remove",
        "s": "search",
        "g": "group",
        "ls": "list",
        "rm": "remove",
    },
}


class CLIConfig:
    """Manages CLI configuration and user preferences."""

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = Path(config_dir or settings.cli_config_dir)
        self.config_file = self.config_dir / "config.json"
        self.config: Dict[str, Any] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load configuration from file or create default."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    self.config = json.load(f)
                if not isinstance(self.config, dict):
                    raise ValueError("top level must be an object")
                logger.debug("Config loaded from %s", self.config_file)
            except (OSError, ValueError) as e:
                console.print(f"[yellow]⚠️  Could not load config: {e}[/]")
                self.create_default_config()
        else:
            self.create_default_config()

    def create_default_config(self) -> None:
        """Create default configuration."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.save_config()
        logger.info("Default config created at %s", self.config_file)

    def save_config(self) -> None:
        """Save current configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            console.print(f"[red]❌ Could not save config: {e}[/]")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'preferences.prompt')."""
        value = self.config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation."""
        keys = key.split('.')
        config = self.config

        # Navigate to the parent dictionary
        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        if isinstance(config.get(keys[-1]), dict) and not isinstance(value, dict):
            raise ValueError(f"'{key}' is a configuration section and cannot be set to a single value")

        config[keys[-1]] = value
        self.save_config()

    def get_alias(self, command: str) -> str:
        """Get full command name from alias."""
        return self.list_aliases().get(command.lower(), command)

    def add_alias(self, alias: str, command: str) -> None:
        """Add a new command alias."""
        aliases = dict(self.list_aliases())
        aliases[alias.lower()] = command.lower()
        self.set("aliases", aliases)

    def remove_alias(self, alias: str) -> bool:
        """Remove a command alias."""
        aliases = dict(self.list_aliases())
        if alias.lower() not in aliases:
            return False
        del aliases[alias.lower()]
        self.set("aliases", aliases)
        return True

    def list_aliases(self) -> Dict[str, str]:
        """Get all configured aliases, or none if the section is not a mapping."""
        aliases = self.get("aliases", {})
        return aliases if isinstance(aliases, dict) else {}

    def reset_to_default(self) -> None:
        """Reset configuration to default values."""
        self.create_default_config()

    def show_config(self) -> None:
        """Display current configuration."""
        from rich.tree import Tree

        tree = Tree("📄 Library Catalog CLI Configuration", style="bold blue")

        for section, values in self.config.items():
            section_tree = tree.add(f"[bold cyan]{section.title()}[/]")
            if isinstance(values, dict):
                for key, value in values.items():
                    section_tree.add(f"[yellow]{key}[/]: [white]{value}[/]")
            else:
                section_tree.add(f"[white]{values}[/]")

        console.print(tree)
        console.print(f"\n[dim]Config file: {self.config_file}[/]")


@lru_cache(maxsize=1)
def get_cli_config() -> CLIConfig:
    """Shared configuration instance, created on first use."""
    return CLIConfig()
