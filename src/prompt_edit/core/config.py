"""Configuration and settings storage"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

FALSE_VALUES = {"0", "false", "off", "no"}

# Environment variable -> config key
ENV_OVERRIDES = {
    "PROMPT_EDIT_EXECUTABLE": "executable",
    "PROMPT_EDIT_PROVIDER": "provider",
    "PROMPT_EDIT_MODEL": "model",
    "PROMPT_EDIT_STREAM": "stream",
}


class Config:
    """Application configuration manager"""

    def __init__(
        self,
        config_file: str = "config.json",
        config_dir: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize configuration

        Args:
            config_file: Name of the config file
            config_dir: Directory holding it (defaults to ~/.prompt_edit)
            environ: Source of PROMPT_EDIT_* overrides (defaults to os.environ)
        """
        self.config_dir = Path(config_dir) if config_dir else Path.home() / ".prompt_edit"
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / config_file
        self._environ = os.environ if environ is None else environ
        self._config: Dict[str, Any] = {}
        self._overrides: Dict[str, Any] = {}
        self.load()

    def load(self):
        """Load configuration from file, then apply environment overrides"""
        self._config = self._default_config()
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if not isinstance(stored, dict):
                    raise ValueError("top-level value must be an object")
                self._config.update(stored)
            except (OSError, ValueError) as e:
                logger.error("Error loading config %s: %s", self.config_file, e)
        else:
            self.save()
        self._overrides = self._read_overrides()

    def save(self):
        """Save configuration to file"""
        try:
            with open(self.config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            logger.error("Error saving config %s: %s", self.config_file, e)

    def _default_config(self) -> Dict[str, Any]:
        """Return default configuration"""
        return {
            "executable": "ai-stdio",
            "provider": "anthropic",
            "model": "claude-sonnet-4-5",
            "stream": True,
            "extra_args": [],
            "forward_env": [],
            "keybindings": {},
        }

    def _read_overrides(self) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        for var, key in ENV_OVERRIDES.items():
            raw = self._environ.get(var)
            if raw is None or not raw.strip():
                continue
            if key == "stream":
                overrides[key] = raw.strip().lower() not in FALSE_VALUES
            else:
                overrides[key] = raw.strip()
        return overrides

    def keybinding(self, command: str, default: Optional[str]) -> Optional[str]:
        """Keybinding for a command, honoring the ``keybindings`` overrides"""
        bindings = self.get("keybindings") or {}
        return bindings.get(command, default)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        if key in self._overrides:
            return self._overrides[key]
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set a configuration value"""
        self._config[key] = value
        self._overrides.pop(key, None)
        self.save()

    def __getitem__(self, key: str) -> Any:
        """Allow dict-like access"""
        return self.get(key)

    def __setitem__(self, key: str, value: Any):
        """Allow dict-like assignment"""
        self.set(key, value)
