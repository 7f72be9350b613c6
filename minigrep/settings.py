import os
import copy
import yaml
import logging
from pathlib import Path
from typing import Dict, Any
from minigrep.core.settings_validator import SettingsValidator

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "logging": {"level": "WARNING"},
    "reading": {"encoding": "utf-8"},
    "readers": {"docx": True, "pdf": True},
}

def load_settings() -> Dict[str, Any]:
    """
    Loads settings from YAML files and environment variables.
    Returns a dictionary with the merged settings and status metadata.
    """
    settings_status = {
        "status": "OK",
        "error": None,
        "env": get_env(),
        "config_path": None,
        "source": None,
        "data": copy.deepcopy(DEFAULT_SETTINGS)
    }

    # --- 1. Read Overrides from ENV ---
    env_override_file = os.environ.get("MINIGREP_CONFIG_FILE")
    env_override_dir = os.environ.get("MINIGREP_CONFIG_DIR")
    env = settings_status["env"]

    # --- 2. Determine Config Directory and Files ---
    if env_override_file:
        config_path = Path(env_override_file)
        files_to_load = [config_path]
        settings_status["source"] = "ENV_FILE (MINIGREP_CONFIG_FILE)"
    elif env_override_dir:
        config_dir = Path(env_override_dir)
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        settings_status["source"] = "ENV_DIR (MINIGREP_CONFIG_DIR)"
    else:
        project_root = Path(__file__).parent.parent
        config_dir = project_root / "config"
        files_to_load = [
            config_dir / "general.yaml",
            config_dir / f"{env.lower()}.yaml"
        ]
        settings_status["source"] = "DEFAULT (repo/site-packages)"

    # --- 3. Load Files ---
    loaded = {}
    files_found = 0

    try:
        for file_path in files_to_load:
            if file_path.exists():
                files_found += 1
                settings_status["config_path"] = str(file_path)
                with open(file_path, "r", encoding="utf-8") as f:
                    content = yaml.safe_load(f) or {}
                if not isinstance(content, dict):
                    settings_status["status"] = "ERROR"
                    settings_status["error"] = f"Settings file must contain a mapping at the top level: {file_path}"
                    return settings_status
                loaded.update(content)
    except (OSError, yaml.YAMLError) as e:
        settings_status["status"] = "ERROR"
        settings_status["error"] = str(e)
        return settings_status

    if files_found == 0:
        if env_override_file:
            settings_status["status"] = "ERROR"
            settings_status["error"] = f"Settings file not found: {env_override_file}"
            return settings_status
        settings_status["source"] = "BUILTIN_DEFAULTS"
        logger.debug(f"No settings files found (tried: {[str(f) for f in files_to_load]}), using defaults")
        return settings_status

    # --- 4. Merge over defaults, section by section ---
    data = settings_status["data"]
    for section, value in loaded.items():
        if isinstance(value, dict) and isinstance(data.get(section), dict):
            data[section].update(value)
        else:
            data[section] = value

    # --- 5. Validation ---
    validation_errors = SettingsValidator.validate(data)
    if validation_errors:
        settings_status["status"] = "ERROR"
        settings_status["error"] = "Invalid Settings:\n" + "\n".join(validation_errors)
        return settings_status

    logger.debug(f"Settings Loaded from {settings_status['config_path']}: readers={data.get('readers')}")
    return settings_status

def get_env() -> str:
    """
    Detects the current environment.
    Checks MINIGREP_ENV, defaults to DEV.
    """
    return os.environ.get("MINIGREP_ENV", "DEV").upper()
