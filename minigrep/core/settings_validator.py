import codecs
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class SettingsValidator:
    """
    Validates settings structure and types.
    Returns a list of human-readable errors; empty means OK.
    """

    @staticmethod
    def validate(settings: Dict[str, Any]) -> List[str]:
        errors = []

        for section in ("logging", "reading", "readers"):
            if section in settings and not isinstance(settings[section], dict):
                errors.append(f"'{section}' must be a dictionary")

        # 1. Logging
        log_cfg = settings.get("logging", {})
        if isinstance(log_cfg, dict) and "level" in log_cfg:
            level = log_cfg["level"]
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                errors.append(f"'logging.level' must be one of {', '.join(LOG_LEVELS)}, got {level!r}")

        # 2. Reading
        reading = settings.get("reading", {})
        if isinstance(reading, dict) and "encoding" in reading:
            encoding = reading["encoding"]
            if not isinstance(encoding, str):
                errors.append(f"'reading.encoding' must be a string, got {type(encoding).__name__}")
            else:
                try:
                    codecs.lookup(encoding)
                except LookupError:
                    errors.append(f"'reading.encoding' is not a known codec: {encoding}")

        # 3. Readers (strict bools)
        readers = settings.get("readers", {})
        if isinstance(readers, dict):
            SettingsValidator._check_bool(readers, "docx", errors)
            SettingsValidator._check_bool(readers, "pdf", errors)

        if errors:
            logger.error(f"Settings Validation Failed: {errors}")
        else:
            logger.debug("Settings OK: readers=%s", readers)

        return errors

    @staticmethod
    def _check_bool(section: dict, key: str, errors: list):
        if key in section and not isinstance(section[key], bool):
            errors.append(f"Field '{key}' must be boolean, got {type(section[key]).__name__}")
