"""Environment-backed settings for fortem-mcp

A value comes from the process environment first, then from a ``.env``
file, then from the default passed by the caller. Set ``FORTEM_ENV_FILE``
to read a file other than ``./.env``.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILE_VAR = "FORTEM_ENV_FILE"
TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigLoader:
    """Reads settings from the environment after loading a .env file"""

    def __init__(self, env_path: Optional[str] = None):
        """
        Args:
            env_path: .env file to load. Defaults to ``$FORTEM_ENV_FILE``,
                then ``.env`` in the working directory.
        """
        self.env_path = Path(env_path or os.getenv(ENV_FILE_VAR) or ".env")
        if self.env_path.exists():
            # override=False: exported variables beat the file
            load_dotenv(dotenv_path=self.env_path, override=False)
            logger.debug(f"Loaded settings from {self.env_path}")
        else:
            logger.debug(f"No .env file at {self.env_path}")

    def get(self, env_var: str, default: Any) -> Any:
        """Read ``env_var``, parsed to the type of ``default``

        A blank value counts as unset, so ``SUI_PRIVATE_KEY=`` left in a
        .env template falls back to the default. A value that does not
        parse as the default's number type is logged and ignored.
        """
        raw = os.getenv(env_var)
        if raw is None or not raw.strip():
            return default
        raw = raw.strip()

        # bool before int: bool is an int subclass
        if isinstance(default, bool):
            return raw.lower() in TRUE_VALUES
        for number_type in (int, float):
            if isinstance(default, number_type):
                try:
                    return number_type(raw)
                except ValueError:
                    logger.warning(f"Ignoring {env_var}={raw!r}: not a valid {number_type.__name__}, using {default}")
                    return default
        return raw


_config_loader = None

def get_config_loader() -> ConfigLoader:
    """Process-wide loader, created on first use"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader
