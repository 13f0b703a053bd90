"""Project configuration settings.

Only constants required by the CLI and its two backing components live here.
"""

import os

APP_NAME = "jinab"

# Credential
ENV_VAR_NAME = "JINA_API_KEY"
CONFIG_FILE_NAME = "config"  # stored under click.get_app_dir(APP_NAME)

# Jina endpoints
READ_ENDPOINT = "https://r.jina.ai"
SEARCH_ENDPOINT = "https://s.jina.ai"

# Shells click can emit completion scripts for
COMPLETION_SHELLS = ("bash", "zsh", "fish")

# Logging
LOG_LEVEL = os.environ.get("JINAB_LOG_LEVEL", "WARNING").upper()

__all__ = [
	'APP_NAME','ENV_VAR_NAME','CONFIG_FILE_NAME','READ_ENDPOINT','SEARCH_ENDPOINT',
	'COMPLETION_SHELLS','LOG_LEVEL'
]
