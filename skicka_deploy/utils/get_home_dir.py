import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get skicka-deploy home directory from SKICKA_DEPLOY_HOME or default to ~/.skicka-deploy."""
    env_home = os.environ.get("SKICKA_DEPLOY_HOME")
    if env_home:
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".skicka-deploy"
