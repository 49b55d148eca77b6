import os

from typing import Optional
from dotenv import load_dotenv

from fieldvisit import log
from fieldvisit.models import Settings

# environment variable names mapped on Settings fields
ENV_VARS = {
    "log_level": "FIELDVISIT_LOG_LEVEL",
    "log_path": "FIELDVISIT_LOG_PATH",
    "log_append": "FIELDVISIT_LOG_APPEND",
}


def load_settings(env_file: Optional[str] = None, **kwargs) -> Settings:
    """
    Get a Settings object from environment variables, optionally read from a .env file first

    Parameters
    ----------
    env_file : str, optional
        path to a .env file. If not given, python-dotenv searches for a .env file itself.
        Variables that are already defined in the environment are not overridden.
    **kwargs : dict
        explicit settings, these take precedence over the environment

    Returns
    -------
    Settings
    """
    load_dotenv(dotenv_path=env_file)
    settings = {
        key: os.getenv(env_var) for key, env_var in ENV_VARS.items() if os.getenv(env_var) is not None
    }
    settings.update(kwargs)
    return Settings(**settings)


def start_logger_from_settings(settings: Settings):
    """Set up the fieldvisit logger on stdout and a dated log file in the configured log folder."""
    return log.setuplog(
        path=log.get_logfile(settings.log_folder),
        log_level=settings.log_level,
        append=settings.log_append,
    )
