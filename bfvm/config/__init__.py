from .settings import CONFIG_ENV_VAR, InterpreterConfig, load_config

__all__ = [
    "InterpreterConfig",
    "load_config",
    "CONFIG_ENV_VAR",
]
