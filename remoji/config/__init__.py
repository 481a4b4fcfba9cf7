"""Configuration package for remoji."""

from .settings import get_cache_path, get_data_dir, get_env_var, get_table_url

__all__ = [
    "get_cache_path",
    "get_data_dir",
    "get_env_var",
    "get_table_url",
]
