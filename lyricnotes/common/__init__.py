"""Common utilities shared across input, note derivation and output."""

from lyricnotes.common.utils import (
    unique_preserve_order,
    sanitize_filename,
)
from lyricnotes.common.logging import (
    log_info,
    log_debug,
    log_error,
    set_thread_log_context,
    setup_thread_prefixed_stdout,
    DEFAULT_PARALLEL_WORKERS,
)
from lyricnotes.common.config import (
    CONFIG_FILENAME,
    FolderConfig,
    load_folder_config,
    get_output_dir,
)

__all__ = [
    # utils
    "unique_preserve_order",
    "sanitize_filename",
    # logging
    "log_info",
    "log_debug",
    "log_error",
    "set_thread_log_context",
    "setup_thread_prefixed_stdout",
    "DEFAULT_PARALLEL_WORKERS",
    # config
    "CONFIG_FILENAME",
    "FolderConfig",
    "load_folder_config",
    "get_output_dir",
]
