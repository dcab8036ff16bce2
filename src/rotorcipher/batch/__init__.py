from .config import MachineConfig, load_config, load_default_config, parse_config
from .session import SessionHeader, apply_header, log_step, parse_header, process_lines

__all__ = [
    "MachineConfig",
    "parse_config",
    "load_config",
    "load_default_config",
    "SessionHeader",
    "parse_header",
    "apply_header",
    "process_lines",
    "log_step",
]
