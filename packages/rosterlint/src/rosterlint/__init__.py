__version__ = "0.1.0"

__all__ = [
    "__version__",
    "checks",
    "cli",
    "config",
    "core",
    "errors",
    "exit_codes",
    "logging",
    "reporting",
    "run_id",
]
