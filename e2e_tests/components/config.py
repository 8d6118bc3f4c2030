import argparse
import difflib
import json
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

GREETING_MODES = ("validating", "static")


@dataclass
class Config:
    """Configuration for the E2E test runner."""

    lambda_function_name: str
    description: str = "Greeter E2E Test Run"
    greeting_mode: str = "validating"  # must match the deployed GREETING_MODE
    release_version: str = "1.1.2"
    static_greeting: Optional[str] = None
    aws_region: Optional[str] = None
    report_file: Optional[str] = None
    verbose: bool = False
    raw_config: Dict[str, Any] = field(default_factory=dict, repr=False)


def _missing_config_file_message(path: str) -> str:
    config_dir = os.path.dirname(path) or "./configs"
    if not os.path.exists(config_dir):
        return (
            f"Error: Configuration file '{path}' not found and config directory "
            f"'{config_dir}' does not exist."
        )

    available_configs = sorted(f for f in os.listdir(config_dir) if f.endswith(".json"))
    error_msg = f"Error: Configuration file '{path}' not found.\n"
    if not available_configs:
        return error_msg + f"\nNo configuration files found in {config_dir}/"

    close_matches = difflib.get_close_matches(
        os.path.basename(path), available_configs, n=3, cutoff=0.6
    )
    error_msg += f"\nAvailable configuration files in {config_dir}:\n"
    for config_file in available_configs:
        if config_file in close_matches:
            error_msg += f"  - {config_file}  ← Did you mean this one?\n"
        else:
            error_msg += f"  - {config_file}\n"
    return error_msg + "\nPlease check the filename and try again."


def load_configuration(args: argparse.Namespace) -> Config:
    """Loads configuration from file and overrides with CLI arguments."""
    config_data: Dict[str, Any] = {}
    if args.config:
        try:
            with open(args.config) as f:
                config_data = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(_missing_config_file_message(args.config))

    cli_args = {
        key: value
        for key, value in vars(args).items()
        if value is not None and key != "config"
    }
    config_data.update(cli_args)
    raw_config = config_data.copy()

    allowed_keys = {f.name for f in fields(Config) if f.name != "raw_config"}
    unknown_keys = sorted(set(config_data) - allowed_keys)
    if unknown_keys:
        hints = []
        for key in unknown_keys:
            close = difflib.get_close_matches(key, sorted(allowed_keys), n=1)
            hints.append(f"'{key}'" + (f" (did you mean '{close[0]}'?)" if close else ""))
        raise ValueError(f"Unknown configuration keys: {', '.join(hints)}")

    if not config_data.get("lambda_function_name"):
        raise ValueError("'lambda_function_name' is required (--function-name).")

    mode = config_data.get("greeting_mode", "validating")
    if mode not in GREETING_MODES:
        raise ValueError(f"greeting_mode must be one of {list(GREETING_MODES)}, not '{mode}'")

    return Config(raw_config=raw_config, **config_data)
