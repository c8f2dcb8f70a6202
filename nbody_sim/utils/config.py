"""Configuration management."""

import json
import yaml
from typing import Dict, Any, Optional
from pathlib import Path
from dataclasses import dataclass, asdict


@dataclass
class Config:
    """Simulation configuration."""
    # Initial conditions
    preset: str = "stable_ring"
    preset_params: Dict[str, Any] = None

    # Integration
    integrator: str = "ode45"
    integrator_params: Dict[str, Any] = None

    # Streaming
    buffer_capacity: int = 512

    # Reporting
    verbose: bool = False
    debug_interval: int = 100

    def __post_init__(self):
        if self.preset_params is None:
            self.preset_params = {"n": 3, "scale": 0.9} if self.preset == "stable_ring" else {}
        if self.integrator_params is None:
            self.integrator_params = {}
        if self.buffer_capacity <= 0:
            raise ValueError(f"buffer_capacity must be positive, got {self.buffer_capacity}")


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)


def build_system(config: Optional[Config] = None):
    """Create an NBodySystem from ``config`` (defaults if None)."""
    from nbody_sim.physics.nbody import NBodySystem
    from nbody_sim.presets import get_preset

    config = config or Config()
    system_def = get_preset(config.preset, **config.preset_params)
    return NBodySystem(
        system_def,
        integrator=config.integrator,
        verbose=config.verbose,
        debug_interval=config.debug_interval,
        **config.integrator_params,
    )
