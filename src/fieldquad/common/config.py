"""
Centralized Configuration Management for fieldquad

This module provides a unified interface for loading and accessing
quadrature defaults from YAML files.
"""

import os
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field, asdict

from ..field import ComplexField, DualField, Field, MpfField, RealField


@dataclass
class AccuracyConfig:
    """Accuracy targets and budgets for an integration"""

    relative_accuracy: float = 1.0e-6
    absolute_accuracy: float = 1.0e-15

    # Refinement stages
    minimal_iteration_count: int = 3
    maximal_iteration_count: int = 64  # trapezoid ceiling

    # Objective-function calls per integrate()
    max_evaluations: int = 1_000_000


@dataclass
class FieldConfig:
    """Configuration for the default numeric field"""

    kind: str = "real"      # real, complex, dual or mpf
    parameters: int = 1     # gradient length for dual numbers
    dps: int = 50           # decimal digits for mpf numbers

    def build(self) -> Field:
        """
        Build the configured field

        Raises:
            ValueError: If kind is not a known field
        """
        kind = self.kind.lower().strip()
        if kind == "real":
            return RealField()
        if kind == "complex":
            return ComplexField()
        if kind == "dual":
            return DualField(self.parameters)
        if kind == "mpf":
            return MpfField(self.dps)
        raise ValueError(
            f"Unknown field kind: '{self.kind}'. "
            f"Available: complex, dual, mpf, real"
        )


@dataclass
class LoggingConfig:
    """Configuration for package logging"""

    level: str = "INFO"
    json_format: bool = True
    log_file: Optional[str] = None


@dataclass
class QuadratureConfig:
    """Master configuration for fieldquad"""

    accuracy: AccuracyConfig = field(default_factory=AccuracyConfig)
    numeric: FieldConfig = field(default_factory=FieldConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'QuadratureConfig':
        """Load configuration from YAML file"""
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}

        return cls(
            accuracy=AccuracyConfig(**config_dict.get('accuracy', {})),
            numeric=FieldConfig(**config_dict.get('numeric', {})),
            logging=LoggingConfig(**config_dict.get('logging', {})),
        )

    def to_yaml(self, yaml_path: str) -> None:
        """Save configuration to YAML file"""
        config_dict = {
            'accuracy': asdict(self.accuracy),
            'numeric': asdict(self.numeric),
            'logging': asdict(self.logging),
        }

        with open(yaml_path, 'w') as f:
            yaml.dump(config_dict, f, default_flow_style=False)


def get_config(config_path: Optional[str] = None) -> QuadratureConfig:
    """
    Get quadrature configuration

    Priority:
    1. Provided config_path
    2. FIELDQUAD_CONFIG environment variable
    3. config/fieldquad.yml
    4. Default configuration
    """
    if config_path is None:
        config_path = os.getenv('FIELDQUAD_CONFIG')

    if config_path is None:
        default_path = Path('config/fieldquad.yml')
        if default_path.exists():
            config_path = str(default_path)

    if config_path and Path(config_path).exists():
        return QuadratureConfig.from_yaml(config_path)

    # Return default configuration
    return QuadratureConfig()
