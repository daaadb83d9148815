"""
ReadsAnalyzer v0.1.0

Configuration schema for ReadsAnalyzer.

Defines all available configuration parameters with defaults and validation.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Dict, Any, Optional, List
from pathlib import Path
import copy
import yaml


VALID_INPUT_FORMATS = ['auto', 'fastq', 'fasta']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # K-mer Table
    # ========================================================================
    'kmers': {
        'enabled': True,
        'kmer_size': 21,  # Length of counted k-mers
    },

    # ========================================================================
    # Overlap Graph
    # ========================================================================
    'overlap_graph': {
        'enabled': True,
        'min_overlap': 20,  # Minimum suffix/prefix overlap for an edge
    },

    # ========================================================================
    # Input
    # ========================================================================
    'input': {
        'format': 'auto',  # 'auto', 'fastq', 'fasta'
        'min_length': 0,  # Drop reads shorter than this
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'assembly_path': 'out/assembly_out.txt',  # None disables the sink write
        'gfa_path': None,  # Optional overlap graph export
        'logging': {
            'level': 'INFO',
            'log_file': None,
        },
    },
}


def load_config(config_file: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Args:
        config_file: Path to YAML configuration file (optional)

    Returns:
        Complete configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_file:
        config_file = Path(config_file)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_file}")

        with open(config_file, 'r') as f:
            user_config = yaml.safe_load(f)

        if user_config:
            config = _deep_merge(config, user_config)

    return config


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def save_config_template(output_path: Path):
    """
    Save a configuration template with all default values to file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False, sort_keys=False)


def is_positive_int(value: Any) -> bool:
    """True for ints greater than zero; bools are rejected."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    kmers = config.get('kmers', {})
    overlap_graph = config.get('overlap_graph', {})

    # Settings of a disabled processor are never used
    kmer_size = kmers.get('kmer_size')
    if kmers.get('enabled') and not is_positive_int(kmer_size):
        errors.append(f"kmers.kmer_size must be a positive integer (got {kmer_size!r})")

    min_overlap = overlap_graph.get('min_overlap')
    if overlap_graph.get('enabled') and not is_positive_int(min_overlap):
        errors.append(f"overlap_graph.min_overlap must be a positive integer (got {min_overlap!r})")

    input_format = config.get('input', {}).get('format', 'auto')
    if input_format not in VALID_INPUT_FORMATS:
        errors.append(f"Invalid input format: {input_format}")

    min_length = config.get('input', {}).get('min_length', 0)
    if not isinstance(min_length, int) or min_length < 0:
        errors.append(f"input.min_length must be a non-negative integer (got {min_length!r})")

    level = config.get('output', {}).get('logging', {}).get('level', 'INFO')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging level: {level}")

    if not kmers.get('enabled') and not overlap_graph.get('enabled'):
        errors.append("At least one of kmers or overlap_graph must be enabled")

    return errors
