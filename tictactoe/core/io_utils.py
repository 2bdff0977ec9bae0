"""
I/O utilities for YAML configuration files.
"""
import yaml
from pathlib import Path
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        filepath: Path to YAML file

    Returns:
        Parsed configuration dictionary (empty for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        yaml.YAMLError: If file is malformed
        ValueError: If the top level is not a mapping
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse {filepath}: {e}")
        raise

    logger.debug(f"Loaded {filepath}")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {filepath} must contain a mapping")
    return data
