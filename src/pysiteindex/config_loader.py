"""
Configuration loader for pysiteindex.
Provides cached access to the YAML and JSON coefficient files shipped in
the package ``cfg/`` directory.

Supports:
- YAML (.yaml, .yml) - site index curve coefficients
- JSON (.json) - alternative coefficient files

The coefficient file is keyed by equation set and then by species label:

    SHARMA-BRUNNER:
      spruce: {b1: ..., b2: ..., b3: ...}
    ERIKSSON:
      birch: {b1: ..., b2: ..., k: ...}
"""
import json
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union

from .exceptions import (
    ConfigurationError,
    CoefficientFileNotFoundError,
    InvalidDataError,
)
from .logging_config import get_logger

__all__ = [
    'DEFAULT_COEFFICIENT_FILE',
    'ConfigLoader',
    'get_config_loader',
    'load_coefficient_file',
]

DEFAULT_COEFFICIENT_FILE = 'site_index_coefficients.yaml'

logger = get_logger(__name__)


class ConfigLoader:
    """Loads coefficient files from the cfg/ directory.

    Attributes:
        cfg_dir: Path to the configuration directory
    """

    def __init__(self, cfg_dir: Optional[Union[str, Path]] = None):
        """Initialize the configuration loader.

        Args:
            cfg_dir: Path to the configuration directory. Defaults to the
                cfg/ directory inside the package.
        """
        if cfg_dir is None:
            cfg_dir = Path(__file__).parent / 'cfg'
        self.cfg_dir = Path(cfg_dir)

        # Cache for coefficient files (loaded once, reused)
        self._coefficient_cache: Dict[str, Dict[str, Any]] = {}

    def _load_config_file(self, file_path: Path) -> Dict[str, Any]:
        """Load configuration from a YAML or JSON file.

        Args:
            file_path: Path to the configuration file

        Returns:
            Dictionary containing configuration data

        Raises:
            CoefficientFileNotFoundError: If file doesn't exist
            ConfigurationError: If file format is not supported
            InvalidDataError: If parsing fails or the file is empty
        """
        if not file_path.exists():
            raise CoefficientFileNotFoundError(str(file_path))

        suffix = file_path.suffix.lower()

        try:
            if suffix in ['.yaml', '.yml']:
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = yaml.safe_load(f)
                if data is None:
                    raise InvalidDataError("YAML file", "file is empty or contains only comments")
            elif suffix == '.json':
                with open(file_path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if data is None:
                    raise InvalidDataError("JSON file", "file is empty or contains null")
            else:
                raise ConfigurationError(f"Unsupported configuration file format: {suffix}. "
                                         f"Supported formats: .yaml, .yml, .json")
        except yaml.YAMLError as e:
            raise InvalidDataError("YAML configuration", f"parsing error: {str(e)}") from e
        except json.JSONDecodeError as e:
            raise InvalidDataError("JSON configuration", f"parsing error: {str(e)}") from e

        if not isinstance(data, dict):
            raise InvalidDataError("coefficient file", f"expected a mapping at top level in {file_path}")
        return data

    def load_coefficient_file(self, filename: str = DEFAULT_COEFFICIENT_FILE) -> Dict[str, Any]:
        """Load a coefficient file with caching.

        Args:
            filename: Name of the file relative to cfg_dir, or an absolute path

        Returns:
            Dictionary containing coefficient data

        Raises:
            CoefficientFileNotFoundError: If the file doesn't exist
            InvalidDataError: If the file cannot be parsed
        """
        if filename not in self._coefficient_cache:
            file_path = Path(filename)
            if not file_path.is_absolute():
                file_path = self.cfg_dir / filename
            logger.debug("Loading coefficient file %s", file_path)
            self._coefficient_cache[filename] = self._load_config_file(file_path)
        return self._coefficient_cache[filename]

    def get_species_coefficients(self, equation_key: str, species_label: str,
                                 filename: str = DEFAULT_COEFFICIENT_FILE) -> Dict[str, Any]:
        """Get the coefficients of one species within one equation set.

        Args:
            equation_key: Top-level key, e.g. 'SHARMA-BRUNNER' or 'ERIKSSON'
            species_label: Species key, e.g. 'spruce'
            filename: Coefficient file name

        Returns:
            Copy of the species coefficient mapping, empty if absent
        """
        data = self.load_coefficient_file(filename)
        return dict(data.get(equation_key, {}).get(species_label, {}))

    def clear_coefficient_cache(self) -> None:
        """Clear the coefficient file cache.

        Useful for testing or when configuration files may have changed.
        """
        self._coefficient_cache.clear()


# Global configuration loader instance
_config_loader: Optional[ConfigLoader] = None


def get_config_loader() -> ConfigLoader:
    """Get the shared configuration loader instance."""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


def load_coefficient_file(filename: str = DEFAULT_COEFFICIENT_FILE) -> Dict[str, Any]:
    """Convenience function to load a coefficient file with caching.

    Args:
        filename: Name of the coefficient file

    Returns:
        Dictionary containing coefficient data
    """
    return get_config_loader().load_coefficient_file(filename)
