import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pyphystools.core.materials import Material, Metamaterial
from pyphystools.core.piecewise_function import PiecewiseFunction
from pyphystools.data.constants import UnitsPrefix
from pyphystools.parsing.config.material_config_parser import (MaterialConfigParser, MetamaterialConfigParser,
                                                               YAMLFileParser)
from pyphystools.parsing.io.data_handler import DelimitedFileLoader, FunctionFileLoader

logger = logging.getLogger(__name__)


def load_function(file_path: Union[str, Path], abscissa_unit: UnitsPrefix = UnitsPrefix.UNITY,
                  value_unit: UnitsPrefix = UnitsPrefix.UNITY,
                  loader: Optional[FunctionFileLoader] = None) -> PiecewiseFunction:
    """
    Load a piecewise-linear function from a data file.
    Args:
        file_path: Path to the data file
        abscissa_unit: Unit prefix of the abscissa column
        value_unit: Unit prefix of the value column
        loader: Loader to use, defaults to a DelimitedFileLoader for two-column tab-separated .txt files
    Returns:
        The function, in SI units
    Examples:
        # Capture times in ps against dot sizes in nm
        capture = load_function('capture.txt', UnitsPrefix.NANO, UnitsPrefix.PICO)
    """
    logger.info("Loading function from: %s", file_path)
    try:
        loader = loader if loader is not None else DelimitedFileLoader()
        function = loader.load_function(file_path, abscissa_unit, value_unit)
        logger.info("Successfully loaded function with %d points from %s", len(function), file_path)
        return function
    except Exception as e:
        logger.error("Failed to load function from %s: %s", file_path, e, exc_info=True)
        raise


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a flat YAML configuration file.
    Raises:
        FileNotFoundError: If the file doesn't exist
        MaterialConfigurationError: If the file is not a valid YAML mapping
    """
    logger.info("Loading configuration: %s", config_path)
    try:
        return YAMLFileParser(config_path).config
    except Exception as e:
        logger.error("Failed to load configuration %s: %s", config_path, e)
        raise


def create_material(config_path: Union[str, Path], function_loader: Optional[FunctionFileLoader] = None,
                    resource_dir: Optional[Union[str, Path]] = None) -> Material:
    """
    Create a material from a YAML configuration file.

    This is the main entry point for building Material objects. Without a function loader
    only constant carrier times can be defined; with one, the capture, escape and
    recombination times are all required and may be read from data files.
    Args:
        config_path: Path to the YAML configuration file
        function_loader: Loader for file-backed carrier times
        resource_dir: Directory of the carrier time files, defaults to 'ressources'
            next to the configuration file
    Returns:
        The material, with every quantity in SI units
    Examples:
        # Material with constant times only
        gaas = create_material('GaAs.yaml')

        # Material with carrier times read from tab-separated files
        inas = create_material('InAs.yaml', function_loader=DelimitedFileLoader())
    """
    logger.info("Creating material from: %s (loader: %s)", config_path, function_loader)
    try:
        parser = MaterialConfigParser(config_path)
        material = parser.create_material(function_loader=function_loader, resource_dir=resource_dir)
        logger.info("Successfully created material: %s", material.name)
        return material
    except Exception as e:
        logger.error("Failed to create material from %s: %s", config_path, e, exc_info=True)
        raise


def create_metamaterial(config_path: Union[str, Path], materials: Mapping[str, Material]) -> Metamaterial:
    """
    Create a metamaterial from a YAML configuration file.
    Args:
        config_path: Path to the YAML configuration file
        materials: Available materials, by name
    """
    logger.info("Creating metamaterial from: %s with %d available materials", config_path, len(materials))
    try:
        metamaterial = MetamaterialConfigParser(config_path).create_metamaterial(materials)
        logger.info("Successfully created metamaterial with %d materials", len(metamaterial.materials))
        return metamaterial
    except Exception as e:
        logger.error("Failed to create metamaterial from %s: %s", config_path, e, exc_info=True)
        raise
