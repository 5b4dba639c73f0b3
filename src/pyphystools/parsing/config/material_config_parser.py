import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from ruamel.yaml import YAML, constructor, error

from pyphystools.algorithms.interpolation import to_decimal
from pyphystools.core.exceptions import FunctionArgumentError, MaterialConfigurationError
from pyphystools.core.materials import Material, Metamaterial
from pyphystools.core.piecewise_function import PiecewiseFunction
from pyphystools.data.constants import (DECIMAL_CONTEXT, FileConstants, PhysicalConstants, ProcessingConstants,
                                        UnitsPrefix)
from pyphystools.parsing.config.config_keys import (BANDGAP_KEY, CAPTURE_TIMES_KEY, ELECTRON_EFFECTIVE_MASS_KEY,
                                                    ESCAPE_TIMES_KEY, FILE_KEY, HOLE_EFFECTIVE_MASS_KEY,
                                                    MATERIAL_KEY, NAME_KEY, OFFSET_KEY, RECOMBINATION_TIMES_KEY,
                                                    TIME_KEY_SEPARATOR)
from pyphystools.parsing.io.data_handler import FunctionFileLoader

logger = logging.getLogger(__name__)

REQUIRED_MATERIAL_KEYS = (NAME_KEY, BANDGAP_KEY, ELECTRON_EFFECTIVE_MASS_KEY, HOLE_EFFECTIVE_MASS_KEY)
TIME_KEYS = (CAPTURE_TIMES_KEY, ESCAPE_TIMES_KEY, RECOMBINATION_TIMES_KEY)


class BaseFileParser:
    """Base class for parsing configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self.config = self._load_config()
        logger.info("Successfully loaded configuration from: %s", self.config_path)

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for flat YAML configuration files."""

    def _load_config(self) -> Dict[str, Any]:
        if self.config_path.suffix not in FileConstants.CONFIG_EXTENSIONS:
            logger.warning("Configuration file %s does not have a YAML extension", self.config_path)
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                config = yaml.load(f)
        except FileNotFoundError as e:
            logger.error("YAML file not found: %s", self.config_path)
            raise FileNotFoundError(f"YAML file not found: {self.config_path}") from e
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise MaterialConfigurationError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except error.MarkedYAMLError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise MaterialConfigurationError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        if not isinstance(config, dict):
            raise MaterialConfigurationError(f"The configuration file {self.config_path} must hold a mapping of "
                                             f"key-value pairs, not {type(config).__name__}")
        logger.debug("YAML file loaded successfully, found %d top-level keys", len(config))
        return config


class MaterialConfigParser(YAMLFileParser):
    """Parser for material configuration files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        super().__init__(config_path)
        missing = [key for key in REQUIRED_MATERIAL_KEYS if key not in self.config]
        if missing:
            raise MaterialConfigurationError(f"Missing required keys in {self.config_path}: {', '.join(missing)}")

    def create_material(self, function_loader: Optional[FunctionFileLoader] = None,
                        resource_dir: Optional[Union[str, Path]] = None) -> Material:
        """
        Create a Material from the parsed configuration.
        Args:
            function_loader: Loader for file-backed time functions
            resource_dir: Directory holding the time function files,
                defaults to the resource directory next to the configuration file
        """
        if resource_dir is None:
            resource_dir = self.base_dir / FileConstants.DEFAULT_RESOURCE_DIRECTORY
        logger.info("Creating material from configuration: %s", self.config_path)
        return material_from_config(self.config, function_loader, resource_dir)


class MetamaterialConfigParser(YAMLFileParser):
    """Parser for metamaterial configuration files."""

    def create_metamaterial(self, materials: Mapping[str, Material]) -> Metamaterial:
        logger.info("Creating metamaterial from configuration: %s", self.config_path)
        return metamaterial_from_config(self.config, materials)


def material_from_config(config: Mapping[str, Any], function_loader: Optional[FunctionFileLoader] = None,
                         resource_dir: Union[str, Path] = FileConstants.DEFAULT_RESOURCE_DIRECTORY) -> Material:
    """
    Build a Material from a flat configuration mapping.

    The bandgap is read in eV and the effective masses in electron masses. Time functions are
    read from keys of the form:
    - capturetimes: constant zero
    - capturetimes_ns: 3.2 -> constant 3.2 ns
    - capturetimes_file_nm_ps: capture.txt -> file <resource_dir>/capturetimes/capture.txt,
      abscissa in nm and values in ps, loaded through the function loader
    Args:
        config: Material configuration
        function_loader: Loader for file-backed time functions. When given, the three time
            functions are required.
        resource_dir: Directory holding one subdirectory of files per time function type
    Returns:
        The configured material
    Raises:
        MaterialConfigurationError: If a key is missing or malformed, a number does not parse,
            or a time function file cannot be loaded
    """
    missing = [key for key in REQUIRED_MATERIAL_KEYS if key not in config]
    time_keys = {kind: _find_time_key(config, kind) for kind in TIME_KEYS}
    if function_loader is not None:
        missing.extend(kind for kind, key in time_keys.items() if key is None)
    if missing:
        raise MaterialConfigurationError(f"Missing keys in the definition of material "
                                         f"{config.get(NAME_KEY, '<unnamed>')}: {', '.join(missing)}")
    name = str(config[NAME_KEY])
    logger.debug("Reading material %s (time keys: %s)", name, time_keys)
    times = {kind: _time_function(key, config[key], name, function_loader, Path(resource_dir))
             if key is not None else None
             for kind, key in time_keys.items()}
    return Material(
        name=name,
        bandgap=DECIMAL_CONTEXT.multiply(_config_decimal(config, BANDGAP_KEY, name), PhysicalConstants.EV),
        electron_effective_mass=DECIMAL_CONTEXT.multiply(_config_decimal(config, ELECTRON_EFFECTIVE_MASS_KEY, name),
                                                         PhysicalConstants.ME),
        hole_effective_mass=DECIMAL_CONTEXT.multiply(_config_decimal(config, HOLE_EFFECTIVE_MASS_KEY, name),
                                                     PhysicalConstants.ME),
        capture_times=times[CAPTURE_TIMES_KEY],
        escape_times=times[ESCAPE_TIMES_KEY],
        recombination_times=times[RECOMBINATION_TIMES_KEY],
    )


def metamaterial_from_config(config: Mapping[str, Any], materials: Mapping[str, Material]) -> Metamaterial:
    """
    Build a Metamaterial from a flat configuration mapping.

    Keys containing 'material' read 'material_<ID>: <material name>', keys containing 'offset'
    read 'offset_<name1><name2>: <offset in eV>'.
    Args:
        config: Metamaterial configuration
        materials: Available materials, by name
    Raises:
        MaterialConfigurationError: If a material is unknown, an offset names an undeclared
            pair, or there are not enough materials or offsets
    """
    material_pattern = re.compile(f".*{MATERIAL_KEY}.*")
    offset_pattern = re.compile(f".*{OFFSET_KEY}.*")
    members: Dict[str, Material] = {}
    member_names: List[str] = []
    offset_keys: List[str] = []
    for key, value in config.items():
        key = str(key)
        if material_pattern.fullmatch(key):
            material_id = _key_suffix(key)
            material_name = str(value)
            if material_name not in materials:
                raise MaterialConfigurationError(f"Unknown material '{material_name}' for {key}. "
                                                 f"Available: {', '.join(sorted(materials))}")
            members[material_id] = materials[material_name]
            member_names.append(material_name)
        elif offset_pattern.fullmatch(key):
            offset_keys.append(key)
    if not members:
        raise MaterialConfigurationError("No material in the metamaterial configuration")
    if len(offset_keys) < len(member_names) - 1:
        raise MaterialConfigurationError(f"Not enough offsets defined: {len(offset_keys)} for "
                                         f"{len(member_names)} materials")
    combinations = {first + second for first in member_names for second in member_names}
    offsets: Dict[str, Decimal] = {}
    for key in offset_keys:
        pair = _key_suffix(key)
        if pair not in combinations:
            raise MaterialConfigurationError(f"The offset key {key} should name the two materials it separates")
        offsets[pair] = DECIMAL_CONTEXT.multiply(_config_decimal(config, key, pair), PhysicalConstants.EV)
    logger.info("Configured metamaterial with materials %s", ", ".join(member_names))
    return Metamaterial(materials=members, offsets=offsets)


def _find_time_key(config: Mapping[str, Any], kind: str) -> Optional[str]:
    pattern = re.compile(f"{kind}{TIME_KEY_SEPARATOR}?.*")
    matches = [str(key) for key in config if pattern.fullmatch(str(key))]
    if len(matches) > 1:
        raise MaterialConfigurationError(f"Several definitions of {kind}: {', '.join(matches)}")
    return matches[0] if matches else None


def _key_suffix(key: str) -> str:
    parts = key.split(TIME_KEY_SEPARATOR)
    if len(parts) < 2:
        raise MaterialConfigurationError(f"Key {key} should be of the form <type>{TIME_KEY_SEPARATOR}<name>")
    return parts[1]


def _config_decimal(config: Mapping[str, Any], key: str, owner: str) -> Decimal:
    try:
        return to_decimal(config[key])
    except FunctionArgumentError as e:
        raise MaterialConfigurationError(f"Invalid number for {key} in {owner}: {config[key]!r}") from e


def _constant_function(value: Decimal) -> PiecewiseFunction:
    first, second = ProcessingConstants.CONSTANT_FUNCTION_ABSCISSA
    return PiecewiseFunction({first: value, second: value})


def _time_function(key: str, value: Any, material: str, function_loader: Optional[FunctionFileLoader],
                   resource_dir: Path) -> PiecewiseFunction:
    parts = key.split(TIME_KEY_SEPARATOR)
    function_type = parts[0]
    if len(parts) == 4 and parts[1] == FILE_KEY:
        if function_loader is None:
            raise MaterialConfigurationError(f"{key} of {material} is file-backed but no function loader was given")
        file_path = resource_dir / function_type / str(value)
        try:
            return function_loader.load_function(file_path, UnitsPrefix.select_prefix(parts[2]),
                                                 UnitsPrefix.select_prefix(parts[3]))
        except (ValueError, OSError, IndexError) as e:
            raise MaterialConfigurationError(f"Could not load {key} of {material} from {file_path}: {e}") from e
    if len(parts) == 1 or (len(parts) == 2 and (value is None or str(value).strip() == "")):
        return _constant_function(Decimal(0))
    if len(parts) == 2:
        constant = DECIMAL_CONTEXT.multiply(_config_decimal({key: value}, key, material),
                                            UnitsPrefix.select_prefix(parts[1]).multiplier)
        return _constant_function(constant)
    raise MaterialConfigurationError(f"Problem in the definition of {function_type} in {material}: {key}")
