"""
Parsing and configuration modules for pyphystools.

This package handles function data files, YAML material configurations,
and material creation from them.
"""

from .api import create_material, create_metamaterial, load_config, load_function
from .config.material_config_parser import MaterialConfigParser, MetamaterialConfigParser
from .io.data_handler import DelimitedFileLoader, FunctionFileLoader

__all__ = [
    'create_material',
    'create_metamaterial',
    'load_config',
    'load_function',
    'MaterialConfigParser',
    'MetamaterialConfigParser',
    'DelimitedFileLoader',
    'FunctionFileLoader'
]
