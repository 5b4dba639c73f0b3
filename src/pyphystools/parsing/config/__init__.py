"""Configuration parsing and configuration key definitions."""

from .material_config_parser import (BaseFileParser, YAMLFileParser, MaterialConfigParser, MetamaterialConfigParser,
                                     material_from_config, metamaterial_from_config)
from . import config_keys as _ck

# Re-export everything defined in config_keys.__all__
globals().update({k: getattr(_ck, k) for k in _ck.__all__})

__all__ = [
    "BaseFileParser",
    "YAMLFileParser",
    "MaterialConfigParser",
    "MetamaterialConfigParser",
    "material_from_config",
    "metamaterial_from_config",
    *_ck.__all__,
]
