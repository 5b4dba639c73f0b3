"""Constants used for material and metamaterial configuration records."""

# Material keys
NAME_KEY = "name"
BANDGAP_KEY = "bandgap"
ELECTRON_EFFECTIVE_MASS_KEY = "effectiveMass_electron"
HOLE_EFFECTIVE_MASS_KEY = "effectiveMass_hole"

# Time function key prefixes, optionally followed by '_<unit>' or '_file_<abscissa unit>_<value unit>'
CAPTURE_TIMES_KEY = "capturetimes"
ESCAPE_TIMES_KEY = "escapetimes"
RECOMBINATION_TIMES_KEY = "recombinationtimes"
TIME_KEY_SEPARATOR = "_"
FILE_KEY = "file"

# Metamaterial keys
MATERIAL_KEY = "material"
OFFSET_KEY = "offset"

# Automatically export all constants (those that don't start with underscore)
__all__ = [name for name in globals() if not name.startswith('_') and name.isupper()]
