"""
Package configuration.

Defaults ship with the package in `config.yaml`. Users may override any of the
values by placing a file with the same name in their platform config folder:
>>> from stringent import config
>>> config.user_file()
PosixPath('/home/user/.config/stringent/config.yaml')
"""

# std
from pathlib import Path

# third-party
from loguru import logger
from platformdirs import user_config_path


# ---------------------------------------------------------------------------- #
PACKAGE = 'stringent'
FILENAME = 'config.yaml'
CACHE = {}


# Load
# ---------------------------------------------------------------------------- #

def load_yaml(filename):
    import yaml

    with Path(filename).open('r') as file:
        return yaml.safe_load(file) or {}


def load_ini(filename):
    from configparser import ConfigParser

    config = ConfigParser()
    config.read(filename)
    return {name: dict(section) for name, section in config.items()
            if name != config.default_section}


CONFIG_PARSERS = {
    'yaml': load_yaml,
    'yml': load_yaml,
    'ini': load_ini,
}


def load(filename):
    filename = str(filename)
    if filename not in CACHE:
        CACHE[filename] = _load(filename)

    return CACHE[filename]


def _load(filename):
    if (path := Path(filename)).exists():
        logger.debug("Loading config file: '{}'.", path)
        return CONFIG_PARSERS[path.suffix.lstrip('.')](path)

    raise FileNotFoundError(f"Non-existent file: '{filename!s}'")


def source_file():
    return Path(__file__).parent / FILENAME


def user_file():
    return user_config_path(PACKAGE) / FILENAME


def merge(defaults, overrides):
    """Recursively update nested mapping `defaults` with `overrides`."""
    merged = dict(defaults)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            value = merge(merged[key], value)
        merged[key] = value
    return merged


# Node
# ---------------------------------------------------------------------------- #

class ConfigNode(dict):
    """
    Nested configuration dictionary with item read access through attribute
    lookup.

    >>> node = ConfigNode({'regex': {'engine': 're'}})
    >>> node.regex.engine
    're'
    """

    @classmethod
    def load(cls, filename=None, defaults=None):
        assert filename or defaults
        config = load(defaults) if defaults else {}
        if filename and Path(filename).exists():
            logger.info("Found user config for {!r} at '{}'.", PACKAGE, filename)
            config = merge(config, load(filename))
        return cls(config)

    def __init__(self, *args, **kws):
        super().__init__(*args, **kws)
        for key, value in self.items():
            if isinstance(value, dict) and not isinstance(value, ConfigNode):
                super().__setitem__(key, type(self)(value))

    def __getattr__(self, key):
        """
        Try to get the value in the dict associated with key `key`. If `key`
        is not a key in the dict, try get the attribute from the parent class.
        """
        return self[key] if key in self else super().__getattribute__(key)


# ---------------------------------------------------------------------------- #
CONFIG = ConfigNode.load(user_file(), source_file())
