from typing import *

import os
import yaml

from yamlinclude import YamlIncludeConstructor


class OptionsLoader(yaml.SafeLoader):
    """Safe loader for option files, the include tag is registered on this class only."""
    pass


class dotdict(dict):
    """
    dot.notation access to dictionary attributes
    """
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

    def __getattr__(self, item):
        try:
            return self[item]
        except KeyError:
            return self.__getattribute__(item)

    @classmethod
    def create(cls, cfg: Mapping):
        """
        Instance of `cls` from `cfg`, nested dicts become dotdicts.
        """
        return cls((k, dotdict._nested(v)) for k, v in cfg.items())

    @staticmethod
    def _nested(value):
        if isinstance(value, dict):
            return dotdict.create(value)
        if isinstance(value, (list, tuple)):
            return type(value)(dotdict._nested(i) for i in value)
        return value

    @staticmethod
    def serialize(cfg):
        """
        Plain dicts and lists, as accepted by yaml.safe_dump.
        """
        if isinstance(cfg, dict):
            return {k: dotdict.serialize(v) for k, v in cfg.items()}
        if isinstance(cfg, (list, tuple)):
            return [dotdict.serialize(i) for i in cfg]
        return cfg


class PipeOptions(dotdict):
    """
    Pipeline options, unspecified keys take the defaults:
    strict_arity: raise ArityError for calls with more arguments than the initial arity
    report: log timing of every pipeline stage
    """
    _defaults = dict(strict_arity=False, report=False)

    def __init__(self, *args, **kwargs):
        super().__init__(PipeOptions._defaults)
        given = dict(*args, **kwargs)
        unknown = set(given) - set(PipeOptions._defaults)
        if unknown:
            raise KeyError(f"Unknown pipeline options: {sorted(unknown)}")
        self.update(given)


def load_options(path) -> PipeOptions:
    """
    Load pipeline options from a YAML file.
    The options are taken from the 'pipep' section if present, otherwise from the top level.
    Supports the include tag, relative to the file directory:
        pipep: !include common_options.yaml
    """
    YamlIncludeConstructor.add_to_loader_class(
        loader_class=OptionsLoader, base_dir=os.path.dirname(path))
    with open(path) as f:
        cfg = yaml.load(f, Loader=OptionsLoader)
    if cfg is None:
        cfg = {}
    cfg = cfg.get('pipep', cfg) or {}
    return PipeOptions.create(cfg)


def dump_options(options, path):
    with open(path, "w") as f:
        yaml.safe_dump(dotdict.serialize(options), f)
