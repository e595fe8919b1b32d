# -*- coding: utf-8 -*-
"""tools to use the openapi spec of the snstopic config (validation, defaults)
"""
import os
import pprint

from bravado_core.spec import Spec
from bravado_core.validate import validate_object
from jsonschema.exceptions import ValidationError
from ruamel.yaml import YAML

from .topic_logging import getLogger

log = getLogger(__name__)

OPENAPI_SNSTOPIC = os.path.join(os.path.dirname(__file__),
                                'openapi_snstopic.yaml')


def read_openapi(openapi=OPENAPI_SNSTOPIC):
    """Load spec from yaml file.

    :return: dict containing spec
    """
    with open(openapi, 'r') as ofile:
        return YAML(typ='safe', pure=True).load(ofile)


def validate_config(raw_spec, config):
    """Validate the config against the 'top' definition of the spec.

    :param raw_spec: openapi spec in dict form
    :param config: config dict
    :return: error message or None if config is valid
    """
    spec = Spec.from_dict(raw_spec, config={'use_models': True})

    top = raw_spec['definitions']['top']

    try:
        validate_object(spec, top, config)
    except ValidationError as e:
        # details
        # http://python-jsonschema.readthedocs.io/en/latest/errors/
        pinstance = pprint.pformat(e.instance, width=72)
        log.error('Config validation failed for \'%s\': %s',
                  '.'.join(str(p) for p in e.path), e.message)
        log.debug('affected config section:\n%s', pinstance)
        return e.message


def get_openapi_defaults(specification, def_name):
    """Get default configuration for the given definition.

    :param def_name: Name of the definition.
    :return: default config or None if the definition does not exist
    """
    if def_name not in specification['definitions']:
        return None
    return _get_defaults_from_prop_spec(
        specification['definitions'][def_name]) or {}


def _get_defaults_from_prop_spec(prop_spec):
    # there is no 'default' -> no value!
    if 'default' in prop_spec:
        return prop_spec['default']
    if prop_spec.get('type') != 'object':
        return None
    defaults = {}
    for prop_name, inner_spec in prop_spec.get('properties', {}).items():
        value = _get_defaults_from_prop_spec(inner_spec)
        if value is not None:
            defaults[prop_name] = value
    return defaults or None
