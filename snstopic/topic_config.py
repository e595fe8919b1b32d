# -*- coding: utf-8 -*-
"""configuration provider and topic settings.
"""
from collections import namedtuple
from copy import deepcopy

from ruamel.yaml import YAML

from .topic_exceptions import ConfigError
from .topic_logging import getLogger
from .topic_openapi import read_openapi, get_openapi_defaults, \
    validate_config
from .utils import dict_merge, get_env

log = getLogger(__name__)


AppId = namedtuple('AppId', ['project', 'environment', 'family', 'application'])
AppId.__new__.__defaults__ = ('', '', '', '')

Settings = namedtuple('Settings', ['app_id', 'topic_id', 'arn'])
Settings.__new__.__defaults__ = (AppId(), '', '')


class Config(object):
    """Configuration provider, user config merged over the openapi defaults."""

    def __init__(self, data=None, openapi=None):
        self._openapi = openapi or read_openapi()
        self._data = get_openapi_defaults(self._openapi, 'top') or {}
        if data:
            dict_merge(self._data, deepcopy(data))

    def validate(self):
        error = validate_config(self._openapi, self._data)
        if error:
            raise ConfigError(msg=error)
        return self

    def get(self, key, default=None):
        """Lookup a value by a dotted key like 'aws.region'."""
        value = self._data
        for part in key.split('.'):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value

    def get_string(self, key, default=''):
        value = self.get(key)
        if value is None:
            return default
        return str(value)


def read_config(filename):
    """Read the yaml config file and validate it.

    :param filename: path to the config file
    :return: Config
    """
    log.debug('reading config from \'%s\'', filename)
    with open(filename, 'r') as cfile:
        data = YAML(typ='safe', pure=True).load(cfile)
    if data is not None and not isinstance(data, dict):
        raise ConfigError(msg='\'%s\' does not contain a mapping' % filename)
    return Config(data).validate()


def pad_from_config(settings, config):
    """Fill the empty application identity fields of the settings.

    :param settings: Settings
    :param config: Config
    :return: padded Settings
    """
    app_id = settings.app_id
    app_id = app_id._replace(
        project=app_id.project or config.get_string('app_project'),
        environment=app_id.environment or config.get_string('env') or
        get_env() or '',
        family=app_id.family or config.get_string('app_family'),
        application=app_id.application or config.get_string('app_name'),
    )
    return settings._replace(app_id=app_id)


def get_topic_name(settings):
    """Physical topic name of the settings:
    {project}-{environment}-{family}-{application}-{topic_id}
    """
    app_id = settings.app_id
    return '%s-%s-%s-%s-%s' % (app_id.project, app_id.environment,
                               app_id.family, app_id.application,
                               settings.topic_id)
