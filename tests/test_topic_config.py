# -*- coding: utf-8 -*-
import os

import pytest

from snstopic.topic_config import AppId, Config, Settings, get_topic_name, \
    pad_from_config, read_config
from snstopic.topic_exceptions import ConfigError
from snstopic_testtools.helpers import create_tempfile, cleanup_tempfiles, \
    preserve_env  # fixtures!


def test_config_defaults():
    config = Config()
    assert config.get('aws.region') == 'eu-central-1'
    assert config.get('aws.timeout') == 10
    assert config.get('aws.sns_endpoint') is None
    assert config.get('app_project', 'none') == 'none'


def test_config_merges_over_defaults():
    config = Config({'app_project': 'shop', 'aws': {'region': 'eu-west-1'}})
    assert config.get('aws.region') == 'eu-west-1'
    assert config.get('aws.timeout') == 10
    assert config.get_string('app_project') == 'shop'
    assert config.get_string('app_name') == ''
    assert config.get('app_project.nested') is None


def test_config_validate_raises():
    with pytest.raises(ConfigError):
        Config({'aws': {'timeout': 0}}).validate()


def test_read_config(cleanup_tempfiles):
    tf = create_tempfile('\n'.join([
        'app_project: shop',
        'app_family: sales',
        'app_name: api',
        'env: dev',
        'aws:',
        '  sns_endpoint: http://localhost:4575',
    ]), suffix='.yaml')
    cleanup_tempfiles.append(tf)

    config = read_config(tf)
    assert config.get('env') == 'dev'
    assert config.get('aws.sns_endpoint') == 'http://localhost:4575'
    assert config.get('aws.timeout') == 10


def test_read_config_no_mapping(cleanup_tempfiles):
    tf = create_tempfile('- just\n- a list\n', suffix='.yaml')
    cleanup_tempfiles.append(tf)
    with pytest.raises(ConfigError):
        read_config(tf)


def test_pad_from_config(preserve_env):
    os.environ.pop('ENV', None)
    config = Config({'app_project': 'shop', 'env': 'dev',
                     'app_family': 'sales', 'app_name': 'api'})
    settings = Settings(AppId(project='other'), 'orders')

    padded = pad_from_config(settings, config)

    assert padded.app_id == AppId('other', 'dev', 'sales', 'api')
    assert padded.topic_id == 'orders'
    assert padded.arn == ''
    # settings are immutable
    assert settings.app_id == AppId(project='other')


def test_pad_from_config_env_variable(preserve_env):
    os.environ['ENV'] = 'PROD'
    padded = pad_from_config(Settings(topic_id='orders'), Config())
    assert padded.app_id.environment == 'prod'


def test_get_topic_name():
    settings = Settings(AppId('shop', 'test', 'sales', 'api'), 'orders')
    assert get_topic_name(settings) == 'shop-test-sales-api-orders'
