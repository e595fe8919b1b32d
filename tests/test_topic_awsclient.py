# -*- coding: utf-8 -*-
import botocore.session
from botocore.config import Config as BotocoreConfig

from snstopic.topic_awsclient import AWSClient
from snstopic_testtools.helpers import logcapture  # fixture!


def test_get_client_cached():
    aws = AWSClient(botocore.session.get_session())
    client = aws.get_client('sns', region_name='eu-central-1')
    assert aws.get_client('sns', region_name='eu-central-1') is client


def test_get_client_per_settings():
    aws = AWSClient(botocore.session.get_session())
    default = aws.get_client('sns', region_name='us-east-1')

    other_region = aws.get_client('sns', region_name='eu-west-1')
    assert other_region is not default
    assert other_region.meta.region_name == 'eu-west-1'

    endpoint = aws.get_client('sns', region_name='us-east-1',
                              endpoint_url='http://localhost:4575')
    assert endpoint is not default
    assert endpoint.meta.endpoint_url == 'http://localhost:4575'

    timeout = aws.get_client(
        'sns', region_name='us-east-1',
        config=BotocoreConfig(connect_timeout=3, read_timeout=3))
    assert timeout is not default
    assert timeout.meta.config.read_timeout == 3

    assert aws.get_client('sns', region_name='us-east-1') is default


def test_get_client_logs_creation(logcapture):
    aws = AWSClient(botocore.session.get_session())
    aws.get_client('sns', region_name='eu-central-1')
    aws.get_client('sns', region_name='eu-central-1')

    records = [r for r in logcapture.records
               if r.name == 'snstopic.topic_awsclient']
    assert [r.getMessage() for r in records] == [
        'creating botocore client for \'sns\''
    ]
