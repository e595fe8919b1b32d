# -*- coding: utf-8 -*-
import pytest

from snstopic.topic_config import AppId, Settings
from snstopic_testtools.helpers_aws import StubNotificationClient


@pytest.fixture
def stub_client():
    return StubNotificationClient()


@pytest.fixture
def settings():
    return Settings(app_id=AppId('shop', 'test', 'sales', 'api'),
                    topic_id='orders')
