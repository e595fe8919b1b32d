# -*- coding: utf-8 -*-
import botocore.session
import pytest
from moto import mock_aws

from snstopic.sns import NotificationClient, Subscription
from snstopic.topic_awsclient import AWSClient
from snstopic.topic_exceptions import TransportError

TEST_REGION = 'eu-central-1'
TEST_ACCOUNT = '123456789012'


@pytest.fixture(scope='function')
def awsclient(monkeypatch):
    """AWSClient on a botocore session talking to moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', TEST_REGION)
    with mock_aws():
        yield AWSClient(botocore.session.get_session())


class StubNotificationClient(NotificationClient):
    """In memory NotificationClient.

    Every call is recorded in `calls` as tuple (operation, args). Set
    `failures[operation]` to an exception to make the operation fail with a
    TransportError caused by it. `page_size` limits the number of
    subscriptions per page of list_subscriptions_by_topic.
    """

    def __init__(self, page_size=100):
        self.page_size = page_size
        self.topics = {}
        self.subscriptions = {}
        self.messages = {}
        self.failures = {}
        self.calls = []

    def _record(self, operation, *args):
        self.calls.append((operation, args))
        if operation in self.failures:
            raise TransportError(operation=operation,
                                 cause=self.failures[operation])

    def calls_of(self, operation):
        return [args for op, args in self.calls if op == operation]

    def create_topic(self, name):
        self._record('create_topic', name)
        arn = 'arn:aws:sns:%s:%s:%s' % (TEST_REGION, TEST_ACCOUNT, name)
        self.topics.setdefault(name, arn)
        self.subscriptions.setdefault(arn, [])
        self.messages.setdefault(arn, [])
        return arn

    def publish(self, topic_arn, message):
        self._record('publish', topic_arn, message)
        self.messages.setdefault(topic_arn, []).append(message)
        return 'msg-%d' % len(self.messages[topic_arn])

    def subscribe(self, topic_arn, endpoint, protocol):
        self._record('subscribe', topic_arn, endpoint, protocol)
        subscriptions = self.subscriptions.setdefault(topic_arn, [])
        subscription_arn = '%s:%d' % (topic_arn, len(subscriptions) + 1)
        subscriptions.append(Subscription(
            subscription_arn=subscription_arn, topic_arn=topic_arn,
            endpoint=endpoint, protocol=protocol, owner=TEST_ACCOUNT))
        return subscription_arn

    def list_subscriptions_by_topic(self, topic_arn, next_token=None):
        self._record('list_subscriptions_by_topic', topic_arn, next_token)
        subscriptions = self.subscriptions.get(topic_arn, [])
        start = int(next_token) if next_token else 0
        end = start + self.page_size
        next_token = str(end) if end < len(subscriptions) else None
        return subscriptions[start:end], next_token
