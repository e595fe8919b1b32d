# -*- coding: utf-8 -*-
import abc
from collections import namedtuple

import botocore.session
from botocore.config import Config as BotocoreConfig
from botocore.exceptions import BotoCoreError, ClientError

from .topic_awsclient import AWSClient
from .topic_config import get_topic_name
from .topic_exceptions import TransportError
from .topic_logging import getLogger

log = getLogger(__name__)

PROTOCOL_SQS = 'sqs'

Subscription = namedtuple('Subscription', ['subscription_arn', 'topic_arn',
                                           'endpoint', 'protocol', 'owner'])
Subscription.__new__.__defaults__ = ('', '', '', '', '')


class NotificationClient(abc.ABC):
    """Capabilities of the notification service a topic needs.

    Implementations raise TransportError if a call fails.
    """

    @abc.abstractmethod
    def create_topic(self, name):
        """Create the topic (or look it up if it exists) and return its arn."""

    @abc.abstractmethod
    def publish(self, topic_arn, message):
        """Publish the message and return the message id."""

    @abc.abstractmethod
    def subscribe(self, topic_arn, endpoint, protocol):
        """Subscribe the endpoint and return the subscription arn."""

    @abc.abstractmethod
    def list_subscriptions_by_topic(self, topic_arn, next_token=None):
        """Return one page of subscriptions as tuple
        (subscriptions, next_token), next_token is None on the last page.
        """


class SNSClient(NotificationClient):
    """NotificationClient backed by a botocore sns client."""

    def __init__(self, client):
        self._client = client

    def _call(self, operation, **kwargs):
        try:
            response = getattr(self._client, operation)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise TransportError(operation=operation, cause=e) from e
        log.debug(response)
        return response

    def create_topic(self, name):
        return self._call('create_topic', Name=name)['TopicArn']

    def publish(self, topic_arn, message):
        response = self._call('publish', TopicArn=topic_arn, Message=message)
        return response['MessageId']

    def subscribe(self, topic_arn, endpoint, protocol):
        response = self._call('subscribe', TopicArn=topic_arn,
                              Endpoint=endpoint, Protocol=protocol,
                              ReturnSubscriptionArn=True)
        return response.get('SubscriptionArn')

    def delete_topic(self, topic_arn):
        self._call('delete_topic', TopicArn=topic_arn)

    def list_subscriptions_by_topic(self, topic_arn, next_token=None):
        request = {'TopicArn': topic_arn}
        if next_token:
            request['NextToken'] = next_token
        response = self._call('list_subscriptions_by_topic', **request)
        subscriptions = [
            Subscription(
                subscription_arn=s.get('SubscriptionArn', ''),
                topic_arn=s.get('TopicArn', ''),
                endpoint=s.get('Endpoint', ''),
                protocol=s.get('Protocol', ''),
                owner=s.get('Owner', ''),
            ) for s in response.get('Subscriptions', [])
        ]
        return subscriptions, response.get('NextToken')


def get_client(config, awsclient=None):
    """Create the sns NotificationClient from the config.

    :param config: Config
    :param awsclient: AWSClient, a new one on the default botocore session
        is used if omitted
    :return: SNSClient
    """
    if awsclient is None:
        awsclient = AWSClient(botocore.session.get_session())
    timeout = config.get('aws.timeout')
    client = awsclient.get_client(
        'sns',
        region_name=config.get('aws.region'),
        endpoint_url=config.get('aws.sns_endpoint'),
        config=BotocoreConfig(connect_timeout=timeout, read_timeout=timeout)
    )
    return SNSClient(client)


### topic
def create_topic(client, settings):
    """Create the topic of the settings (returns the arn of an existing one).

    :param client: NotificationClient
    :param settings: Settings
    :return: topic arn
    """
    name = get_topic_name(settings)
    arn = client.create_topic(name)
    log.info('created sns topic \'%s\' with arn \'%s\'', name, arn,
             extra={'topicName': name, 'arn': arn})
    return arn


def delete_topic(client, topic_arn):
    """Remove the topic (test artifacts).

    :param client: SNSClient
    :param topic_arn: arn of the topic
    """
    client.delete_topic(topic_arn)
    log.info('deleted sns topic \'%s\'', topic_arn, extra={'arn': topic_arn})
