# -*- coding: utf-8 -*-
"""Managed sns topic: provisioning, publishing and idempotent sqs
subscriptions.
"""
from .sns import PROTOCOL_SQS, create_topic, get_client
from .topic_config import get_topic_name, pad_from_config
from .topic_exceptions import ProvisioningError, SubscriptionError, \
    TransportError
from .topic_logging import getLogger
from .utils import iter_pages

log = getLogger(__name__)


def new_topic(config, settings, awsclient=None):
    """Provision the topic of the settings and return a Topic for it.

    The application identity of the settings is padded from the config.
    Creating a topic that already exists returns the existing one.

    :param config: Config
    :param settings: Settings, the arn is resolved here
    :param awsclient: AWSClient (optional)
    :return: Topic
    :raises ProvisioningError: the topic could not be created
    """
    settings = pad_from_config(settings, config)
    client = get_client(config, awsclient)

    try:
        arn = create_topic(client, settings)
    except TransportError as e:
        raise ProvisioningError(name=get_topic_name(settings), cause=e) from e

    return Topic(client, settings._replace(arn=arn))


class Topic(object):
    """A provisioned sns topic.

    Use `new_topic` to provision one. Instantiate it directly to inject a
    NotificationClient and settings with a resolved arn.
    """

    def __init__(self, client, settings):
        self._client = client
        self._settings = settings

    @property
    def settings(self):
        return self._settings

    @property
    def arn(self):
        return self._settings.arn

    def publish(self, message):
        """Publish the message to the topic.

        :param message: message body
        :return: message id
        :raises TransportError: publishing failed (the error is logged, too)
        """
        try:
            return self._client.publish(self.arn, message)
        except TransportError as e:
            log.error('could not publish message to topic \'%s\': %s',
                      self.arn, e, extra={'arn': self.arn})
            raise

    def subscribe_sqs(self, queue_arn):
        """Subscribe the sqs queue to the topic unless it is subscribed
        already.

        :param queue_arn: arn of the sqs queue
        :raises SubscriptionError: checking or creating the subscription failed
        """
        fields = {'topicArn': self.arn, 'queueArn': queue_arn}

        try:
            exists = self.subscription_exists(queue_arn)
        except TransportError as e:
            log.error('can not check if subscription already exists '
                      'for \'%s\' on \'%s\': %s', queue_arn, self.arn, e,
                      extra=fields)
            raise SubscriptionError(topic_arn=self.arn, queue_arn=queue_arn,
                                    cause=e) from e

        if exists:
            log.info('already subscribed \'%s\' to sns topic \'%s\'',
                     queue_arn, self.arn, extra=fields)
            return

        try:
            self._client.subscribe(self.arn, queue_arn, PROTOCOL_SQS)
        except TransportError as e:
            log.error('could not subscribe for sqs queue \'%s\' on \'%s\': %s',
                      queue_arn, self.arn, e, extra=fields)
            raise SubscriptionError(topic_arn=self.arn, queue_arn=queue_arn,
                                    cause=e) from e

        log.info('successful subscribed \'%s\' to sns topic \'%s\'',
                 queue_arn, self.arn, extra=fields)

    def subscription_exists(self, endpoint):
        for subscription in self.iter_subscriptions():
            if subscription.endpoint == endpoint:
                return True
        return False

    def iter_subscriptions(self):
        """Lazily iterate all subscriptions of the topic page by page."""
        return iter_pages(
            lambda next_token: self._client.list_subscriptions_by_topic(
                self.arn, next_token))

    def list_subscriptions(self):
        """All subscriptions of the topic in the order sns returns them.

        :return: list of Subscription
        :raises TransportError: fetching one of the pages failed
        """
        return list(self.iter_subscriptions())
