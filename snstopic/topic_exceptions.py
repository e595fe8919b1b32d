# -*- coding: utf-8 -*-


class TopicError(Exception):
    """
    The base exception class for snstopic exceptions.

    :ivar msg: The descriptive message associated with the error.
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class ConfigError(TopicError):
    fmt = 'invalid configuration: {msg}'


class ProvisioningError(TopicError):
    """
    The sns topic could not be created. Raised during construction of a
    topic, no usable instance exists afterwards.
    """
    fmt = 'could not provision sns topic \'{name}\': {cause}'

    @property
    def cause(self):
        return self.kwargs.get('cause')


class TransportError(TopicError):
    """
    A call to the notification service failed.

    :ivar cause: the underlying (botocore) exception
    """
    fmt = 'sns {operation} failed: {cause}'

    @property
    def cause(self):
        return self.kwargs.get('cause')


class SubscriptionError(TransportError):
    fmt = 'could not subscribe \'{queue_arn}\' to \'{topic_arn}\': {cause}'
