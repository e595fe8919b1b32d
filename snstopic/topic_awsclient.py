# -*- coding: utf-8 -*-
from .topic_logging import getLogger

log = getLogger(__name__)


class AWSClient(object):
    """Wrapper around a botocore session which hands out service clients.

    Clients are cached per service, region, endpoint and timeouts. botocore
    clients are safe to be shared between threads.
    """

    def __init__(self, session):
        self._session = session
        self._clients = {}

    def get_client(self, service, region_name=None, endpoint_url=None,
                   config=None):
        """Get a botocore client for the service.

        :param service: service name like 'sns'
        :param region_name: region, the session default if omitted
        :param endpoint_url: custom endpoint url
        :param config: botocore.config.Config (timeouts)
        :return: botocore client
        """
        key = (service, region_name, endpoint_url,
               getattr(config, 'connect_timeout', None),
               getattr(config, 'read_timeout', None))
        if key not in self._clients:
            log.debug('creating botocore client for \'%s\'', service)
            self._clients[key] = self._session.create_client(
                service, region_name=region_name, endpoint_url=endpoint_url,
                config=config)
        return self._clients[key]
