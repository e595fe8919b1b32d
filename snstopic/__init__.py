# -*- coding: utf-8 -*-
from .topic_exceptions import TopicError

__version__ = '0.1.0'
