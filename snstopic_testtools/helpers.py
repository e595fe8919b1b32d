# -*- coding: utf-8 -*-
import os
import random
import string
from tempfile import NamedTemporaryFile

import pytest
from testfixtures import LogCapture


def random_string(length=6):
    """Create a random string of lower case letters and digits.

    :param length: length of the string (default 6)
    :return: random string
    """
    return ''.join(random.choice(string.ascii_lowercase + string.digits)
                   for _ in range(length))


def create_tempfile(contents, suffix=''):
    """Create a tempfile with the given contents (delete it after use).

    :param contents: text
    :return: path of the tempfile
    """
    with NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as tfile:
        tfile.write(contents)
    return tfile.name


@pytest.fixture(scope='function')
def cleanup_tempfiles():
    items = []
    yield items
    # cleanup
    for i in items:
        os.unlink(i)


@pytest.fixture(scope='function')
def preserve_env():
    env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(env)


@pytest.fixture(scope='function')
def logcapture():
    with LogCapture() as lc:
        yield lc
