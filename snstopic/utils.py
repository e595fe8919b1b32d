# -*- coding: utf-8 -*-
import os


def get_env():
    """
    Read environment from ENV and mangle it to a (lower case) representation

    :return: Environment as lower case string (or None if not matched)
    """
    env = os.getenv('ENV', None)
    if env:
        env = env.lower()
    return env


def dict_merge(dct, merge_dct):
    """Recursive dict merge. Inspired by :meth:``dict.update()``, instead of
    updating only top-level keys, dict_merge recurses down into dicts nested
    to an arbitrary depth, updating keys. The ``merge_dct`` is merged into
    ``dct``.

    :param dct: dict onto which the merge is executed
    :param merge_dct: dct merged into dct
    :return: None
    """
    for k, v in merge_dct.items():
        if (k in dct and isinstance(dct[k], dict)
                and isinstance(merge_dct[k], dict)):
            dict_merge(dct[k], merge_dct[k])
        else:
            dct[k] = merge_dct[k]


def iter_pages(fetch_page):
    """Lazily iterate the items of all pages of a paginated listing.

    `fetch_page` is called with the continuation token of the previous page
    (None for the first page) and returns a tuple (items, next_token).
    Iteration ends after the first page that comes without a token.

    :param fetch_page: function to retrieve one page
    :return: generator of items in the order they are returned
    """
    next_token = None
    while True:
        items, next_token = fetch_page(next_token)
        for item in items:
            yield item
        if not next_token:
            return

