# -*- coding: utf-8 -*-
"""pytest fixtures and test doubles for snstopic.

Requires the `test` extra: pip install snstopic[test]
"""
