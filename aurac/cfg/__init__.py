"""Readers for project configuration in ``configs/`` and ``meta/``."""