# -*- coding: utf-8 -*-
"""
Services
========

- Kernel: service container consumed by agents
- llm: chat completion services and the Assistants provider resolver
"""

from .kernel import Kernel

__all__ = ["Kernel"]
