# -*- coding: utf-8 -*-
"""
edubase: сервисный слой каталога вопросов и дисциплин.
"""

__version__ = "0.1.0"
