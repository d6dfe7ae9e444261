# -*- coding: utf-8 -*-

"""
HTML生成モジュール
"""

from .html_generator import HTMLGenerator
from .template_engine import HTMLTemplateEngine, TemplateData

__all__ = ["HTMLGenerator", "HTMLTemplateEngine", "TemplateData"]
