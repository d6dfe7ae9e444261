# -*- coding: utf-8 -*-

from .tag_cloud_processor import TagCloudProcessor

__all__ = ["TagCloudProcessor"]
