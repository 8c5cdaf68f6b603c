"""
Utility modules for text processing, configuration and logging.
"""
from .config import *
from .text_utils import *
from .logger import setup_logger

__all__ = ['config', 'text_utils', 'setup_logger']
