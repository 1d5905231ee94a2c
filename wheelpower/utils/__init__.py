"""
Utility modules for the content data-access layer
"""
from .config_loader import ContentServiceConfig, load_content_config

__all__ = [
    'ContentServiceConfig',
    'load_content_config',
]
