"""
I/O module for figcomposer
"""

from .data_loader import DataLoader, export_data_set, load_image

__all__ = ['DataLoader', 'export_data_set', 'load_image']
