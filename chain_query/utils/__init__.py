"""
工具函数模块
"""
from .formatters import format_json, format_price_entry, print_separator

__all__ = ['format_json', 'format_price_entry', 'print_separator']
