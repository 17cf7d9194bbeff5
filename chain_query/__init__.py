"""
Chain Query - 链上数据查询工具
"""
__version__ = "1.0.0"

from .providers import get_asset_transfers, get_token_price, get_funded_by
from .cli import main

__all__ = ['get_asset_transfers', 'get_token_price', 'get_funded_by', 'main']
