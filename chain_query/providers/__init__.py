"""
数据源查询模块
"""
from .alchemy import get_asset_transfers, build_asset_transfers_payload
from .prices import get_token_price, build_price_payload, print_token_prices
from .etherscan import get_funded_by, build_funded_by_url

__all__ = [
    'get_asset_transfers',
    'build_asset_transfers_payload',
    'get_token_price',
    'build_price_payload',
    'print_token_prices',
    'get_funded_by',
    'build_funded_by_url',
]
