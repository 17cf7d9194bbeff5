"""
格式化工具函数
"""
import json
from typing import Any


def format_json(data: Any) -> str:
    """把返回结果格式化成缩进 JSON（保留中文）"""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_price_entry(item: Any) -> str:
    """
    格式化单个地址的价格结果
    有 error 显示错误；有价格显示第一条价格；否则提示没有价格信息
    返回结果不做校验，条目或 prices 形状不对时都按没有价格信息处理
    """
    if not isinstance(item, dict):
        item = {}
    address = item.get("address")
    if item.get("error"):
        return f"地址: {address} 查询出错: {item['error']}"

    prices = item.get("prices")
    price_info = prices[0] if isinstance(prices, list) and prices else None
    if isinstance(price_info, dict) and price_info:
        return (
            f"地址: {address} 价格: {price_info.get('value')} {price_info.get('currency')} "
            f"更新时间: {price_info.get('lastUpdatedAt')}"
        )
    return f"地址: {address} 没有价格信息"


def print_separator():
    """打印分隔线"""
    print("=" * 80)
