"""
代币价格查询模块
调用 Alchemy Prices API 按 (network, address) 批量查询价格
"""
import sys
import requests
from typing import Optional, Dict, Any, List, Sequence, Tuple

from ..config import get_alchemy_prices_url, get_request_timeout, DEFAULT_PRICE_TOKENS
from ..utils import format_json, format_price_entry


def build_price_payload(tokens: Optional[Sequence[Tuple[str, str]]] = None) -> Dict[str, Any]:
    """构造价格查询请求体"""
    if tokens is None:
        tokens = DEFAULT_PRICE_TOKENS
    return {
        "addresses": [
            {"network": network, "address": address}
            for network, address in tokens
        ]
    }


def print_token_prices(result: Any) -> List[str]:
    """
    输出所有地址的价格
    返回打印出的行（每个条目一行）；data 不是列表时打印原始结果
    """
    data = result.get("data") if isinstance(result, dict) else None
    if not isinstance(data, list):
        print("返回数据格式异常:", format_json(result))
        return []

    lines = []
    for item in data:
        line = format_price_entry(item)
        print(line)
        lines.append(line)
    return lines


def get_token_price(
    tokens: Optional[Sequence[Tuple[str, str]]] = None,
    url: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    查询指定 token 的价格信息
    tokens: [(network, address), ...]，默认使用配置里的 8 个代币
    """
    url = url or get_alchemy_prices_url()
    headers = {"Content-Type": "application/json"}

    try:
        response = requests.post(
            url,
            json=build_price_payload(tokens),
            headers=headers,
            timeout=get_request_timeout(),
        )
        result = response.json()
        print_token_prices(result)
    except (requests.RequestException, ValueError) as e:
        print(f"价格查询出错: {e}", file=sys.stderr)
        return None

    return result
