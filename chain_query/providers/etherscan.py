"""
Etherscan fundedby 查询模块
查询某地址的首笔资金来源（Etherscan v2 多链 API）
"""
import sys
import requests
from typing import Optional, Dict, Any

from ..config import (
    ETHERSCAN_FUNDEDBY_TEMPLATE,
    DEFAULT_CHAIN_ID,
    get_etherscan_api_key,
    get_request_timeout,
)
from ..utils import format_json


def build_funded_by_url(address: str, api_key: str, chain_id: str = DEFAULT_CHAIN_ID) -> str:
    """拼接 fundedby 查询 URL（地址和 key 不做格式校验）"""
    return ETHERSCAN_FUNDEDBY_TEMPLATE.format(chain_id=chain_id, address=address, api_key=api_key)


def get_funded_by(
    address: str,
    api_key: Optional[str] = None,
    chain_id: str = DEFAULT_CHAIN_ID,
) -> Optional[Dict[str, Any]]:
    """
    查询某地址资金来源
    api_key 为空时使用 ETHERSCAN_API_KEY 环境变量
    """
    if api_key is None:
        api_key = get_etherscan_api_key()
    url = build_funded_by_url(address, api_key, chain_id)

    try:
        response = requests.get(url, headers={"accept": "application/json"}, timeout=get_request_timeout())
        result = response.json()
    except (requests.RequestException, ValueError) as e:
        print(f"fundedby 查询出错: {e}", file=sys.stderr)
        return None

    print("fundedby 查询结果:", format_json(result))
    return result
