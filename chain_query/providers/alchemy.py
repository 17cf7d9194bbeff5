"""
Alchemy 资产转账查询模块
通过 JSON-RPC 调用 alchemy_getAssetTransfers
"""
import sys
import requests
from typing import Optional, Dict, Any, List, Union

from web3 import Web3

from ..config import (
    get_alchemy_rpc_url,
    get_request_timeout,
    DEFAULT_TRANSFER_TO_ADDRESS,
    DEFAULT_FROM_BLOCK,
    DEFAULT_TO_BLOCK,
    DEFAULT_MAX_COUNT,
    DEFAULT_CATEGORIES,
)
from ..utils import format_json


def to_quantity(value: Union[int, str]) -> str:
    """区块号/数量转成 RPC 需要的十六进制字符串，"latest" 等字符串原样返回"""
    if isinstance(value, int):
        return Web3.to_hex(value)
    return value


def build_asset_transfers_payload(
    to_address: str = DEFAULT_TRANSFER_TO_ADDRESS,
    from_block: Union[int, str] = DEFAULT_FROM_BLOCK,
    to_block: Union[int, str] = DEFAULT_TO_BLOCK,
    categories: Optional[List[str]] = None,
    max_count: Union[int, str] = DEFAULT_MAX_COUNT,
    with_metadata: bool = False,
    exclude_zero_value: bool = True,
) -> Dict[str, Any]:
    """构造 alchemy_getAssetTransfers 的 JSON-RPC 请求体"""
    return {
        "id": 1,
        "jsonrpc": "2.0",
        "method": "alchemy_getAssetTransfers",
        "params": [
            {
                "fromBlock": to_quantity(from_block),
                "toBlock": to_quantity(to_block),
                "toAddress": to_address,
                "withMetadata": with_metadata,
                "excludeZeroValue": exclude_zero_value,
                "maxCount": to_quantity(max_count),
                "category": list(categories or DEFAULT_CATEGORIES),
            }
        ],
    }


def get_asset_transfers(
    to_address: str = DEFAULT_TRANSFER_TO_ADDRESS,
    from_block: Union[int, str] = DEFAULT_FROM_BLOCK,
    to_block: Union[int, str] = DEFAULT_TO_BLOCK,
    categories: Optional[List[str]] = None,
    max_count: Union[int, str] = DEFAULT_MAX_COUNT,
    url: Optional[str] = None,
) -> Optional[Dict[str, Any]]:
    """
    查询资产转账信息
    成功时打印完整返回结果并返回；请求或解析失败时打印错误并返回 None
    """
    url = url or get_alchemy_rpc_url()
    payload = build_asset_transfers_payload(
        to_address=to_address,
        from_block=from_block,
        to_block=to_block,
        categories=categories,
        max_count=max_count,
    )
    headers = {
        "accept": "application/json",
        "content-type": "application/json",
    }

    try:
        response = requests.post(url, json=payload, headers=headers, timeout=get_request_timeout())
        result = response.json()
    except (requests.RequestException, ValueError) as e:
        print(f"请求出错: {e}", file=sys.stderr)
        return None

    print("返回结果:", format_json(result))
    return result
