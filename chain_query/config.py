"""
配置模块
包含 API 端点、默认查询参数、链 ID 等配置信息
API key 从环境变量读取（main.py 启动时会加载 .env）
"""
import os

# Alchemy RPC 端点模板（network 例如 eth-mainnet, arb-sepolia）
ALCHEMY_RPC_TEMPLATE = "https://{network}.g.alchemy.com/v2/{api_key}"
DEFAULT_ALCHEMY_NETWORK = "arb-sepolia"

# Alchemy Prices API
ALCHEMY_PRICES_TEMPLATE = "https://api.g.alchemy.com/prices/v1/{api_key}/tokens/by-address"

# Etherscan v2 多链 API
ETHERSCAN_FUNDEDBY_TEMPLATE = (
    "https://api.etherscan.io/v2/api?chainid={chain_id}"
    "&module=account&action=fundedby&address={address}&apikey={api_key}"
)

# 链 ID 映射（Etherscan v2 通过 chainid 区分链）
CHAIN_ID_MAP = {
    "ethereum": "1",
    "bsc": "56",
    "polygon": "137",
    "arbitrum": "42161",
    "optimism": "10",
    "avalanche": "43114",
    "base": "8453",
}
DEFAULT_CHAIN_ID = "1"

DEFAULT_TIMEOUT = 10

# alchemy_getAssetTransfers 默认参数
DEFAULT_TRANSFER_TO_ADDRESS = "0x6Df01209c6bFb652B8a1F00fAae229a317Dd5dE3"
DEFAULT_FROM_BLOCK = "0x0"
DEFAULT_TO_BLOCK = "latest"
DEFAULT_MAX_COUNT = "0x3e8"
DEFAULT_CATEGORIES = ["internal"]

# 价格查询默认代币列表 (network, address)
DEFAULT_PRICE_TOKENS = [
    ("eth-mainnet", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"),  # WETH
    ("eth-mainnet", "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599"),  # WBTC
    ("eth-mainnet", "0xae7ab96520de3a18e5e111b5eaab095312d7fe84"),  # stETH
    ("eth-mainnet", "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48"),  # USDC
    ("eth-mainnet", "0xdac17f958d2ee523a2206206994597c13d831ec7"),  # USDT
    ("polygon-mainnet", "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6"),  # WBTC (Polygon)
    ("polygon-mainnet", "0x2791bca1f2de4661ed88a30c99a7a9449aa84174"),  # USDC (Polygon)
    ("polygon-mainnet", "0xc2132d05d31c914a87c6611c10748aeb04b58e8f"),  # USDT (Polygon)
]

# fundedby 默认查询地址
DEFAULT_FUNDEDBY_ADDRESS = "0x8f5419c8797cbdecaf3f2f1910d192f4306d527d"


def _env(name: str):
    v = os.getenv(name)
    return v.strip() if v and v.strip() else None


def get_alchemy_rpc_url() -> str:
    """
    获取 Alchemy RPC 地址
    优先使用 ALCHEMY_RPC_URL，否则由 ALCHEMY_NETWORK + ALCHEMY_API_KEY 拼接
    """
    url = _env("ALCHEMY_RPC_URL")
    if url:
        return url
    network = _env("ALCHEMY_NETWORK") or DEFAULT_ALCHEMY_NETWORK
    return ALCHEMY_RPC_TEMPLATE.format(network=network, api_key=_env("ALCHEMY_API_KEY") or "")


def get_alchemy_prices_url() -> str:
    """获取 Alchemy 价格查询地址（ALCHEMY_PRICES_API_KEY 未设置时使用 ALCHEMY_API_KEY）"""
    api_key = _env("ALCHEMY_PRICES_API_KEY") or _env("ALCHEMY_API_KEY") or ""
    return ALCHEMY_PRICES_TEMPLATE.format(api_key=api_key)


def get_etherscan_api_key() -> str:
    return _env("ETHERSCAN_API_KEY") or ""


def get_chain_id(chain) -> str:
    """
    链名称 -> Etherscan chainid
    未指定时返回以太坊主网 "1"；纯数字直接当作 chainid；不支持的链抛出 ValueError
    """
    if chain is None or not str(chain).strip():
        return DEFAULT_CHAIN_ID
    chain = str(chain).strip().lower()
    if chain.isdigit():
        return chain
    chain_id = CHAIN_ID_MAP.get(chain)
    if not chain_id:
        raise ValueError(f"不支持的链: {chain}（支持的链: {', '.join(CHAIN_ID_MAP.keys())}）")
    return chain_id


def get_request_timeout() -> float:
    """请求超时时间（秒），CHAIN_QUERY_TIMEOUT 无效时使用默认值"""
    v = _env("CHAIN_QUERY_TIMEOUT")
    if v is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(v)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT
