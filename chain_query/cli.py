"""
CLI模块 - 命令行接口
每次运行只执行一个查询
"""
import sys
from typing import Optional, List, Tuple

from dotenv import load_dotenv

from .config import DEFAULT_FUNDEDBY_ADDRESS, CHAIN_ID_MAP, get_chain_id
from .providers import get_asset_transfers, get_token_price, get_funded_by
from .utils import print_separator
from .warnings_filter import suppress_warnings


class UsageError(Exception):
    """命令行参数错误"""


def parse_token_arg(arg: str) -> Tuple[str, str]:
    """解析 network:address 格式的代币参数"""
    network, sep, address = arg.partition(":")
    if not sep or not network or not address:
        raise UsageError(f"代币参数格式错误: {arg}（应为 network:address）")
    return network, address


def parse_quantity(arg: str, name: str):
    """解析区块号/数量：十进制转 int，0x 开头或 latest 等原样保留"""
    if arg.isdigit():
        return int(arg)
    if arg in ("latest", "earliest", "pending"):
        return arg
    if arg.startswith("0x") and len(arg) > 2:
        try:
            int(arg[2:], 16)
        except ValueError:
            raise UsageError(f"{name} 格式错误: {arg}（包含无效的十六进制字符）")
        return arg
    raise UsageError(f"{name} 格式错误: {arg}")


# 需要带值的选项 -> opts 中的字段
VALUE_OPTIONS = {
    "--apikey": "api_key", "-k": "api_key",
    "--chain": "chain", "-C": "chain",
    "--to": "to_address",
    "--category": "categories",
    "--max-count": "max_count",
    "--from-block": "from_block",
    "--to-block": "to_block",
}

# 各模式可用的带值选项
MODE_OPTIONS = {
    'transfers': {"to_address", "categories", "max_count", "from_block", "to_block"},
    'price': set(),
    'fundedby': {"api_key", "chain"},
}

# 各模式最多接受的位置参数个数（None 表示不限）
MODE_MAX_POSITIONAL = {
    'transfers': 0,
    'price': None,
    'fundedby': 1,
}


def check_mode_args(opts: dict, given: List[str]):
    """检查位置参数个数和选项是否适用于当前模式"""
    mode = opts["mode"]
    for option in given:
        if VALUE_OPTIONS[option] not in MODE_OPTIONS[mode]:
            raise UsageError(f"{option} 不能用于 --{mode}")

    limit = MODE_MAX_POSITIONAL[mode]
    if limit is not None and len(opts["positional"]) > limit:
        extra = " ".join(opts["positional"][limit:])
        raise UsageError(f"--{mode} 多余的参数: {extra}")

    if mode == 'price':
        opts["tokens"] = [parse_token_arg(arg) for arg in opts["positional"]] or None
    if mode == 'fundedby':
        try:
            opts["chain_id"] = get_chain_id(opts["chain"])
        except ValueError as e:
            raise UsageError(str(e))


def parse_args(args: List[str]) -> dict:
    """
    解析命令行参数
    返回: dict，包含 mode 以及各查询需要的参数
    """
    opts = {
        "mode": None,
        "positional": [],
        "api_key": None,
        "chain": None,
        "chain_id": None,
        "to_address": None,
        "categories": [],
        "max_count": None,
        "from_block": None,
        "to_block": None,
        "tokens": None,
    }
    given = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ['--transfers', '-t']:
            opts["mode"] = 'transfers'
        elif arg in ['--price', '-p']:
            opts["mode"] = 'price'
        elif arg in ['--fundedby', '-f']:
            opts["mode"] = 'fundedby'
        elif arg in ['--help', '-h']:
            opts["mode"] = 'help'
        elif arg in VALUE_OPTIONS:
            if i + 1 >= len(args):
                raise UsageError(f"{arg} 需要指定值")
            key = VALUE_OPTIONS[arg]
            value = args[i + 1]
            i += 1  # 跳过下一个参数，已作为选项值读取
            given.append(arg)
            if key == "categories":
                opts["categories"].extend(c.strip() for c in value.split(",") if c.strip())
            elif key in ("max_count", "from_block", "to_block"):
                opts[key] = parse_quantity(value, arg)
            else:
                opts[key] = value
        elif arg.startswith('-'):
            raise UsageError(f"未知选项: {arg}")
        else:
            opts["positional"].append(arg)
        i += 1

    # 兼容原来的固定入口：不带选项时查询默认地址的 fundedby
    if opts["mode"] is None:
        if opts["positional"]:
            raise UsageError("必须指定一个选项 (--transfers, --price 或 --fundedby)")
        opts["mode"] = 'fundedby'
    if opts["mode"] != 'help':
        check_mode_args(opts, given)
    return opts


def print_usage():
    """打印使用说明"""
    print("使用方法:")
    print("  python3 main.py [选项] [参数]")
    print()
    print("选项:")
    print("  --transfers, -t            查询资产转账 (alchemy_getAssetTransfers)")
    print("      --to <地址>            接收地址")
    print("      --category <类别>      转账类别，可重复或用逗号分隔（默认 internal）")
    print("      --from-block <区块>    起始区块（默认 0x0）")
    print("      --to-block <区块>      结束区块（默认 latest）")
    print("      --max-count <数量>     最大返回数量（默认 0x3e8）")
    print("  --price, -p [network:address ...]")
    print("                             查询代币价格（不指定则查询默认 8 个代币）")
    print("  --fundedby, -f [地址]      查询地址资金来源 (Etherscan fundedby)")
    print("      --apikey, -k <key>     Etherscan API key（默认读取 ETHERSCAN_API_KEY）")
    print("      --chain, -C <链>       链名称或 chainid（默认 1）")
    print(f"                             支持的链: {', '.join(CHAIN_ID_MAP.keys())}")
    print("  --help, -h                 显示帮助信息")
    print()
    print("环境变量 (.env):")
    print("  ALCHEMY_API_KEY, ALCHEMY_NETWORK, ALCHEMY_RPC_URL, ALCHEMY_PRICES_API_KEY,")
    print("  ETHERSCAN_API_KEY, CHAIN_QUERY_TIMEOUT")
    print()
    print("示例:")
    print("  python3 main.py --transfers --to 0x6Df01209c6bFb652B8a1F00fAae229a317Dd5dE3")
    print("  python3 main.py --price eth-mainnet:0xdac17f958d2ee523a2206206994597c13d831ec7")
    print("  python3 main.py --fundedby 0x8f5419c8797cbdecaf3f2f1910d192f4306d527d --chain ethereum")


def run_query(opts: dict):
    """根据模式执行查询"""
    mode = opts["mode"]
    positional = opts["positional"]

    if mode == 'transfers':
        kwargs = {}
        if opts["to_address"]:
            kwargs["to_address"] = opts["to_address"]
        if opts["categories"]:
            kwargs["categories"] = opts["categories"]
        if opts["max_count"] is not None:
            kwargs["max_count"] = opts["max_count"]
        if opts["from_block"] is not None:
            kwargs["from_block"] = opts["from_block"]
        if opts["to_block"] is not None:
            kwargs["to_block"] = opts["to_block"]
        return get_asset_transfers(**kwargs)

    if mode == 'price':
        return get_token_price(opts["tokens"])

    if mode == 'fundedby':
        address = positional[0] if positional else DEFAULT_FUNDEDBY_ADDRESS
        return get_funded_by(address, opts["api_key"], opts["chain_id"])

    raise UsageError(f"未知模式: {mode}")


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    suppress_warnings()
    load_dotenv()  # 自动加载.env文件
    args = sys.argv[1:] if argv is None else argv

    try:
        opts = parse_args(args)
        if opts["mode"] == 'help':
            print_usage()
            return 0

        print_separator()
        print("链上数据查询工具")
        print_separator()
        print()
        # 查询失败只打印错误，进程仍正常退出
        run_query(opts)
    except UsageError as e:
        print_usage()
        print()
        print(f"错误: {e}")
        sys.exit(1)
    return 0
