"""
测试代币价格查询
"""
import json
from unittest.mock import patch, MagicMock

import requests

from chain_query.config import DEFAULT_PRICE_TOKENS
from chain_query.providers.prices import build_price_payload, get_token_price
from chain_query.utils import format_price_entry

PRICE_URL = "https://api.g.alchemy.com/prices/v1/test-key/tokens/by-address"


def _response(body):
    resp = MagicMock()
    resp.json.return_value = body
    return resp


def test_default_payload_has_eight_tokens_on_two_networks():
    payload = build_price_payload()
    addresses = payload["addresses"]
    assert len(addresses) == 8
    assert {a["network"] for a in addresses} == {"eth-mainnet", "polygon-mainnet"}
    assert addresses[0] == {"network": "eth-mainnet", "address": "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2"}
    assert len(DEFAULT_PRICE_TOKENS) == 8


def test_custom_tokens_payload():
    payload = build_price_payload([("base-mainnet", "0x1")])
    assert payload == {"addresses": [{"network": "base-mainnet", "address": "0x1"}]}


def test_price_entry_lines():
    assert format_price_entry({"address": "0xa", "error": "Token not found"}) == "地址: 0xa 查询出错: Token not found"
    assert format_price_entry({"address": "0xb", "prices": []}) == "地址: 0xb 没有价格信息"
    assert format_price_entry({"address": "0xc"}) == "地址: 0xc 没有价格信息"
    line = format_price_entry({
        "address": "0xd",
        "prices": [{"currency": "usd", "value": "3421.12", "lastUpdatedAt": "2025-01-01T00:00:00Z"}],
    })
    assert line == "地址: 0xd 价格: 3421.12 usd 更新时间: 2025-01-01T00:00:00Z"


def test_success_prints_each_entry(capsys):
    body = {"data": [
        {"network": "eth-mainnet", "address": "0xa", "prices": [
            {"currency": "usd", "value": "1.0001", "lastUpdatedAt": "2025-01-01T00:00:00Z"}]},
        {"network": "eth-mainnet", "address": "0xb", "error": "Token not found"},
        {"network": "polygon-mainnet", "address": "0xc", "prices": []},
    ]}
    with patch("chain_query.providers.prices.requests.post", return_value=_response(body)) as post:
        result = get_token_price(url=PRICE_URL)

    assert result == body
    args, kwargs = post.call_args
    assert args[0] == PRICE_URL
    assert kwargs["headers"] == {"Content-Type": "application/json"}
    assert len(kwargs["json"]["addresses"]) == 8

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "地址: 0xa 价格: 1.0001 usd 更新时间: 2025-01-01T00:00:00Z",
        "地址: 0xb 查询出错: Token not found",
        "地址: 0xc 没有价格信息",
    ]


def test_error_entry_shows_error_not_price(capsys):
    body = {"data": [{"address": "0xe", "error": "rate limited", "prices": [{"value": "9", "currency": "usd"}]}]}
    with patch("chain_query.providers.prices.requests.post", return_value=_response(body)):
        get_token_price(url=PRICE_URL)

    out = capsys.readouterr().out
    assert "查询出错: rate limited" in out
    assert "价格:" not in out


def test_missing_data_logs_raw_response(capsys):
    body = {"error": {"message": "Unauthorized"}}
    with patch("chain_query.providers.prices.requests.post", return_value=_response(body)):
        result = get_token_price(url=PRICE_URL)

    assert result == body
    out = capsys.readouterr().out
    assert out.startswith("返回数据格式异常:")
    assert json.loads(out[len("返回数据格式异常:"):]) == body
    assert "地址:" not in out


def test_connection_error_is_swallowed(capsys):
    err = requests.exceptions.ConnectionError("Connection refused")
    with patch("chain_query.providers.prices.requests.post", side_effect=err):
        assert get_token_price(url=PRICE_URL) is None

    captured = capsys.readouterr()
    lines = captured.err.strip().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("价格查询出错:")


def test_prices_key_falls_back_to_alchemy_key(monkeypatch):
    monkeypatch.delenv("ALCHEMY_PRICES_API_KEY", raising=False)
    monkeypatch.setenv("ALCHEMY_API_KEY", "shared")
    with patch("chain_query.providers.prices.requests.post", return_value=_response({"data": []})) as post:
        get_token_price()

    assert post.call_args[0][0] == "https://api.g.alchemy.com/prices/v1/shared/tokens/by-address"


def test_odd_price_shapes_do_not_escape(capsys):
    body = {"data": [
        {"address": "0xa", "prices": {"value": "1"}},
        {"address": "0xb", "prices": ["3.2"]},
    ]}
    with patch("chain_query.providers.prices.requests.post", return_value=_response(body)):
        result = get_token_price(url=PRICE_URL)

    assert result == body
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out.strip().splitlines() == [
        "地址: 0xa 没有价格信息",
        "地址: 0xb 没有价格信息",
    ]


def test_every_entry_gets_a_line(capsys):
    body = {"data": [None, "0xc", {"address": "0xd", "error": "Token not found"}]}
    with patch("chain_query.providers.prices.requests.post", return_value=_response(body)):
        get_token_price(url=PRICE_URL)

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == [
        "地址: None 没有价格信息",
        "地址: None 没有价格信息",
        "地址: 0xd 查询出错: Token not found",
    ]


def test_formatting_failure_is_swallowed(capsys):
    with patch("chain_query.providers.prices.requests.post", return_value=_response({"data": []})), \
            patch("chain_query.providers.prices.print_token_prices", side_effect=ValueError("bad entry")):
        assert get_token_price(url=PRICE_URL) is None

    lines = capsys.readouterr().err.strip().splitlines()
    assert lines == ["价格查询出错: bad entry"]
