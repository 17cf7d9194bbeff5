#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
链上数据查询工具 - 主入口
"""
import sys
import os

# 添加项目根目录到路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from chain_query.cli import main

if __name__ == "__main__":
    sys.exit(main())
