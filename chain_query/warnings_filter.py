"""
过滤 urllib3 和其他库的警告信息
"""
import warnings

def suppress_warnings():
    """抑制常见的警告信息"""
    # urllib3 v2 在 LibreSSL / 旧 OpenSSL 上的提示
    warnings.filterwarnings('ignore', message='.*urllib3 v2 only supports OpenSSL.*')
    warnings.filterwarnings('ignore', message='.*NotOpenSSLWarning.*')
    warnings.filterwarnings('ignore', category=UserWarning, module='urllib3')
