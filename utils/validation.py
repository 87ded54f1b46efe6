"""
Validation utilities for operator input and settings.

Provides validation functions for operator selections and the
service base URL.
"""

from typing import Tuple
from urllib.parse import urlparse


def validate_entry_id(entry_id: str) -> Tuple[bool, str]:
    """
    Validate an entry id chosen for deletion.
    
    Args:
        entry_id: Identifier selected by the operator
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not entry_id:
        return False, "请先选择要删除的FAQ"
    
    return True, ""


def validate_base_url(url: str) -> Tuple[bool, str]:
    """
    Validate the FAQ service base URL.
    
    Args:
        url: Base address, e.g. https://example.workers.dev
    
    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url:
        return False, "服务地址不能为空"
    
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return False, f"服务地址无效: {url}"
    
    return True, ""
