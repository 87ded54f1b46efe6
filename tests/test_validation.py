"""
Unit tests for validation utilities.
"""

from utils.validation import (
    validate_base_url,
    validate_entry_id
)


def test_validate_entry_id():
    assert validate_entry_id("abc") == (True, "")
    
    is_valid, error_msg = validate_entry_id("")
    assert is_valid == False
    assert "删除" in error_msg
    
    assert validate_entry_id(None)[0] == False


def test_validate_base_url():
    assert validate_base_url("https://smart-faq-worker.fpl-test.workers.dev")[0]
    assert validate_base_url("http://localhost:8787")[0]
    assert not validate_base_url("")[0]
    assert not validate_base_url("ftp://example.com")[0]
    assert not validate_base_url("example.com")[0]
