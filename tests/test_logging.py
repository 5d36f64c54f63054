import logging
from unittest.mock import MagicMock

import pytest
from django.db import OperationalError

from config.settings import mask_sensitive_data
from modules.products.exceptions import ProductLookupFailed
from modules.products.services import ProductService


class TestSensitiveDataMasking:
    def test_password_masked_in_log_output(self):
        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]
        assert "***MASKED***" in result["header"]

    def test_database_url_secret_masked(self):
        event_dict = {"event": "test", "error": "secret: hunter2 rejected"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "hunter2" not in result["error"]

    def test_non_sensitive_data_unchanged(self):
        event_dict = {"event": "product.retrieved", "slug": "serum-x"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["slug"] == "serum-x"
        assert result["event"] == "product.retrieved"


class TestLookupFailureLogging:
    def test_storage_fault_is_logged_with_slug(self, caplog):
        repo = MagicMock()
        repo.get_by_slug.side_effect = OperationalError("no such table: products")
        service = ProductService(repository=repo)

        with caplog.at_level(logging.ERROR):
            with pytest.raises(ProductLookupFailed):
                service.get_visible_product_by_slug("serum-x")

        messages = [record.getMessage() for record in caplog.records]
        assert any("product.lookup_failed" in m and "serum-x" in m for m in messages)
