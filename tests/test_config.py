"""Tests for application settings."""
import pytest

from employee_api.core.config import Settings


class TestSettings:
    def test_database_url(self):
        s = Settings(db_user="u", db_password="p", db_host="h", db_port=5433, db_name="n")
        assert s.database_url == "postgresql+asyncpg://u:p@h:5433/n"

    def test_database_url_with_ssl(self):
        s = Settings(db_ssl=True)
        assert s.database_url.endswith("?ssl=require")

    def test_cors_origins_list(self):
        s = Settings(cors_allowed_origins=" http://a.test , ,https://b.test")
        assert s.cors_origins_list == ["http://a.test", "https://b.test"]

    def test_default_password_rejected(self):
        with pytest.raises(ValueError, match="db_password"):
            Settings(db_password="CHANGE_ME", debug=False).validate_secrets()

    def test_default_password_allowed_in_debug(self):
        Settings(db_password="CHANGE_ME", debug=True).validate_secrets()

    def test_page_size_bounds(self):
        with pytest.raises(ValueError, match="default_page_size"):
            Settings(db_password="x", default_page_size=500, max_page_size=100).validate_secrets()

    def test_page_size_bounds_checked_in_debug(self):
        with pytest.raises(ValueError, match="default_page_size"):
            Settings(debug=True, default_page_size=0).validate_secrets()
