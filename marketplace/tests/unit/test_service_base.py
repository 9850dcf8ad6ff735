import logging

import pytest

from marketplace.services import BaseService, ErrorCodes, ProductNotFound, paginate, validate_sort


class EchoService(BaseService):
    @BaseService.log_performance
    def echo(self, value):
        return value

    @BaseService.log_performance
    def missing(self):
        raise ProductNotFound(42)


@pytest.mark.unit
class TestPaginate:
    def test_pages_do_not_overlap(self):
        items = [1, 2, 3]

        assert paginate(items, 0, 2) == [1, 2]
        assert paginate(items, 1, 2) == [3]

    def test_out_of_range_page_is_empty(self):
        assert paginate([1, 2, 3], 5, 2) == []

    def test_negative_page_is_empty(self):
        assert paginate([1, 2, 3], -1, 2) == []

    def test_first_page_of_nothing_is_empty(self):
        assert paginate([], 0, 10) == []

    def test_rejects_non_positive_page_size(self):
        with pytest.raises(ValueError):
            paginate([1], 0, 0)


@pytest.mark.unit
class TestValidateSort:
    def test_default_when_empty(self):
        assert validate_sort([], {"id", "name"}, default=("id",)) == ["id"]

    def test_appends_id_tiebreaker(self):
        assert validate_sort(["-name"], {"id", "name"}, default=("id",)) == ["-name", "id"]

    def test_keeps_explicit_id(self):
        assert validate_sort(["-id"], {"id", "name"}, default=("id",)) == ["-id"]

    def test_rejects_unknown_field(self):
        with pytest.raises(ValueError):
            validate_sort(["password"], {"id", "name"}, default=("id",))


@pytest.mark.unit
class TestBaseService:
    def test_logger_named_after_class(self):
        assert EchoService().logger.name.endswith("EchoService")

    def test_log_performance_passes_result_through(self, caplog):
        with caplog.at_level(logging.INFO):
            assert EchoService().echo("ok") == "ok"

        assert "EchoService.echo completed" in caplog.text

    def test_log_performance_logs_domain_error_as_warning(self, caplog):
        with caplog.at_level(logging.INFO), pytest.raises(ProductNotFound):
            EchoService().missing()

        assert ErrorCodes.PRODUCT_NOT_FOUND in caplog.text
        assert any(record.levelno == logging.WARNING for record in caplog.records)
