from datetime import date

import pytest

from domain.rates import Rate, RateTable
from tests.helpers.nbp_documents import make_document


@pytest.fixture(scope="function")
def rate_table() -> RateTable:
    return RateTable(
        id="203/A/NBP/2026",
        published_at=date(2026, 10, 16),
        rates=(
            Rate(code="EUR", name="euro", rate=4.32),
            Rate(code="USD", name="dolar amerykański", rate=4.00),
            Rate(code="CHF", name="frank szwajcarski", rate=4.50),
        ),
    )


@pytest.fixture(scope="function")
def nbp_document() -> str:
    return make_document()


@pytest.fixture(scope="function")
def nbp_payload(nbp_document: str) -> bytes:
    return nbp_document.encode("iso-8859-2")
