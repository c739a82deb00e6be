import pandas as pd
import pytest

from sheetfilter.lib.filters.custom_filters import FilterSet


@pytest.fixture
def sheet_df():
    """Planilha pequena com números, textos e células vazias."""
    return pd.DataFrame(
        {
            "price": [3, 7, None, 12, 10],
            "name": ["Apple", "banana", "Cherry pie", None, "BANANA split"],
        },
        index=[2, 3, 4, 5, 6],
    )


@pytest.fixture
def make_filter_set():
    def _factory(*entries, combine_with_and: bool = False) -> FilterSet:
        return FilterSet(
            {"and": combine_with_and, "custom_filter_items": list(entries)}
        )

    return _factory
