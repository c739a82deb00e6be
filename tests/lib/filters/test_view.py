import logging

from sheetfilter.lib.filters.builtins import CustomFiltersFilter
from sheetfilter.lib.filters.view import SheetView


def _price_over(n):
    return CustomFiltersFilter("price", {"custom_filter_items": [{"comparator": "greaterThan", "operand": n}]})


def _name_not_blank():
    return CustomFiltersFilter("name", {"custom_filter_items": [{"comparator": "notBlank"}]})


def test_sheet_view_compute_without_filters_returns_copy_and_equal(sheet_df):
    view = SheetView(sheet_df)
    result = view.compute()
    assert result.equals(sheet_df)
    assert result is not sheet_df
    assert view.hidden_index().empty


def test_sheet_view_filter_is_immutable_and_combines_filters(sheet_df):
    view = SheetView(sheet_df)
    view1 = view.filter(_price_over(5))
    view2 = view1.filter(_name_not_blank())

    assert view.compute().equals(sheet_df)
    assert view1.compute().index.tolist() == [3, 5, 6]
    assert view2.compute().index.tolist() == [3, 6]


def test_sheet_view_filter_accepts_sequence_of_filters(sheet_df):
    view = SheetView(sheet_df).filter([_price_over(5), _name_not_blank()])
    assert len(view.filters) == 2
    assert view.compute().index.tolist() == [3, 6]


def test_hidden_index_lists_rows_to_hide(sheet_df):
    view = SheetView(sheet_df, filters=(_price_over(5),))
    assert view.hidden_index().tolist() == [2, 4]


def test_head_materializes_and_limits_rows(sheet_df):
    view = SheetView(sheet_df, filters=(_name_not_blank(),))
    assert len(view.head(2)) == 2


def test_to_xml_concatenates_custom_filter_fragments(sheet_df):
    view = SheetView(sheet_df).filter([_price_over(5), _name_not_blank()])
    assert view.to_xml() == (
        '<customFilters><customFilter operator="greaterThan" val="5" /></customFilters>'
        '<customFilters><customFilter operator="notEqual" val=" " /></customFilters>'
    )


def test_compute_logs_visible_row_count(sheet_df, caplog):
    with caplog.at_level(logging.DEBUG, logger="sheetfilter.lib.filters.view"):
        SheetView(sheet_df, filters=(_price_over(5),)).compute()
    assert "visíveis=3/5" in caplog.text


def test_to_xml_writes_and_combinations_and_logs_filters_without_file_form(sheet_df, caplog):
    price, name = _price_over(5), _name_not_blank()
    view = SheetView(sheet_df).filter([price & name, price | name])

    with caplog.at_level(logging.DEBUG, logger="sheetfilter.lib.filters.view"):
        xml = view.to_xml()

    assert xml == price.write_xml() + name.write_xml()
    assert "sem forma no arquivo" in caplog.text
